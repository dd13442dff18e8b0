"""
Human-readable dumps of points, sites and lattices.
"""

import sys
from typing import List, Optional, TextIO

import pandas as pd

from ..core.xy import Point, Site, Tile, Lattice


def _rows(obj) -> List:
    if isinstance(obj, (Point, Site)):
        return [obj]
    if isinstance(obj, Tile):
        return list(obj.vertices)
    if isinstance(obj, Lattice):
        return list(obj)
    if isinstance(obj, (str, bytes)):
        raise TypeError(f"Cannot format object of type {type(obj).__name__}")
    try:
        items = list(obj)
    except TypeError:
        raise TypeError(f"Cannot format object of type {type(obj).__name__}") from None
    rows = []
    for item in items:
        rows.extend(_rows(item))
    return rows


def format_xy(obj, quiet: bool = False) -> str:
    """
    Format coordinates one site per line.

    Parameters
    ----------
    obj : Point, Site, Tile, Lattice or iterable of those
    quiet : bool, optional
        If True, print bare "<x> <y>" lines; otherwise prefix each line
        with "real-space coordinates [x,y]: " (default: False)

    Returns
    -------
    text : str
        Lines joined with newlines, no trailing newline
    """
    prefix = "" if quiet else "real-space coordinates [x,y]: "
    return "\n".join(f"{prefix}{p.x} {p.y}" for p in _rows(obj))


def xy_print(obj, stream: Optional[TextIO] = None, quiet: bool = False) -> None:
    """Write `format_xy(obj, quiet)` to `stream` (default: stdout)."""
    if stream is None:
        stream = sys.stdout
    text = format_xy(obj, quiet=quiet)
    if text:
        stream.write(text + "\n")


def lattice_to_frame(lattice: Lattice) -> pd.DataFrame:
    """
    Tabulate a lattice.

    Returns
    -------
    frame : pd.DataFrame
        One row per site, columns 'key', 'label', 'x', 'y', in lattice order.
    """
    positions = lattice.positions
    return pd.DataFrame({
        'key': lattice.keys,
        'label': lattice.labels,
        'x': positions[:, 0],
        'y': positions[:, 1],
    })
