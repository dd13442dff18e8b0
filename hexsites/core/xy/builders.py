"""
Finite honeycomb flakes assembled from hexagonal tiles.
"""

import logging
from typing import Iterable

from tqdm import tqdm

from .lattice import Lattice
from .transforms import hex_to_corners, tile_to_lattice
from .union import ordered_union

logger = logging.getLogger(__name__)


def build_flake(unit_cell, hexes: Iterable, progress: bool = False,
                method: str = 'auto') -> Lattice:
    """
    Merge the corners of many hexagons into one deduplicated lattice.

    Each hexagon is turned into a 6-site lattice and merged into the
    running result with `ordered_union`. The result is renumbered after
    every merge so it always has keys 1..N, as `ordered_union` requires
    of its first operand.

    Parameters
    ----------
    unit_cell : UnitCell
        Real-space layout
    hexes : iterable of Hex
        Hexagons to merge, in order (e.g. `hex_spiral(Hex(0, 0), 2)`)
    progress : bool, optional
        Show a tqdm progress bar (default: False)
    method : str, optional
        Duplicate detection method passed to `ordered_union`

    Returns
    -------
    lattice : Lattice
        Unique sites, keyed 1..N in first-seen order

    Examples
    --------
    >>> cell = create_unit_cell('pointy')
    >>> len(build_flake(cell, [Hex(0, 0)]))
    6
    >>> len(build_flake(cell, [Hex(0, 0), Hex(1, 0)]))
    10
    """
    hexes = list(hexes)
    lattice = Lattice()
    for H in tqdm(hexes, desc="Merging tiles", disable=not progress):
        tile = tile_to_lattice(hex_to_corners(unit_cell, H))
        lattice = ordered_union(lattice, tile, method=method).renumbered()

    logger.debug("build_flake: %d hexagons -> %d sites", len(hexes), len(lattice))
    return lattice
