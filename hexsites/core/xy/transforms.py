"""
Hex index -> real-space geometry.

Pure functions mapping axial hex indices onto Cartesian coordinates for a
given unit cell: hexagon centers, corner offsets, full hexagons (tiles)
and single-sublattice honeycomb sites.

Vectorization
-------------
The hex argument (and the label of `hex_to_site`) can be a single value or
a list/tuple/ndarray. Array arguments are broadcast elementwise through
`numpy.frompyfunc` and an object ndarray of the broadcast shape is
returned, each element equal to the scalar result:

>>> cell = create_unit_cell('pointy')
>>> sites = hex_to_site(cell, [Hex(0, 0, 1), Hex(1, 0, 2)], 'A')
>>> sites.shape
(2,)

The unit cell is always a single (scalar) object.

Geometry
--------
For a unit cell with basis vectors uq, ur, size s and origin o:

    ⎡x⎤   ⎡uq.x  ur.x⎤   ⎡q⎤
    ⎥ ⎥ = ⎥          ⎥ × ⎥ ⎥ × s + o
    ⎣y⎦   ⎣uq.y  ur.y⎦   ⎣r⎦

and corner i (1..6) sits at angle 2π/6 * (orientation.angle + i) from
the center, at distance s.
"""

import numpy as np
from typing import TYPE_CHECKING

from ...constants import NUM_CORNERS, SUBLATTICE_LABELS, SUBLATTICE_CORNER
from ..exceptions import InvalidLabelError
from .base import Point, Site, Tile
from .lattice import Lattice

if TYPE_CHECKING:
    from ..layout.hex import Hex
    from ..layout.unit_cell import UnitCell


def _elementwise(func, *args):
    """Apply `func` to scalar args, or broadcast it over array-like args."""
    if not any(isinstance(arg, (list, tuple, np.ndarray)) for arg in args):
        return func(*args)
    return np.frompyfunc(func, len(args), 1)(*args)


def _center(unit_cell: 'UnitCell', H: 'Hex') -> Point:
    basis = unit_cell.orientation
    # Project [q, r] along the unit-cell basis
    x = basis.uq.x * H.q + basis.ur.x * H.r
    y = basis.uq.y * H.q + basis.ur.y * H.r
    # Rescale and recenter
    return Point(float(x * unit_cell.size + unit_cell.origin.x),
                 float(y * unit_cell.size + unit_cell.origin.y))


def hex_to_center(unit_cell: 'UnitCell', H):
    """
    Real-space center of a hexagon.

    Parameters
    ----------
    unit_cell : UnitCell
        Real-space layout (basis vectors, size, origin)
    H : Hex or array-like of Hex

    Returns
    -------
    center : Point or np.ndarray of Point
    """
    return _elementwise(lambda h: _center(unit_cell, h), H)


def corner_offset(unit_cell: 'UnitCell', i: int) -> Point:
    """
    Offset from a hexagon center to its i-th corner.

    Parameters
    ----------
    unit_cell : UnitCell
    i : int
        Corner index, 1..6

    Returns
    -------
    offset : Point
        (size*cos(angle), size*sin(angle)) with
        angle = 2π/6 * (orientation.angle + i)

    Notes
    -----
    orientation.angle is a phase shift: 0.5 gives pointy-top hexagons,
    0.0 flat-top ones.
    """
    if not 1 <= i <= NUM_CORNERS:
        raise ValueError(f"Corner index must be in 1..{NUM_CORNERS}, got {i}")
    angle = 2.0 * np.pi / NUM_CORNERS * (unit_cell.orientation.angle + i)
    return Point(float(unit_cell.size * np.cos(angle)),
                 float(unit_cell.size * np.sin(angle)))


def _site(unit_cell: 'UnitCell', H: 'Hex', label: str) -> Site:
    if label not in SUBLATTICE_CORNER:
        raise InvalidLabelError(
            f"Honeycomb sites must have 'A' or 'B' label, got {label!r}")
    position = _center(unit_cell, H) + corner_offset(unit_cell, SUBLATTICE_CORNER[label])
    return Site(position.x, position.y, label, key=H.key)


def hex_to_site(unit_cell: 'UnitCell', H, label):
    """
    The sublattice-`label` site of the unit cell at hex H.

    Site 'A' is corner 1 of the hexagon, site 'B' corner 2. The key of the
    hex index is carried over to the site unchanged.

    This gives the two inequivalent sites of one unit cell only; edge
    sites of finite flakes are not accounted for.

    Parameters
    ----------
    unit_cell : UnitCell
    H : Hex or array-like of Hex
    label : str or array-like of str
        'A' or 'B'; broadcast against H

    Returns
    -------
    site : Site or np.ndarray of Site

    Raises
    ------
    InvalidLabelError
        If any label is not 'A' or 'B'
    """
    return _elementwise(lambda h, lab: _site(unit_cell, h, lab), H, label)


def _corners(unit_cell: 'UnitCell', H: 'Hex') -> Tile:
    center = _center(unit_cell, H)
    vertices = []
    for i in range(1, NUM_CORNERS + 1):
        position = center + corner_offset(unit_cell, i)
        vertices.append(Site(position.x, position.y, SUBLATTICE_LABELS[(i - 1) % 2]))
    return Tile(tuple(vertices))


def hex_to_corners(unit_cell: 'UnitCell', H):
    """
    All six corners of the hexagon at H, as a Tile.

    Corners are labelled A, B, A, B, A, B in corner order; their keys are
    left unset (0).

    Parameters
    ----------
    unit_cell : UnitCell
    H : Hex or array-like of Hex

    Returns
    -------
    tile : Tile or np.ndarray of Tile
    """
    return _elementwise(lambda h: _corners(unit_cell, h), H)


def _tile_lattice(tile: Tile) -> Lattice:
    return Lattice(vertex.with_key(i) for i, vertex in enumerate(tile.vertices, start=1))


def tile_to_lattice(tile):
    """
    Flatten a Tile into a Lattice.

    Vertices keep their order, labels and coordinates and are keyed 1..6.
    Corners shared with neighbouring hexagons are not merged here; use
    `ordered_union` to combine tiles.

    Parameters
    ----------
    tile : Tile or array-like of Tile

    Returns
    -------
    lattice : Lattice or np.ndarray of Lattice
    """
    return _elementwise(_tile_lattice, tile)


def hex_centers(unit_cell: 'UnitCell', q, r) -> np.ndarray:
    """
    Vectorized hexagon centers from integer axial coordinates.

    Parameters
    ----------
    unit_cell : UnitCell
    q, r : array-like of int
        Axial coordinates, broadcast against each other

    Returns
    -------
    centers : np.ndarray, shape (..., 2)
        Last axis is (x, y).
    """
    q = np.asarray(q, dtype=float)
    r = np.asarray(r, dtype=float)
    basis = unit_cell.orientation
    x = basis.uq.x * q + basis.ur.x * r
    y = basis.uq.y * q + basis.ur.y * r
    origin = np.array([unit_cell.origin.x, unit_cell.origin.y])
    return np.stack(np.broadcast_arrays(x, y), axis=-1) * unit_cell.size + origin
