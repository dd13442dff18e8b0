"""
hexsites: real-space honeycomb lattices from hexagonal grids

Computes Cartesian coordinates of honeycomb (two-sublattice) sites from
axial hex indices, and merges site collections into one deduplicated,
consistently keyed lattice suitable for building real-space operators.

Main Components
---------------
core.layout : Axial hex indices, unit cells (pointy/flat orientations)
core.xy : Points, sites, tiles, lattices, transforms, ordered union
io : Human-readable dumps (text, pandas DataFrame)
visualization : Lattice plots

Quick Start
-----------
>>> from hexsites import Hex, create_unit_cell, hex_to_corners, tile_to_lattice, ordered_union
>>>
>>> cell = create_unit_cell('pointy', size=1.0)
>>> A = tile_to_lattice(hex_to_corners(cell, Hex(0, 0)))
>>> B = tile_to_lattice(hex_to_corners(cell, Hex(1, 0)))
>>> C = ordered_union(A, B)  # two shared corners dropped
>>> len(C)
10
"""

__version__ = "0.1.0"

from .core import (
    InvalidLabelError,
    Point,
    Site,
    Tile,
    points_equal,
    Lattice,
    hex_to_center,
    corner_offset,
    hex_to_site,
    hex_to_corners,
    tile_to_lattice,
    hex_centers,
    ordered_union,
    build_flake,
    Hex,
    hex_ring,
    hex_spiral,
    Orientation,
    UnitCell,
    POINTY,
    FLAT,
    create_unit_cell,
)

__all__ = [
    '__version__',
    'InvalidLabelError',
    'Point',
    'Site',
    'Tile',
    'points_equal',
    'Lattice',
    'hex_to_center',
    'corner_offset',
    'hex_to_site',
    'hex_to_corners',
    'tile_to_lattice',
    'hex_centers',
    'ordered_union',
    'build_flake',
    'Hex',
    'hex_ring',
    'hex_spiral',
    'Orientation',
    'UnitCell',
    'POINTY',
    'FLAT',
    'create_unit_cell',
]
