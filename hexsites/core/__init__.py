"""
Core geometry for honeycomb lattices.

- xy: real-space sites, lattices, hex -> site transforms, ordered union
- layout: axial hex indices and real-space unit cells

These are the building blocks used to assemble real-space operators
(e.g. tight-binding Hamiltonians) over a combined lattice.
"""

from .exceptions import InvalidLabelError

from .xy import (
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
)

from .layout import (
    Hex,
    HEX_DIRECTIONS,
    hex_ring,
    hex_spiral,
    Orientation,
    UnitCell,
    POINTY,
    FLAT,
    LAYOUT_REGISTRY,
    create_unit_cell,
)

__all__ = [
    'InvalidLabelError',

    # Sites and lattices
    'Point',
    'Site',
    'Tile',
    'points_equal',
    'Lattice',

    # Transforms
    'hex_to_center',
    'corner_offset',
    'hex_to_site',
    'hex_to_corners',
    'tile_to_lattice',
    'hex_centers',

    # Union
    'ordered_union',
    'build_flake',

    # Layout
    'Hex',
    'HEX_DIRECTIONS',
    'hex_ring',
    'hex_spiral',
    'Orientation',
    'UnitCell',
    'POINTY',
    'FLAT',
    'LAYOUT_REGISTRY',
    'create_unit_cell',
]
