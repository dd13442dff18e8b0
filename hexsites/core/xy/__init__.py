"""
Real-space coordinates for honeycomb lattice sites.

This module maps axial hex indices onto Cartesian sites and merges site
collections into consistently keyed lattices:

- Point, Site, Tile: immutable value types with tolerance equality
- Lattice: growable ordered collection of sites
- hex_to_center, corner_offset, hex_to_site, hex_to_corners,
  tile_to_lattice: hex index -> geometry
- ordered_union: deduplicating, key-reassigning merge
- build_flake: many hexagons -> one lattice
"""

from .base import Point, Site, Tile, points_equal
from .lattice import Lattice
from .transforms import (
    hex_to_center,
    corner_offset,
    hex_to_site,
    hex_to_corners,
    tile_to_lattice,
    hex_centers,
)
from .union import ordered_union, UNION_METHODS
from .builders import build_flake

__all__ = [
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
    'UNION_METHODS',
    'build_flake',
]
