"""
Hexagonal grid layout.

Axial hex indices and the unit cells that place them in real space.
"""

from .hex import Hex, HEX_DIRECTIONS, hex_ring, hex_spiral
from .unit_cell import (
    Orientation,
    UnitCell,
    POINTY,
    FLAT,
    LAYOUT_REGISTRY,
    create_unit_cell,
)

__all__ = [
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
