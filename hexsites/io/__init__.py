"""
Text and tabular output for lattices.
"""

from .dump import format_xy, xy_print, lattice_to_frame

__all__ = [
    'format_xy',
    'xy_print',
    'lattice_to_frame',
]
