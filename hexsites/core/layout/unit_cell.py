"""
Real-space unit cells for hexagonal grids.

A UnitCell fixes how abstract hex indices land in the plane:

- Orientation: basis vectors uq, ur (one per axial direction) and the
  corner phase `angle` (in units of 60°)
- size: center-to-corner distance, i.e. the honeycomb bond length
- origin: real-space position of Hex(0, 0)

Two standard orientations are provided:

Pointy-top (angle = 0.5):
    uq = [√3, 0]
    ur = [√3/2, 3/2]

Flat-top (angle = 0.0):
    uq = [3/2, √3/2]
    ur = [0, √3]
"""

from dataclasses import dataclass, field
from typing import Tuple

from ...constants import SQRT3
from ..xy.base import Point


@dataclass(frozen=True)
class Orientation:
    """Basis vectors and corner phase of a hexagonal layout."""
    uq: Point
    ur: Point
    angle: float


@dataclass(frozen=True)
class UnitCell:
    """
    Real-space parameterization of a hexagonal grid.

    Parameters
    ----------
    orientation : Orientation
    size : float, optional
        Center-to-corner distance (default: 1.0)
    origin : Point, optional
        Center of Hex(0, 0) (default: (0, 0))
    """
    orientation: Orientation
    size: float = 1.0
    origin: Point = field(default_factory=lambda: Point(0.0, 0.0))

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError("Unit-cell size must be positive")


POINTY = Orientation(uq=Point(SQRT3, 0.0), ur=Point(SQRT3 / 2.0, 1.5), angle=0.5)
FLAT = Orientation(uq=Point(1.5, SQRT3 / 2.0), ur=Point(0.0, SQRT3), angle=0.0)

# Layout registry for name-based construction
LAYOUT_REGISTRY = {
    'pointy': POINTY,
    'flat': FLAT,
}


def create_unit_cell(layout: str = 'pointy',
                     size: float = 1.0,
                     origin: Tuple[float, float] = (0.0, 0.0)) -> UnitCell:
    """
    Factory function to create unit cells from layout names.

    Parameters
    ----------
    layout : str
        'pointy' or 'flat'
    size : float
        Center-to-corner distance
    origin : Tuple[float, float]
        Center of Hex(0, 0)

    Returns
    -------
    unit_cell : UnitCell

    Raises
    ------
    ValueError
        If layout is not recognized or size is not positive

    Examples
    --------
    >>> cell = create_unit_cell('flat', size=1.42)
    >>> cell.orientation is FLAT
    True
    """
    if layout not in LAYOUT_REGISTRY:
        available = ', '.join(LAYOUT_REGISTRY.keys())
        raise ValueError(f"Unknown layout '{layout}'. "
                         f"Available layouts: {available}")

    x0, y0 = origin
    return UnitCell(LAYOUT_REGISTRY[layout], size=size, origin=Point(float(x0), float(y0)))
