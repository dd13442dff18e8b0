"""
Real-space 2D value types for honeycomb lattice sites.

Point, Site and Tile are immutable values. Coordinate equality is defined
once, in `points_equal`, and both Point and Site delegate to it: a Site is
NOT a subclass of Point, it simply carries the same x, y fields plus a
sublattice label and a lookup key.

Equality Semantics
------------------
Two objects are equal when both coordinates differ by less than an
absolute tolerance (1e-12). Labels and keys never take part in the
comparison, so a Site and a Point at the same position compare equal.
Tolerance equality is not transitive, hence none of these types is
hashable.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from ...constants import TOLERANCE, NUM_CORNERS, SUBLATTICE_LABELS
from ..exceptions import InvalidLabelError


def points_equal(a, b, tol: float = TOLERANCE) -> bool:
    """
    Tolerance-based equality on the x, y coordinates of two objects.

    Parameters
    ----------
    a, b : Point or Site
        Anything exposing float attributes `x` and `y`.
    tol : float, optional
        Absolute tolerance, default TOLERANCE (1e-12).

    Returns
    -------
    bool
        True if |a.x - b.x| < tol and |a.y - b.y| < tol.
    """
    return abs(a.x - b.x) < tol and abs(a.y - b.y) < tol


def _has_xy(obj) -> bool:
    return isinstance(obj, (Point, Site))


@dataclass(frozen=True, eq=False)
class Point:
    """
    A point in the real-space plane.

    Attributes
    ----------
    x : float
    y : float
    """
    x: float
    y: float

    def __add__(self, other: 'Point') -> 'Point':
        if not _has_xy(other):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __eq__(self, other) -> bool:
        if not _has_xy(other):
            return NotImplemented
        return points_equal(self, other)

    __hash__ = None

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, eq=False)
class Site:
    """
    A honeycomb lattice site.

    Attributes
    ----------
    x, y : float
        Real-space coordinates
    label : str
        Sublattice, 'A' or 'B'
    key : int
        Lookup index in a combined lattice, 0 when unset

    Raises
    ------
    InvalidLabelError
        If label is not 'A' or 'B'
    """
    x: float
    y: float
    label: str
    key: int = 0

    def __post_init__(self):
        if self.label not in SUBLATTICE_LABELS:
            raise InvalidLabelError(
                f"Honeycomb sites must have 'A' or 'B' label, got {self.label!r}")

    def __eq__(self, other) -> bool:
        if not _has_xy(other):
            return NotImplemented
        return points_equal(self, other)

    __hash__ = None

    @property
    def point(self) -> Point:
        """Coordinates of this site as a plain Point."""
        return Point(self.x, self.y)

    def with_key(self, key: int) -> 'Site':
        """Copy of this site carrying a different lookup key."""
        return replace(self, key=key)


@dataclass(frozen=True)
class Tile:
    """
    The six corners of one hexagon, in corner order 1..6.

    Labels alternate A, B, A, B, A, B (odd 1-based corner index -> 'A').
    """
    vertices: Tuple[Site, ...]

    __hash__ = None

    def __post_init__(self):
        vertices = tuple(self.vertices)
        if len(vertices) != NUM_CORNERS:
            raise ValueError(f"A tile needs exactly {NUM_CORNERS} vertices, "
                             f"got {len(vertices)}")
        for i, vertex in enumerate(vertices):
            if vertex.label != SUBLATTICE_LABELS[i % 2]:
                raise ValueError(f"Corner {i + 1} of a tile must be labelled "
                                 f"'{SUBLATTICE_LABELS[i % 2]}', got {vertex.label!r}")
        object.__setattr__(self, 'vertices', vertices)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(v.label for v in self.vertices)
