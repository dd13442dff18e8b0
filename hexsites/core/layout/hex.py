"""
Axial hex indices.

A hexagonal cell is identified by axial coordinates (q, r), with the
implicit third cube coordinate s = -q - r, plus an integer key used to
address the cell (and the sites derived from it) in a combined lattice.
"""

from dataclasses import dataclass, replace
from typing import List


@dataclass(frozen=True)
class Hex:
    """
    Axial hex index.

    Attributes
    ----------
    q, r : int
        Axial coordinates
    key : int
        Lookup key, 0 when unset
    """
    q: int
    r: int
    key: int = 0

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: 'Hex') -> 'Hex':
        return Hex(self.q + other.q, self.r + other.r)

    def __sub__(self, other: 'Hex') -> 'Hex':
        return Hex(self.q - other.q, self.r - other.r)

    def scale(self, k: int) -> 'Hex':
        return Hex(self.q * k, self.r * k)

    def length(self) -> int:
        return (abs(self.q) + abs(self.r) + abs(self.s)) // 2

    def distance(self, other: 'Hex') -> int:
        """Number of hex steps between two cells."""
        return (self - other).length()

    def neighbor(self, direction: int) -> 'Hex':
        """Adjacent cell in one of the six directions (taken mod 6)."""
        return self + HEX_DIRECTIONS[direction % 6]

    def with_key(self, key: int) -> 'Hex':
        return replace(self, key=key)


HEX_DIRECTIONS = (
    Hex(1, 0), Hex(1, -1), Hex(0, -1),
    Hex(-1, 0), Hex(-1, 1), Hex(0, 1),
)


def hex_ring(center: Hex, radius: int) -> List[Hex]:
    """
    Cells at exactly `radius` steps from `center`.

    Keys are left unset. Radius 0 returns just the center (without key).
    """
    if radius < 0:
        raise ValueError("Ring radius must be non-negative")
    if radius == 0:
        return [Hex(center.q, center.r)]

    results = []
    cell = center + HEX_DIRECTIONS[4].scale(radius)
    for direction in range(6):
        for _ in range(radius):
            results.append(cell)
            cell = cell.neighbor(direction)
    return results


def hex_spiral(center: Hex, radius: int) -> List[Hex]:
    """
    All cells within `radius` of `center`, ring by ring outwards.

    Returns
    -------
    hexes : List[Hex]
        1 + 3*radius*(radius+1) cells, keyed 1..N in spiral order.
    """
    if radius < 0:
        raise ValueError("Spiral radius must be non-negative")
    cells = []
    for k in range(radius + 1):
        cells.extend(hex_ring(center, k))
    return [cell.with_key(i) for i, cell in enumerate(cells, start=1)]
