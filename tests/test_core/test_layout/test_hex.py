"""
Unit tests for axial hex indices.
"""

import pytest
from hexsites.core.layout import Hex, HEX_DIRECTIONS, hex_ring, hex_spiral


class TestHexArithmetic:
    """Test axial coordinate arithmetic."""

    def test_cube_constraint(self):
        """q + r + s == 0."""
        H = Hex(3, -5)
        assert H.q + H.r + H.s == 0

    def test_add_sub(self):
        """Addition and subtraction are component-wise and drop the key."""
        a = Hex(1, 2, key=5)
        b = Hex(-3, 1, key=6)
        assert a + b == Hex(-2, 3)
        assert a - b == Hex(4, 1)
        assert (a + b).key == 0

    def test_distance(self):
        """Hex distance counts grid steps."""
        assert Hex(0, 0).distance(Hex(0, 0)) == 0
        assert Hex(0, 0).distance(Hex(2, -1)) == 2
        assert Hex(-1, 3).distance(Hex(2, -2)) == 5

    def test_neighbors(self):
        """All six neighbors are one step away and distinct."""
        center = Hex(1, 1)
        neighbors = [center.neighbor(d) for d in range(6)]

        assert len(set(neighbors)) == 6
        assert all(center.distance(n) == 1 for n in neighbors)

    def test_neighbor_direction_wraps(self):
        """Directions are taken modulo 6."""
        assert Hex(0, 0).neighbor(7) == Hex(0, 0).neighbor(1)
        assert Hex(0, 0).neighbor(-1) == HEX_DIRECTIONS[5]

    def test_with_key(self):
        """with_key copies the index with a new key."""
        assert Hex(1, 2).with_key(3) == Hex(1, 2, key=3)


class TestHexRings:
    """Test ring and spiral generation."""

    @pytest.mark.parametrize("radius", [1, 2, 3])
    def test_ring_size_and_distance(self, radius):
        """A ring holds 6*radius cells, all `radius` away."""
        center = Hex(2, -1)
        ring = hex_ring(center, radius)

        assert len(ring) == 6 * radius
        assert len(set(ring)) == len(ring)
        assert all(center.distance(H) == radius for H in ring)

    def test_ring_zero(self):
        """Radius 0 is the center alone."""
        assert hex_ring(Hex(1, 1), 0) == [Hex(1, 1)]

    @pytest.mark.parametrize("radius, count", [(0, 1), (1, 7), (2, 19), (3, 37)])
    def test_spiral_count(self, radius, count):
        """A spiral holds 1 + 3*radius*(radius+1) cells."""
        assert len(hex_spiral(Hex(0, 0), radius)) == count

    def test_spiral_keys(self):
        """Spiral cells are keyed 1..N, center first."""
        spiral = hex_spiral(Hex(0, 0), 2)

        assert [H.key for H in spiral] == list(range(1, 20))
        assert (spiral[0].q, spiral[0].r) == (0, 0)

    def test_negative_radius_raises(self):
        """Negative radii are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            hex_ring(Hex(0, 0), -1)
        with pytest.raises(ValueError, match="non-negative"):
            hex_spiral(Hex(0, 0), -1)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
