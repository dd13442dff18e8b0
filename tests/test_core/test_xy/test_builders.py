"""
Unit tests for build_flake.

Hexagonal graphene flakes have well-known site counts:
benzene (1 ring) 6, coronene (7 rings) 24, circumcoronene (19 rings) 54.
"""

import numpy as np
import pytest
from hexsites.core import Hex, Lattice, build_flake, create_unit_cell, hex_spiral


@pytest.fixture(params=['pointy', 'flat'])
def cell(request):
    return create_unit_cell(request.param, size=1.42)


class TestBuildFlake:
    """Test flake assembly."""

    def test_empty(self, cell):
        """No hexagons, no sites."""
        lattice = build_flake(cell, [])
        assert isinstance(lattice, Lattice)
        assert len(lattice) == 0

    def test_single_hexagon(self, cell):
        """One hexagon gives its six corners."""
        lattice = build_flake(cell, [Hex(0, 0)])
        assert len(lattice) == 6
        assert list(lattice.keys) == [1, 2, 3, 4, 5, 6]

    def test_two_adjacent_hexagons(self, cell):
        """Naphthalene-like pair shares two corners."""
        lattice = build_flake(cell, [Hex(0, 0), Hex(0, 0).neighbor(2)])
        assert len(lattice) == 10
        assert lattice.has_contiguous_keys()

    @pytest.mark.parametrize("radius, expected", [(0, 6), (1, 24), (2, 54)])
    def test_spiral_site_counts(self, cell, radius, expected):
        """Hexagonal flakes have 6 * (radius + 1)**2 sites."""
        lattice = build_flake(cell, hex_spiral(Hex(0, 0), radius))
        assert len(lattice) == expected

    def test_sites_unique_and_balanced(self, cell):
        """Sites are pairwise distinct, with equal A and B counts."""
        lattice = build_flake(cell, hex_spiral(Hex(0, 0), 2))
        positions = lattice.positions
        delta = np.abs(positions[:, None, :] - positions[None, :, :])
        coincident = np.all(delta < 1e-12, axis=-1)

        assert np.count_nonzero(coincident) == len(lattice)
        assert lattice.labels.count('A') == lattice.labels.count('B')

    def test_contiguous_keys(self, cell):
        """The merged lattice is always keyed 1..N."""
        lattice = build_flake(cell, hex_spiral(Hex(0, 0), 2))
        assert lattice.has_contiguous_keys()

    def test_nearest_neighbor_distance(self, cell):
        """Closest pairs sit one bond length (the cell size) apart."""
        lattice = build_flake(cell, hex_spiral(Hex(0, 0), 1))
        positions = lattice.positions
        distances = np.linalg.norm(positions[:, None, :] - positions[None, :, :], axis=-1)
        np.fill_diagonal(distances, np.inf)

        assert np.isclose(distances.min(), cell.size)

    def test_methods_agree(self, cell):
        """KD-tree and broadcast detection build the same flake."""
        hexes = hex_spiral(Hex(0, 0), 2)
        a = build_flake(cell, hexes, method='broadcast')
        b = build_flake(cell, hexes, method='kdtree')

        assert np.array_equal(a.positions, b.positions)
        assert a.labels == b.labels

    def test_progress_bar(self, cell):
        """The progress flag does not change the result."""
        hexes = hex_spiral(Hex(0, 0), 1)
        assert len(build_flake(cell, hexes, progress=True)) == 24


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
