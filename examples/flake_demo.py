"""
Honeycomb Flake Demo

This example demonstrates:
- Unit cells and hex indices
- Single hexagons (tiles) and their sublattice sites
- Merging tiles with ordered_union, and the resulting key policy
- Building a coronene-sized flake and plotting it
"""

import logging

import matplotlib.pyplot as plt

from hexsites import (
    Hex,
    create_unit_cell,
    hex_to_site,
    hex_to_corners,
    tile_to_lattice,
    ordered_union,
    build_flake,
    hex_spiral,
)
from hexsites.io import xy_print, lattice_to_frame
from hexsites.logging_config import setup_logging
from hexsites.visualization import plot_lattice


def example_single_hexagon(cell):
    """Example 1: One hexagon."""
    print("=" * 60)
    print("Example 1: Corners of a single hexagon")
    print("=" * 60)

    H = Hex(0, 0, key=1)
    tile = hex_to_corners(cell, H)
    xy_print(tile)

    print("\nUnit-cell sites:")
    xy_print([hex_to_site(cell, H, 'A'), hex_to_site(cell, H, 'B')], quiet=True)


def example_union(cell):
    """Example 2: Two hexagons sharing an edge."""
    print("\n" + "=" * 60)
    print("Example 2: ordered_union of two adjacent hexagons")
    print("=" * 60)

    A = tile_to_lattice(hex_to_corners(cell, Hex(0, 0)))
    B = tile_to_lattice(hex_to_corners(cell, Hex(1, 0)))
    C = ordered_union(A, B)

    print(f"\n{C}")
    print(f"Keys: {list(C.keys)}  (gaps where shared corners were dropped)")
    print(f"Renumbered: {list(C.renumbered().keys)}")


def example_flake(cell):
    """Example 3: Coronene flake."""
    print("\n" + "=" * 60)
    print("Example 3: Coronene (7 hexagons)")
    print("=" * 60)

    flake = build_flake(cell, hex_spiral(Hex(0, 0), 1), progress=True)
    print(f"\n{flake}")
    print(lattice_to_frame(flake).head(8).to_string(index=False))

    ax = plot_lattice(flake, show_keys=True, title="Coronene")
    ax.figure.savefig("coronene.png", bbox_inches='tight', dpi=150)
    plt.close(ax.figure)
    print("\nSaved plot to coronene.png")


if __name__ == "__main__":
    setup_logging(logging.DEBUG)
    cell = create_unit_cell('pointy', size=1.42)

    example_single_hexagon(cell)
    example_union(cell)
    example_flake(cell)
