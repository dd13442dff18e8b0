"""Plotting helpers for honeycomb lattices."""

from .lattice_plotter import plot_lattice

__all__ = ['plot_lattice']
