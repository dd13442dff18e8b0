import numpy as np
import matplotlib.pyplot as plt

from ..core.xy import Lattice

sublattice_colors = {'A': '#2E86AB', 'B': '#A23B72'}


def plot_lattice(lattice: Lattice, ax=None, show_keys=False,
                 title="Honeycomb Lattice", marker_size=60):
    """
    Scatter plot of lattice sites, coloured by sublattice.

    Parameters
    ----------
    lattice : Lattice
    ax : matplotlib Axes, optional
        Axes to draw on; a new figure is created if None
    show_keys : bool
        Annotate each site with its key
    title : str
    marker_size : float

    Returns
    -------
    ax : matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    positions = lattice.positions
    labels = np.array(lattice.labels, dtype=str)

    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.grid(True, linestyle=':', alpha=0.3)
    ax.set_aspect('equal')

    for label, color in sublattice_colors.items():
        mask = labels == label
        if not np.any(mask):
            continue
        ax.scatter(positions[mask, 0], positions[mask, 1],
                   color=color, s=marker_size, zorder=2, label=f"sublattice {label}")

    if show_keys:
        for site in lattice:
            ax.annotate(str(site.key), (site.x, site.y),
                        textcoords="offset points", xytext=(4, 4), fontsize=8)

    if len(lattice):
        ax.legend(loc='upper right', fontsize=8)
    return ax
