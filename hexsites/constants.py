"""
Package-wide constants for honeycomb site geometry.

TOLERANCE is an absolute (not relative) precision assumption: two sites
are the same site when both coordinates differ by less than it. This is
fine for lattices built from O(1) unit-cell sizes, not a general-purpose
float comparator.
"""

import numpy as np

# Absolute tolerance for coordinate equality
TOLERANCE = 1e-12

# Vertices of a hexagon
NUM_CORNERS = 6

# Sublattice labels, in corner-parity order (odd corner -> 'A')
SUBLATTICE_LABELS = ('A', 'B')

# Corner of the hexagon used for each sublattice's representative site
SUBLATTICE_CORNER = {'A': 1, 'B': 2}

SQRT3 = np.sqrt(3.0)

# Above this many |A|*|B| pairs, ordered_union switches from a dense
# numpy comparison to a KD-tree candidate search
UNION_BROADCAST_LIMIT = 1_000_000
