"""
Ordered, key-reassigning set union of honeycomb lattices.

The union keeps the index ("key") space of the combined lattice usable
for building matrices over it, such as real-space tight-binding
Hamiltonians, and for indexing site-resolved quantities (LDOS, local
Chern marker, local magnetization, ...).

Key Policy
----------
The first operand keeps its keys, assumed to be 1..len(A). Every site of
B that survives is re-keyed as len(A) + i, where i is its 1-based
position in B. Skipped duplicates therefore leave gaps in the tail keys:

    A = [(0,0) k=1, (1,0) k=2],  B = [(1,0), (2,0)]
    ordered_union(A, B) -> [(0,0) k=1, (1,0) k=2, (2,0) k=4]

Use `Lattice.renumbered()` when a gap-free key space is needed.
"""

import logging

import numpy as np
from scipy.spatial import cKDTree

from ...constants import TOLERANCE, UNION_BROADCAST_LIMIT
from .base import points_equal
from .lattice import Lattice

logger = logging.getLogger(__name__)

UNION_METHODS = ('auto', 'broadcast', 'kdtree')


def _new_mask_broadcast(A: Lattice, B: Lattice) -> np.ndarray:
    delta = np.abs(B.positions[:, None, :] - A.positions[None, :, :])
    duplicate = np.any(np.all(delta < TOLERANCE, axis=-1), axis=1)
    return ~duplicate


def _new_mask_kdtree(A: Lattice, B: Lattice) -> np.ndarray:
    # Chebyshev ball of radius TOLERANCE (closed) contains every strictly
    # equal site; points_equal settles the boundary
    tree = cKDTree(A.positions)
    candidates = tree.query_ball_point(B.positions, r=TOLERANCE, p=np.inf)
    mask = np.ones(len(B), dtype=bool)
    for i, (b, near) in enumerate(zip(B, candidates)):
        mask[i] = not any(points_equal(b, A[j]) for j in near)
    return mask


def _new_site_mask(A: Lattice, B: Lattice, method: str) -> np.ndarray:
    """Boolean mask over B: True where the site equals no site of A."""
    if len(A) == 0 or len(B) == 0:
        return np.ones(len(B), dtype=bool)
    if method == 'auto':
        method = 'broadcast' if len(A) * len(B) <= UNION_BROADCAST_LIMIT else 'kdtree'
    if method == 'broadcast':
        return _new_mask_broadcast(A, B)
    return _new_mask_kdtree(A, B)


def ordered_union(A: Lattice, B: Lattice, method: str = 'auto') -> Lattice:
    """
    Merge two lattices, dropping sites of B already present in A.

    Parameters
    ----------
    A : Lattice
        First operand. Must be a set under coordinate equality, with keys
        1..len(A). Its sites, labels and keys are copied unchanged.
    B : Lattice
        Second operand. Must be a set under coordinate equality. Its keys
        are discarded.
    method : {'auto', 'broadcast', 'kdtree'}, optional
        How duplicates are detected. 'broadcast' compares all pairs with
        numpy, 'kdtree' queries a scipy KD-tree built on A, 'auto' picks
        'broadcast' for up to UNION_BROADCAST_LIMIT pairs. All methods
        give identical results.

    Returns
    -------
    C : Lattice
        A's sites in order, followed by the sites of B that equal no site
        of A, in B's order, keyed len(A) + (position in B).

    Raises
    ------
    ValueError
        If method is not recognized

    Notes
    -----
    Membership is tested against the original A only: duplicates inside
    B are not filtered. Labels of appended sites come from B, on the
    assumption that coincident sites of A and B share a sublattice.
    Neither precondition is checked.
    """
    if method not in UNION_METHODS:
        raise ValueError(f"Unknown union method '{method}'. "
                         f"Available methods: {', '.join(UNION_METHODS)}")

    C = A.copy()
    is_new = _new_site_mask(A, B, method)
    offset = len(A)
    for i, (site, keep) in enumerate(zip(B, is_new), start=1):
        if keep:
            C.append(site.with_key(offset + i))

    skipped = len(B) - int(np.count_nonzero(is_new))
    if skipped:
        logger.debug("ordered_union: skipped %d of %d sites already present in A",
                     skipped, len(B))
    return C
