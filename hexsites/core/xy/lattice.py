"""
Growable, ordered collections of honeycomb sites.
"""

import numpy as np
from typing import Iterable, Iterator, List, Optional, Union

from .base import Site


class Lattice:
    """
    An ordered, dynamically sized sequence of Sites.

    Sites are immutable, so storing them directly in a list gives
    copy-by-value semantics: appending to one lattice never changes
    another, even when they started from the same sites.

    Parameters
    ----------
    sites : iterable of Site, optional
        Initial sites, kept in the given order.

    Notes
    -----
    Lattices built by `tile_to_lattice` carry keys 1..N in insertion
    order, which is what `ordered_union` expects from its first operand.
    `ordered_union` itself may leave gaps in the keys of the appended
    tail; `renumbered()` restores 1..N explicitly.

    Examples
    --------
    >>> lattice = Lattice()
    >>> lattice.append(Site(0.0, 0.0, 'A', key=1))
    >>> len(lattice)
    1
    """

    def __init__(self, sites: Optional[Iterable[Site]] = None):
        self._sites: List[Site] = []
        if sites is not None:
            for site in sites:
                self.append(site)

    def append(self, site: Site) -> None:
        """Add `site` as the new last element."""
        if not isinstance(site, Site):
            raise TypeError(f"Lattice can only hold Site objects, "
                            f"got {type(site).__name__}")
        self._sites.append(site)

    def copy(self) -> 'Lattice':
        return Lattice(self._sites)

    def __len__(self) -> int:
        return len(self._sites)

    def __iter__(self) -> Iterator[Site]:
        return iter(self._sites)

    def __getitem__(self, index: Union[int, slice]) -> Union[Site, 'Lattice']:
        if isinstance(index, slice):
            return Lattice(self._sites[index])
        return self._sites[index]

    @property
    def sites(self) -> List[Site]:
        """Shallow copy of the site list."""
        return list(self._sites)

    @property
    def keys(self) -> np.ndarray:
        return np.array([site.key for site in self._sites], dtype=int)

    @property
    def labels(self) -> List[str]:
        return [site.label for site in self._sites]

    @property
    def positions(self) -> np.ndarray:
        """
        Site coordinates as an array.

        Returns
        -------
        positions : np.ndarray, shape (N, 2)
            Row i is (x, y) of site i.
        """
        if not self._sites:
            return np.empty((0, 2))
        return np.array([[site.x, site.y] for site in self._sites], dtype=float)

    def has_contiguous_keys(self) -> bool:
        """True if the keys are exactly 1, 2, ..., N in order."""
        return bool(np.array_equal(self.keys, np.arange(1, len(self) + 1)))

    def renumbered(self) -> 'Lattice':
        """Copy of this lattice with keys reassigned to 1..N in order."""
        return Lattice(site.with_key(i)
                       for i, site in enumerate(self._sites, start=1))

    def __repr__(self) -> str:
        labels = self.labels
        return (f"Lattice(sites={len(self)}, "
                f"A={labels.count('A')}, B={labels.count('B')})")
