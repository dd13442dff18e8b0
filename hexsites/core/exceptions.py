"""Exceptions raised by the core geometry modules."""


class InvalidLabelError(ValueError):
    """Raised when a sublattice label other than 'A' or 'B' is supplied."""
