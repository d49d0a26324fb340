from __future__ import annotations


class InductionError(Exception):
    """Base class for vocabulary induction failures."""


class ResourceExhaustion(InductionError, MemoryError):
    """Allocation failed while growing the pair table or the vocabulary. Fatal."""


class CapacityExceeded(InductionError, ValueError):
    """A configured maximum was hit. Callers truncate or drop and log it."""

    def __init__(self, what: str, size: int, limit: int):
        super().__init__(f"{what} exceeds capacity ({size} > {limit})")
        self.what = what
        self.size = size
        self.limit = limit
