"""Exceptions and warnings raised by the ctail core."""

from __future__ import annotations


class CtailError(Exception):
    """Base class for ctail failures."""


class AllocationError(CtailError, MemoryError):
    """Storage for the ring buffer or a line could not be obtained."""


class TruncationWarning(UserWarning):
    """At least one input line was longer than the line length limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(
            f"One or more lines are longer than {limit}, "
            "so their whole content could not be displayed."
        )


__all__ = ["CtailError", "AllocationError", "TruncationWarning"]
