"""Fixed-capacity ring buffer that keeps the most recent lines."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .errors import AllocationError
from .line import Line


class RingBuffer:
    """Hold at most ``capacity`` lines, evicting the oldest on overflow.

    The slot list is one longer than the capacity so that ``head == tail``
    always means empty and ``tail + 1 == head`` (modulo the slot count) always
    means full, without keeping a separate count.

    Slots are appended on demand until the list reaches ``capacity + 1``, so
    memory follows the number of lines seen rather than the capacity.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = capacity
        self._size = capacity + 1
        self._slots: List[Optional[Line]] = []
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_empty(self) -> bool:
        return self._head == self._tail

    @property
    def is_full(self) -> bool:
        return (self._tail + 1) % self._size == self._head

    def __len__(self) -> int:
        return (self._tail - self._head) % self._size

    def put(self, line: Line) -> None:
        """Insert ``line`` as the newest entry, evicting the oldest if full."""
        if self.is_full:
            self._slots[self._head] = None
            self._head = (self._head + 1) % self._size
        if self._tail == len(self._slots):
            # Only true until the list has grown to its full size.
            try:
                self._slots.append(line)
            except MemoryError as exc:
                raise AllocationError(
                    f"Could not allocate a buffer for {self._capacity} lines"
                ) from exc
        else:
            self._slots[self._tail] = line
        self._tail = (self._tail + 1) % self._size

    def take_oldest(self) -> Optional[Line]:
        """Remove and return the oldest line, or ``None`` when empty."""
        if self.is_empty:
            return None
        line = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self._size
        return line

    def drain(self) -> Iterator[Line]:
        """Yield every held line, oldest first, emptying the buffer."""
        while True:
            line = self.take_oldest()
            if line is None:
                return
            yield line

    def close(self) -> None:
        """Release any lines still held. Safe to call more than once."""
        self._slots.clear()
        self._head = 0
        self._tail = 0

    def __enter__(self) -> "RingBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["RingBuffer"]
