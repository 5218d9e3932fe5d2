"""Split a raw byte stream into bounded-length line records."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterator, Optional

from .constants import LINE_LENGTH_LIMIT, READ_CHUNK_SIZE
from .errors import AllocationError, TruncationWarning
from .line import NEWLINE, Line

logger = logging.getLogger(__name__)

TruncationHandler = Callable[[TruncationWarning], None]


@dataclass
class ScanStats:
    """Counters for one scanner run."""

    lines: int = 0
    bytes_read: int = 0
    truncated_lines: int = 0
    warned: bool = False


class LineScanner:
    """Frame lines from a binary source, truncating overlong ones.

    A scanner instance covers one run: the truncation warning fires at most
    once per instance, however many lines overflow.
    """

    def __init__(
        self,
        line_length_limit: int = LINE_LENGTH_LIMIT,
        chunk_size: int = READ_CHUNK_SIZE,
        on_truncate: Optional[TruncationHandler] = None,
    ) -> None:
        """Initialize scanner.

        Args:
            line_length_limit: Maximum number of bytes stored per line
            chunk_size: Number of bytes requested from the source per read
            on_truncate: Called with the warning on the first truncated line;
                when omitted the warning is issued via ``warnings.warn``
        """
        if line_length_limit < 1:
            raise ValueError("line_length_limit must be >= 1")
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self.line_length_limit = line_length_limit
        self.chunk_size = chunk_size
        self.on_truncate = on_truncate
        self.stats = ScanStats()

    def scan(self, source: BinaryIO) -> Iterator[Line]:
        """Yield line records from ``source`` until it is exhausted.

        Args:
            source: Anything with ``read(n)`` returning bytes, ``b""`` at end

        Yields:
            Line records in input order; the caller takes ownership of each
        """
        pending = bytearray()
        overflowed = False

        while True:
            chunk = source.read(self.chunk_size)
            if not chunk:
                break
            self.stats.bytes_read += len(chunk)

            view = memoryview(chunk)
            pos = 0
            end = len(chunk)
            while pos < end:
                newline = chunk.find(NEWLINE, pos)
                stop = end if newline == -1 else newline
                if not overflowed:
                    overflowed = self._accumulate(pending, view[pos:stop])
                if newline == -1:
                    break
                yield self._emit(pending, terminated=True, truncated=overflowed)
                overflowed = False
                pos = newline + 1

        # A source ending right after a newline leaves nothing pending.
        if pending:
            yield self._emit(pending, terminated=False, truncated=overflowed)

    def _accumulate(self, pending: bytearray, data: memoryview) -> bool:
        """Append ``data`` up to the limit. Returns True if bytes were dropped."""
        room = self.line_length_limit - len(pending)
        try:
            if len(data) <= room:
                pending += data
                return False
            pending += data[:room]
        except MemoryError as exc:
            raise AllocationError("Could not allocate memory for a line") from exc
        self._record_truncation()
        return True

    def _emit(self, pending: bytearray, terminated: bool, truncated: bool) -> Line:
        try:
            line = Line(bytes(pending), terminated=terminated, truncated=truncated)
        except MemoryError as exc:
            raise AllocationError("Could not allocate memory for a line") from exc
        pending.clear()
        self.stats.lines += 1
        return line

    def _record_truncation(self) -> None:
        self.stats.truncated_lines += 1
        if self.stats.warned:
            return
        self.stats.warned = True

        warning = TruncationWarning(self.line_length_limit)
        logger.debug("First line over %d bytes truncated", self.line_length_limit)
        if self.on_truncate is None:
            warnings.warn(warning, stacklevel=3)
        else:
            self.on_truncate(warning)


__all__ = ["LineScanner", "ScanStats", "TruncationHandler"]
