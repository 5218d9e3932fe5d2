"""Run the scanner into a ring buffer and write out what it retained."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional

from .constants import CAPACITY_LIMIT, DEFAULT_LINES, LINE_LENGTH_LIMIT, READ_CHUNK_SIZE
from .line import NEWLINE, Line
from .ring_buffer import RingBuffer
from .scanner import LineScanner, TruncationHandler

logger = logging.getLogger(__name__)


@dataclass
class TailResult:
    """Summary of a single tail run."""

    lines_read: int = 0
    lines_written: int = 0
    truncated_lines: int = 0


def write_line(sink: BinaryIO, line: Line) -> None:
    sink.write(line.content)
    if line.terminated:
        sink.write(NEWLINE)


def drain_to(buffer: RingBuffer, sink: BinaryIO) -> int:
    """Write every retained line to ``sink`` oldest first; return the count."""
    written = 0
    for line in buffer.drain():
        write_line(sink, line)
        written += 1
    return written


def tail_stream(
    source: BinaryIO,
    sink: BinaryIO,
    lines: int = DEFAULT_LINES,
    *,
    line_length_limit: int = LINE_LENGTH_LIMIT,
    chunk_size: int = READ_CHUNK_SIZE,
    on_truncate: Optional[TruncationHandler] = None,
) -> TailResult:
    """Copy the last ``lines`` lines of ``source`` to ``sink``.

    Args:
        source: Binary stream to read; it is not closed here
        sink: Binary stream receiving the retained lines
        lines: How many trailing lines to keep; 0 reads and writes nothing
        line_length_limit: Longer lines are truncated to this many bytes
        chunk_size: Read size used by the scanner
        on_truncate: Receives the one-time truncation warning

    Returns:
        TailResult with line counts for the run

    Raises:
        ValueError: If ``lines`` is negative or above CAPACITY_LIMIT
        AllocationError: If the buffer or a line could not be allocated
    """
    if lines < 0 or lines > CAPACITY_LIMIT:
        raise ValueError(f"lines must be between 0 and {CAPACITY_LIMIT}")
    if lines == 0:
        return TailResult()

    scanner = LineScanner(
        line_length_limit=line_length_limit,
        chunk_size=chunk_size,
        on_truncate=on_truncate,
    )
    with RingBuffer(lines) as buffer:
        for line in scanner.scan(source):
            buffer.put(line)
        written = drain_to(buffer, sink)

    result = TailResult(
        lines_read=scanner.stats.lines,
        lines_written=written,
        truncated_lines=scanner.stats.truncated_lines,
    )
    logger.debug(
        "Read %d lines (%d bytes), wrote %d, truncated %d",
        result.lines_read,
        scanner.stats.bytes_read,
        result.lines_written,
        result.truncated_lines,
    )
    return result


def tail_lines(data: bytes, lines: int = DEFAULT_LINES, **kwargs) -> bytes:
    """Return the last ``lines`` lines of ``data``."""
    sink = io.BytesIO()
    tail_stream(io.BytesIO(data), sink, lines, **kwargs)
    return sink.getvalue()


__all__ = ["TailResult", "write_line", "drain_to", "tail_stream", "tail_lines"]
