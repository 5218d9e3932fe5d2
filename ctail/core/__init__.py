"""Line scanning and ring buffering behind ctail."""

from __future__ import annotations

from ctail.core.constants import (
    CAPACITY_LIMIT,
    DEFAULT_LINES,
    LINE_LENGTH_LIMIT,
    READ_CHUNK_SIZE,
)
from ctail.core.errors import AllocationError, CtailError, TruncationWarning
from ctail.core.line import Line
from ctail.core.ring_buffer import RingBuffer
from ctail.core.scanner import LineScanner, ScanStats
from ctail.core.tail import TailResult, drain_to, tail_lines, tail_stream, write_line

__all__ = [
    "AllocationError",
    "CAPACITY_LIMIT",
    "CtailError",
    "DEFAULT_LINES",
    "LINE_LENGTH_LIMIT",
    "Line",
    "LineScanner",
    "READ_CHUNK_SIZE",
    "RingBuffer",
    "ScanStats",
    "TailResult",
    "TruncationWarning",
    "drain_to",
    "tail_lines",
    "tail_stream",
    "write_line",
]
