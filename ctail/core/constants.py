"""Core constants for ctail line framing and buffering."""

# Maximum stored length of a single line, in bytes
LINE_LENGTH_LIMIT = 16383

# Default number of trailing lines to print
DEFAULT_LINES = 10

# Largest line count accepted from the command line
CAPACITY_LIMIT = 4_200_000_000

# How many bytes the scanner pulls from its source per read
READ_CHUNK_SIZE = 64 * 1024

__all__ = ["LINE_LENGTH_LIMIT", "DEFAULT_LINES", "CAPACITY_LIMIT", "READ_CHUNK_SIZE"]
