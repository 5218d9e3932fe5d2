"""Line records produced by the scanner and held by the ring buffer."""

from __future__ import annotations

from dataclasses import dataclass

NEWLINE = b"\n"


@dataclass(frozen=True)
class Line:
    """One logical line of input.

    ``content`` never includes the newline; ``terminated`` says whether one
    followed it in the input, so a final line without a newline is written
    back without one.
    """

    content: bytes
    terminated: bool = True
    truncated: bool = False

    def to_bytes(self) -> bytes:
        if self.terminated:
            return self.content + NEWLINE
        return self.content

    def __len__(self) -> int:
        return len(self.content)

    def __bool__(self) -> bool:
        # A blank line is still a line.
        return True


__all__ = ["Line", "NEWLINE"]
