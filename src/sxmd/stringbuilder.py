"""Append-only output buffer for the scanner.

Fragments go into a list and are joined once when the conversion finishes,
so emitting one code point at a time stays O(n) overall.

Thread Safety:
OutputBuffer instances belong to a single ScanContext.

"""

from __future__ import annotations


class OutputBuffer:
    """Append-only text accumulator.

    Usage:
            >>> buf = OutputBuffer()
            >>> buf.append("<!--")
            >>> buf.append("\\\\alpha")
            >>> buf.append("-->")
            >>> buf.build()
            '<!--\\\\alpha-->'
            >>> len(buf)
            13

    """

    __slots__ = ("_length", "_parts")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> None:
        """Append a fragment. Empty fragments are skipped."""
        if s:
            self._parts.append(s)
            self._length += len(s)

    def build(self) -> str:
        """Join everything appended so far."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Number of code points written (not number of fragments)."""
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0
