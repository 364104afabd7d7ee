"""Mutable state shared by the dispatch loop and the recognizers.

Thread Safety:
One ScanContext per conversion. Recognizers mutate it only while they
hold control; it is never shared between conversions.

"""

from __future__ import annotations

from sxmd.config import ConvertConfig
from sxmd.stringbuilder import OutputBuffer


class ScanContext:
    """Input, cursor, output and mode flag of a single conversion.

    Lookups outside the input return "" rather than raising, so
    recognizers can probe near either end without bounds checks.

    Attributes:
        source: The input text (never mutated)
        length: Cached len(source)
        cursor: Next unread position, 0 <= cursor <= length
        in_inline_math: True between an opening and closing ``$``
        out: Output buffer
        config: Settings for this conversion

    """

    __slots__ = (
        "config",
        "cursor",
        "in_inline_math",
        "length",
        "out",
        "source",
    )

    def __init__(self, source: str, config: ConvertConfig) -> None:
        self.source = source
        self.length = len(source)
        self.cursor = 0
        self.in_inline_math = False
        self.out = OutputBuffer()
        self.config = config

    # =========================================================================
    # Input
    # =========================================================================

    @property
    def at_eof(self) -> bool:
        return self.cursor >= self.length

    def current(self) -> str:
        """Code point at the cursor, or "" at end of input."""
        if self.cursor >= self.length:
            return ""
        return self.source[self.cursor]

    def peek(self, offset: int = 1) -> str:
        """Code point ``offset`` positions from the cursor (negative looks back)."""
        pos = self.cursor + offset
        if pos < 0 or pos >= self.length:
            return ""
        return self.source[pos]

    def startswith(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.cursor)

    # =========================================================================
    # Cursor and output
    # =========================================================================

    def advance(self, n: int = 1) -> None:
        """Move the cursor forward without emitting. Clamped to end of input."""
        self.cursor = min(self.cursor + n, self.length)

    def emit(self, text: str) -> None:
        """Append literal text to the output."""
        self.out.append(text)

    def copy(self, n: int = 1) -> None:
        """Copy ``n`` code points from the cursor to the output."""
        self.copy_to(self.cursor + n)

    def copy_to(self, end: int) -> None:
        """Copy everything from the cursor up to ``end`` (exclusive)."""
        end = min(end, self.length)
        if end > self.cursor:
            self.out.append(self.source[self.cursor : end])
            self.cursor = end

    def __repr__(self) -> str:
        return (
            f"ScanContext(cursor={self.cursor}/{self.length}, "
            f"in_inline_math={self.in_inline_math})"
        )
