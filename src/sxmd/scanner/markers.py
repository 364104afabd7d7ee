"""Literal markers and character sets used by the scanner.

All sets are frozensets for O(1) membership tests and are built once at
import time.
"""

from __future__ import annotations

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"

CDATA_OPEN = "<![CDATA["
CDATA_CLOSE = "]]>"

BLOCK_BEGIN = "\\begin"
BLOCK_END = "\\end"

ESCAPED_DOLLAR = "\\$"
DOUBLE_BACKSLASH = "\\\\"

# Bracket kinds are interchangeable for nesting: "{]" is a closed group.
OPEN_BRACKETS: frozenset[str] = frozenset("{[")
CLOSE_BRACKETS: frozenset[str] = frozenset("}]")

# Only these code points can start a recognizer; everything else is copied.
TRIGGER_CHARS: frozenset[str] = frozenset("<$\\")


def is_boundary(char: str) -> bool:
    """True for whitespace, and for "" (before start or past end of input)."""
    return not char or char.isspace()
