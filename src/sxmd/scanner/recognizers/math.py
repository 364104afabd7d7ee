"""Inline math detection.

Follows the MultiMarkdown convention
(http://fletcher.github.io/MultiMarkdown-4/math.html): a ``$`` delimits
math only with whitespace on the outside and no whitespace on the inside.
Inside a math span backslashes belong to the math and must not be rewritten
as commands, which is why this recognizer runs before the LaTeX one.
"""

from __future__ import annotations

from sxmd.scanner.context import ScanContext
from sxmd.scanner.markers import ESCAPED_DOLLAR, is_boundary


def scan_inline_math(ctx: ScanContext) -> bool:
    """Handle ``\\$`` escapes and track the inline-math flag.

    A ``\\$`` pair is emitted as-is and claimed in any mode. A bare ``$``
    only toggles ``ctx.in_inline_math``; it is never claimed, so the
    dispatch loop copies it like ordinary text.
    """
    char = ctx.current()

    if char == "\\":
        if ctx.peek() == "$":
            ctx.emit(ESCAPED_DOLLAR)
            ctx.advance(2)
            return True
        return False

    if char != "$":
        return False

    if not ctx.in_inline_math:
        if is_boundary(ctx.peek(-1)) and not is_boundary(ctx.peek()):
            ctx.in_inline_math = True
    elif is_boundary(ctx.peek()):
        ctx.in_inline_math = False

    return False
