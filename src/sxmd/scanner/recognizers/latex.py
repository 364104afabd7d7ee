"""LaTeX command and environment rewriting.

Commands and ``\\begin ... \\end`` environments are wrapped in
``<!-- -->`` so Markdown renderers skip them while the LaTeX source stays
in the document for other tooling.

Both rewriters are deliberately lenient:

- bracket kinds are interchangeable when counting nesting, so
  ``\\foo{a]`` is one closed argument;
- environment names are never compared, so
  ``\\begin{figure} ... \\end{math}`` is one balanced block.

"""

from __future__ import annotations

from sxmd.scanner.context import ScanContext
from sxmd.scanner.markers import (
    BLOCK_BEGIN,
    BLOCK_END,
    CLOSE_BRACKETS,
    COMMENT_CLOSE,
    COMMENT_OPEN,
    DOUBLE_BACKSLASH,
    OPEN_BRACKETS,
)
from sxmd.utils.logger import get_logger

logger = get_logger(__name__)


def scan_latex(ctx: ScanContext) -> bool:
    """Claim a backslash outside inline math and rewrite what follows.

    A double backslash is literal text: both code points are copied and
    neither can start a command.
    """
    if ctx.in_inline_math or ctx.current() != "\\":
        return False

    if ctx.startswith(DOUBLE_BACKSLASH):
        ctx.copy(2)
        return True

    if ctx.startswith(BLOCK_BEGIN):
        rewrite_block(ctx)
    else:
        rewrite_command(ctx, wrap=True)
    return True


def rewrite_command(ctx: ScanContext, *, wrap: bool = True) -> None:
    """Copy one command with its directly following bracket groups.

    Scans the whole span first and commits it in one copy:

        \\foo{bar}[baz] test
        ^             ^
        cursor        stop (no further group follows)

    Args:
        ctx: Scan state, cursor on the command's backslash
        wrap: Surround the command with comment markers
    """
    source = ctx.source
    length = ctx.length
    pos = ctx.cursor

    # Command name: up to the first bracket or whitespace
    while pos < length:
        char = source[pos]
        if char in OPEN_BRACKETS or char.isspace():
            break
        pos += 1

    nesting = 0
    while pos < length:
        char = source[pos]
        if nesting == 0 and char not in OPEN_BRACKETS:
            break
        if char in OPEN_BRACKETS:
            nesting += 1
        elif char in CLOSE_BRACKETS:
            nesting -= 1
        pos += 1

    if wrap:
        ctx.emit(COMMENT_OPEN)
    ctx.copy_to(pos)
    if wrap:
        ctx.emit(COMMENT_CLOSE)


def rewrite_block(ctx: ScanContext) -> None:
    """Wrap a (possibly nested) ``\\begin ... \\end`` span in one comment.

    The ``\\end`` that brings nesting back to zero is consumed by
    rewrite_command so its ``{name}`` argument lands inside the comment.
    An environment left open at end of input keeps its opening marker
    unbalanced.
    """
    ctx.emit(COMMENT_OPEN)
    source = ctx.source
    start = ctx.cursor
    nesting = 0

    while not ctx.at_eof:
        if ctx.startswith(BLOCK_BEGIN):
            nesting += 1
        elif ctx.startswith(BLOCK_END):
            nesting -= 1

        if nesting == 0:
            rewrite_command(ctx, wrap=False)
            ctx.emit(COMMENT_CLOSE)
            return

        # \begin and \end only start at a backslash; copy up to the next one
        next_backslash = source.find("\\", ctx.cursor + 1)
        ctx.copy_to(next_backslash if next_backslash != -1 else ctx.length)

    logger.debug("unterminated LaTeX environment at offset %d", start)
