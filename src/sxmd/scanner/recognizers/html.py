"""HTML comment and CDATA recognizers.

Comments are copied untouched: they typically already hold LaTeX meant for
other tools, so nothing inside them is rewritten. CDATA sections are
dropped from the output entirely.
"""

from __future__ import annotations

from sxmd.scanner.context import ScanContext
from sxmd.scanner.markers import (
    CDATA_CLOSE,
    CDATA_OPEN,
    COMMENT_CLOSE,
    COMMENT_OPEN,
)
from sxmd.utils.logger import get_logger

logger = get_logger(__name__)


def scan_html_comment(ctx: ScanContext) -> bool:
    """Copy ``<!-- ... -->`` verbatim, terminator included."""
    if not ctx.startswith(COMMENT_OPEN):
        return False

    start = ctx.cursor
    end = ctx.source.find(COMMENT_CLOSE, start)
    if end != -1:
        ctx.copy_to(end + len(COMMENT_CLOSE))
        return True

    logger.debug("unterminated HTML comment at offset %d", start)
    ctx.copy_to(ctx.length)
    if ctx.config.legacy_terminators:
        ctx.emit(COMMENT_CLOSE)
        ctx.advance(len(COMMENT_CLOSE))
    return True


def scan_cdata(ctx: ScanContext) -> bool:
    """Skip ``<![CDATA[ ... ]]>`` without emitting anything."""
    if not ctx.startswith(CDATA_OPEN):
        return False

    start = ctx.cursor
    end = ctx.source.find(CDATA_CLOSE, start)
    if end != -1:
        ctx.advance(end + len(CDATA_CLOSE) - start)
        return True

    # Content runs to end of input; it is dropped under either policy.
    logger.debug("unterminated CDATA section at offset %d", start)
    ctx.advance(ctx.length - start)
    return True
