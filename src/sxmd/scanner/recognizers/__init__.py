"""Recognizers tried by the dispatch loop, in priority order.

Order matters:
- comments and CDATA come first so nothing inside them is reinterpreted;
- the inline-math detector runs before the LaTeX recognizer so a
  backslash inside ``$...$`` is left alone.
"""

from __future__ import annotations

from sxmd.protocols import Recognizer
from sxmd.scanner.recognizers.html import scan_cdata, scan_html_comment
from sxmd.scanner.recognizers.latex import rewrite_block, rewrite_command, scan_latex
from sxmd.scanner.recognizers.math import scan_inline_math

DEFAULT_RECOGNIZERS: tuple[Recognizer, ...] = (
    scan_html_comment,
    scan_cdata,
    scan_inline_math,
    scan_latex,
)

__all__ = [
    "DEFAULT_RECOGNIZERS",
    "rewrite_block",
    "rewrite_command",
    "scan_cdata",
    "scan_html_comment",
    "scan_inline_math",
    "scan_latex",
]
