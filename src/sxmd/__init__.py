"""
sxmd — LaTeX-in-Markdown to comment-wrapped Markdown

Rewrites LaTeX commands and environments embedded in a Markdown document
as HTML comments, so Markdown renderers skip them while the LaTeX source
stays in the file. HTML comments pass through untouched, CDATA sections
are dropped, and inline ``$...$`` math is left alone.

Quick Start:
    >>> from sxmd import convert_text
    >>> convert_text("Let \\\\alpha{x} be $\\\\beta$ ok")
    'Let <!--\\\\alpha{x}--> be $\\\\beta$ ok'

    >>> from sxmd import convert
    >>> convert(b"\\\\begin{a}x\\\\end{a}")
    b'<!--\\\\begin{a}x\\\\end{a}-->'

Command line:
    sxmd notes.md > notes.out.md
    sxmd --cpuprofile convert.prof notes.md

"""

from sxmd.config import (
    ConvertConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from sxmd.errors import InputReadError, SxmdError
from sxmd.profiling import (
    ConvertAccumulator,
    cpu_profile,
    get_convert_accumulator,
    profiled_convert,
)
from sxmd.protocols import Recognizer
from sxmd.scanner import DEFAULT_RECOGNIZERS, Converter, ScanContext

__version__ = "0.1.0"


def convert_text(source: str, *, config: ConvertConfig | None = None) -> str:
    """Rewrite the LaTeX in ``source`` as HTML comments.

    Args:
        source: Document text
        config: Optional settings (defaults to the current context's)

    Returns:
        Converted text. Never raises on malformed LaTeX or HTML.
    """
    return Converter(source, config).convert()


def convert(data: bytes, *, config: ConvertConfig | None = None) -> bytes:
    """Convert a UTF-8 encoded document.

    Invalid UTF-8 sequences are decoded as U+FFFD. The result is UTF-8.

    Example:
        >>> convert(b"before<![CDATA[x]]>after")
        b'beforeafter'
    """
    source = data.decode("utf-8", errors="replace")
    return convert_text(source, config=config).encode("utf-8")


__all__ = [  # noqa: RUF022 — grouped by category
    # Version
    "__version__",
    # Core API
    "convert",
    "convert_text",
    # Scanner
    "Converter",
    "DEFAULT_RECOGNIZERS",
    "Recognizer",
    "ScanContext",
    # Configuration (ContextVar-based)
    "ConvertConfig",
    "convert_config_context",
    "get_convert_config",
    "reset_convert_config",
    "set_convert_config",
    # Profiling
    "ConvertAccumulator",
    "cpu_profile",
    "get_convert_accumulator",
    "profiled_convert",
    # Errors
    "InputReadError",
    "SxmdError",
]
