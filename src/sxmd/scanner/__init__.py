"""Single-pass Markdown/LaTeX scanner.

Architecture:
scanner/
├── __init__.py          # Re-exports Converter, ScanContext
├── core.py              # Converter (dispatch loop)
├── context.py           # ScanContext (input, cursor, output, math flag)
├── markers.py           # Literal markers and character sets
└── recognizers/         # Handlers tried in priority order
    ├── html.py          # HTML comments (copied), CDATA (dropped)
    ├── math.py          # \\$ escapes and inline-math tracking
    └── latex.py         # Commands and \\begin/\\end environments

Usage:
    >>> from sxmd.scanner import Converter
    >>> Converter("x \\\\alpha y").convert()
    'x <!--\\\\alpha--> y'

"""

from sxmd.scanner.context import ScanContext
from sxmd.scanner.core import Converter
from sxmd.scanner.recognizers import DEFAULT_RECOGNIZERS

__all__ = ["DEFAULT_RECOGNIZERS", "Converter", "ScanContext"]
