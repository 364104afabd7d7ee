"""Single-pass scanner that rewrites LaTeX in Markdown as HTML comments.

The dispatch loop offers the cursor to each recognizer in priority order.
The first one to claim it consumes input and emits output itself; if none
does, one code point is copied verbatim. The cursor only ever moves
forward, so a conversion is O(n) in the input length.

Thread Safety:
Converter instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections import Counter

from sxmd.config import ConvertConfig, get_convert_config
from sxmd.profiling import get_convert_accumulator
from sxmd.protocols import Recognizer
from sxmd.scanner.context import ScanContext
from sxmd.scanner.markers import TRIGGER_CHARS
from sxmd.scanner.recognizers import DEFAULT_RECOGNIZERS
from sxmd.utils.logger import get_logger

logger = get_logger(__name__)


class Converter:
    """Cursor-driven text transducer.

    Usage:
            >>> Converter("\\\\alpha{x}{y} done").convert()
            '<!--\\\\alpha{x}{y}--> done'

    Thread Safety:
        Converter instances are single-use. Create one per source string.

    """

    __slots__ = ("_ctx", "_recognizers", "_result")

    def __init__(self, source: str, config: ConvertConfig | None = None) -> None:
        """Initialize converter with source text.

        Args:
            source: Document text
            config: Settings for this conversion (defaults to the current
                context's ConvertConfig)
        """
        self._ctx = ScanContext(source, config or get_convert_config())
        self._recognizers: tuple[Recognizer, ...] = DEFAULT_RECOGNIZERS
        self._result: str | None = None

    @property
    def context(self) -> ScanContext:
        return self._ctx

    def step(self) -> Recognizer | None:
        """Run one iteration of the dispatch loop.

        Returns:
            The recognizer that claimed the cursor, or None when a single
            code point was copied.
        """
        ctx = self._ctx
        # Recognizers only fire on these; skip the chain for plain text
        if ctx.current() in TRIGGER_CHARS:
            for recognizer in self._recognizers:
                if recognizer(ctx):
                    return recognizer
        ctx.copy()
        return None

    def convert(self) -> str:
        """Scan the whole input and return the rewritten text.

        Later calls return the same text without scanning or recording
        metrics again.

        Complexity: O(n) where n = len(source)
        """
        if self._result is not None:
            return self._result

        ctx = self._ctx
        acc = get_convert_accumulator()
        claims: Counter[str] | None = Counter() if acc is not None else None

        while not ctx.at_eof:
            claimed = self.step()
            if claims is not None and claimed is not None:
                claims[claimed.__name__] += 1

        result = ctx.out.build()
        logger.debug("converted %d code points into %d", ctx.length, len(ctx.out))

        if acc is not None:
            acc.record_convert(
                source_length=ctx.length,
                output_length=len(ctx.out),
                claims=claims,
            )
        self._result = result
        return result
