"""Opt-in profiling for sxmd conversions.

Two independent tools:
- ConvertAccumulator: cheap counters (source/output length, which
  recognizers claimed input). Zero overhead when disabled
  (get_convert_accumulator() returns None).
- cpu_profile: a cProfile session written to disk, used by the
  command line's ``--cpuprofile`` flag.

Example:
    from sxmd import convert_text
    from sxmd.profiling import profiled_convert

    with profiled_convert() as metrics:
        convert_text("\\alpha{x} and $y$")

    print(metrics.summary())
    # {"total_ms": 0.1, "convert_calls": 1, "source_length": 17, ...}

"""

import cProfile
from collections import Counter
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from pathlib import Path
from time import perf_counter
from typing import Any

from sxmd.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ConvertAccumulator:
    """Accumulated metrics across conversions.

    Attributes:
        start_time: Profiling start timestamp.
        convert_calls: Number of conversions recorded.
        source_length: Total code points scanned.
        output_length: Total code points emitted.
        claims: How often each recognizer claimed the cursor.

    """

    start_time: float = field(default_factory=perf_counter)
    convert_calls: int = 0
    source_length: int = 0
    output_length: int = 0
    claims: Counter[str] = field(default_factory=Counter)

    def record_convert(
        self,
        source_length: int,
        output_length: int,
        claims: Mapping[str, int] | None = None,
    ) -> None:
        """Record one finished conversion."""
        self.convert_calls += 1
        self.source_length += source_length
        self.output_length += output_length
        if claims:
            self.claims.update(claims)

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of conversion metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "convert_calls": self.convert_calls,
            "source_length": self.source_length,
            "output_length": self.output_length,
            "claims": dict(self.claims),
        }


_accumulator: ContextVar[ConvertAccumulator | None] = ContextVar(
    "convert_accumulator",
    default=None,
)


def get_convert_accumulator() -> ConvertAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_convert() -> Iterator[ConvertAccumulator]:
    """Collect conversion metrics for the duration of the with block.

    Yields:
        ConvertAccumulator populated by every conversion inside the block.

    """
    acc = ConvertAccumulator()
    token: Token[ConvertAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


@contextmanager
def cpu_profile(path: str | Path | None) -> Iterator[cProfile.Profile | None]:
    """Run the with block under cProfile and dump stats to ``path``.

    Passing None disables profiling entirely and yields None. The dump
    happens on exit, including when the block raises, and can be read
    with ``pstats`` or snakeviz.
    """
    if not path:
        yield None
        return

    profiler = cProfile.Profile()
    profiler.enable()
    try:
        yield profiler
    finally:
        profiler.disable()
        profiler.dump_stats(str(path))
        logger.debug("wrote CPU profile to %s", path)
