"""Tests for inline math tracking and the \\$ escape."""

from __future__ import annotations

import pytest

from sxmd.config import ConvertConfig
from sxmd.scanner import Converter, ScanContext
from sxmd.scanner.recognizers import scan_inline_math


def convert(source: str) -> str:
    return Converter(source).convert()


class TestMathSpans:
    """Backslashes inside $...$ are left alone."""

    @pytest.mark.parametrize(
        "source",
        [
            r"price is $5 and \alpha$ here",
            r"$\alpha$ at start of input",
            "line one\n$\\alpha$ on a new line",
            r"display $$\sum_i x_i$$ math",
            r"a $x$y \alpha$ z",
        ],
    )
    def test_math_content_untouched(self, source: str) -> None:
        assert convert(source) == source

    def test_commands_rewritten_after_math_closes(self) -> None:
        assert convert(r"a $x$ \beta") == r"a $x$ <!--\beta-->"

    def test_dollar_glued_to_word_does_not_open(self) -> None:
        assert convert(r"a$b \alpha") == r"a$b <!--\alpha-->"

    def test_dollar_followed_by_space_does_not_open(self) -> None:
        assert convert(r"costs $ \alpha") == r"costs $ <!--\alpha-->"

    def test_math_closed_at_end_of_input(self) -> None:
        converter = Converter("a $x$")
        converter.convert()
        assert converter.context.in_inline_math is False

    def test_unclosed_math_swallows_rest(self) -> None:
        source = r"a $x \alpha \beta"
        converter = Converter(source)
        assert converter.convert() == source
        assert converter.context.in_inline_math is True


class TestEscapedDollar:
    """\\$ is always emitted as-is."""

    def test_escape_outside_math(self) -> None:
        assert convert(r"a \$x \alpha") == r"a \$x <!--\alpha-->"

    def test_escape_inside_math(self) -> None:
        source = r"a $x \$ y$ b"
        assert convert(source) == source

    def test_escape_does_not_open_math(self) -> None:
        converter = Converter(r" \$x")
        converter.convert()
        assert converter.context.in_inline_math is False


class TestRecognizerDirectly:
    """scan_inline_math on a bare ScanContext."""

    def _ctx(self, source: str) -> ScanContext:
        return ScanContext(source, ConvertConfig())

    def test_dollar_toggles_but_is_not_claimed(self) -> None:
        ctx = self._ctx("$x")
        assert scan_inline_math(ctx) is False
        assert ctx.in_inline_math is True
        assert ctx.cursor == 0
        assert not ctx.out

    def test_escape_is_claimed(self) -> None:
        ctx = self._ctx(r"\$")
        assert scan_inline_math(ctx) is True
        assert ctx.cursor == 2
        assert ctx.out.build() == r"\$"

    def test_closing_dollar_clears_flag(self) -> None:
        ctx = self._ctx("x$ y")
        ctx.in_inline_math = True
        ctx.advance(1)
        assert scan_inline_math(ctx) is False
        assert ctx.in_inline_math is False

    def test_other_backslash_not_claimed(self) -> None:
        ctx = self._ctx(r"\alpha")
        assert scan_inline_math(ctx) is False
        assert ctx.cursor == 0
