"""Tests for sxmd.utils."""

from sxmd.utils import get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("cli").name == "sxmd.cli"

    def test_keeps_existing_prefix(self) -> None:
        assert get_logger("sxmd.scanner.core").name == "sxmd.scanner.core"

    def test_root_name(self) -> None:
        assert get_logger("sxmd").name == "sxmd"

    def test_module_loggers_share_root(self) -> None:
        from sxmd.scanner.recognizers import html

        assert html.logger.name == "sxmd.scanner.recognizers.html"
