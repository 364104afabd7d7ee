"""Tests for sxmd.errors."""

from sxmd.errors import InputReadError, SxmdError


class TestInputReadError:
    def test_message_names_file(self) -> None:
        err = InputReadError("notes.md")
        assert str(err) == "Could not read input file notes.md"

    def test_keeps_path_and_reason(self) -> None:
        err = InputReadError("notes.md", "No such file or directory")
        assert err.path == "notes.md"
        assert err.reason == "No such file or directory"

    def test_is_sxmd_error(self) -> None:
        assert isinstance(InputReadError("x"), SxmdError)
