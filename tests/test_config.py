"""Tests for ContextVar-based ConvertConfig."""

import dataclasses

import pytest

from sxmd.config import (
    ConvertConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)


class TestConvertConfig:
    def test_defaults(self) -> None:
        assert ConvertConfig().legacy_terminators is False

    def test_frozen(self) -> None:
        config = ConvertConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.legacy_terminators = True  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = ConvertConfig.from_dict({"legacy_terminators": True})
        assert config.legacy_terminators is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ConvertConfig.from_dict({"unknown_key": 1})
        assert config == ConvertConfig()


class TestContextVar:
    def test_default_outside_context(self) -> None:
        assert get_convert_config() == ConvertConfig()

    def test_set_and_reset(self) -> None:
        set_convert_config(ConvertConfig(legacy_terminators=True))
        try:
            assert get_convert_config().legacy_terminators is True
        finally:
            reset_convert_config()
        assert get_convert_config().legacy_terminators is False

    def test_context_manager_restores_previous(self) -> None:
        outer = ConvertConfig(legacy_terminators=True)
        set_convert_config(outer)
        try:
            with convert_config_context(ConvertConfig()) as inner:
                assert get_convert_config() is inner
            assert get_convert_config() is outer
        finally:
            reset_convert_config()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with convert_config_context(ConvertConfig(legacy_terminators=True)):
                raise RuntimeError("boom")
        assert get_convert_config() == ConvertConfig()
