"""ContextVar-based conversion configuration for sxmd.

A Converter reads the current config once, at construction. Pass an
explicit ConvertConfig to override it for a single conversion.

Usage:
    from sxmd.config import ConvertConfig, convert_config_context

    with convert_config_context(ConvertConfig(legacy_terminators=True)):
        out = convert_text(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Attributes:
        legacy_terminators: When an HTML comment or CDATA section is not
            closed before end of input, behave like the original tool:
            append a fabricated ``-->`` to an open comment and force the
            cursor three code points further. When False (default) the scan
            stops cleanly at end of input.

    """

    legacy_terminators: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ConvertConfig":
        """Create ConvertConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> ConvertConfig.from_dict({"legacy_terminators": True, "x": 1})
            ConvertConfig(legacy_terminators=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ConvertConfig = ConvertConfig()

_convert_config: ContextVar[ConvertConfig] = ContextVar(
    "convert_config",
    default=_DEFAULT_CONFIG,
)


def get_convert_config() -> ConvertConfig:
    """Get the current conversion configuration."""
    return _convert_config.get()


def set_convert_config(config: ConvertConfig) -> None:
    """Set the conversion configuration for the current context."""
    _convert_config.set(config)


def reset_convert_config() -> None:
    """Reset to the default configuration."""
    _convert_config.set(_DEFAULT_CONFIG)


@contextmanager
def convert_config_context(config: ConvertConfig) -> Iterator[ConvertConfig]:
    """Use ``config`` for the duration of the with block.

    The previous value is restored on exit, even if it was not the default.
    """
    token = _convert_config.set(config)
    try:
        yield config
    finally:
        _convert_config.reset(token)
