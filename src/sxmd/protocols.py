"""Protocols for sxmd.

Defines the contract shared by the scanner's recognizers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sxmd.scanner.context import ScanContext


class Recognizer(Protocol):
    """A handler that may claim the input starting at the cursor.

    Plain functions satisfy this protocol.

    Contract:
        - Return False without touching the cursor or output when the
          input at the cursor is not yours (toggling
          ``ctx.in_inline_math`` is the one permitted side effect).
        - Return True only after advancing the cursor by at least one
          code point and emitting whatever replaces the consumed span.
        - Never raise on malformed input.

    """

    __name__: str

    def __call__(self, ctx: ScanContext) -> bool:
        """Try to claim the input at ``ctx.cursor``."""
        ...
