"""Protocols for scriptlex.

Defines the contract between an incremental parser host and its external
scanner. Symbol names and buffer layout are host-specific; only the
semantics of these operations are fixed.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Protocol

from scriptlex.cursor import Cursor
from scriptlex.tokens import TokenType


class ScannerProtocol(Protocol):
    """Protocol for external scanners driven by a parser host.

    Thread Safety:
        A scanner belongs to one parse session. Hosts running several
        sessions create one scanner per session.

    """

    def destroy(self) -> None:
        """Release the scanner. No further calls follow."""
        ...

    def serialize(self) -> bytes:
        """Snapshot the scanner state."""
        ...

    def deserialize(self, data: bytes) -> None:
        """Restore a snapshot. Empty data restores the fresh state."""
        ...

    def scan(self, cursor: Cursor, valid: Collection[TokenType]) -> TokenType | None:
        """Emit one token kind, consuming characters through ``cursor``, or decline.

        Args:
            cursor: Host cursor positioned at the next character
            valid: Token kinds the host accepts at this position

        Returns:
            The emitted kind, or None to let the host's own rules run.
        """
        ...
