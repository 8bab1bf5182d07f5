"""External scanner for indentation-sensitive scripts with instruction text.

Adds the tokens a declarative grammar cannot describe:

- INDENT / DEDENT / NEWLINE from significant leading whitespace
- INTERPOLATION_START (``{!``) and INSTRUCTION_TEXT_SEGMENT in raw text

Each scan() call runs the checks in a fixed priority order: interpolation
start, text segment, pending dedent, line boundary. The first check that
applies decides the call.

Thread Safety:
Scanner instances belong to a single parse session.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import logging
from collections.abc import Collection

from scriptlex.config import ScanConfig, get_scan_config
from scriptlex.cursor import Cursor
from scriptlex.errors import ScannerClosedError
from scriptlex.lexer.modes import ScanMode, select_mode
from scriptlex.lexer.scanners import (
    InstructionScannerMixin,
    LineScannerMixin,
    PendingDedentScannerMixin,
)
from scriptlex.lexer.state import IndentState
from scriptlex.serialization import decode_state, encode_state
from scriptlex.tokens import TokenType
from scriptlex.utils.logger import get_logger

logger = get_logger(__name__)


class ExternalScanner(
    InstructionScannerMixin,
    PendingDedentScannerMixin,
    LineScannerMixin,
):
    """Stateful scanner called by a parser host once per token attempt.

    Usage:
            >>> from scriptlex.cursor import Cursor
            >>> from scriptlex.tokens import TokenType
            >>> scanner = ExternalScanner.create()
            >>> cursor = Cursor("\\n   body")
            >>> scanner.scan(cursor, {TokenType.INDENT, TokenType.NEWLINE})
            <TokenType.INDENT: 1>
            >>> scanner.state.indents
            (0, 3)

    Thread Safety:
        One instance per parse session. All state is instance-local.

    """

    __slots__ = ("_state", "_config", "_closed")

    def __init__(self, config: ScanConfig | None = None) -> None:
        """Initialize with a fresh state.

        Args:
            config: Scanner configuration; defaults to the active ScanConfig
        """
        self._config = config if config is not None else get_scan_config()
        self._state = IndentState(max_depth=self._config.max_indent_depth)
        self._closed = False

    @classmethod
    def create(cls, config: ScanConfig | None = None) -> ExternalScanner:
        """Create a scanner with stack [0] and no pending dedent."""
        scanner = cls(config)
        logger.debug("Scanner created, depth=%d", scanner._state.depth)
        return scanner

    @property
    def state(self) -> IndentState:
        return self._state

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def destroy(self) -> None:
        """Release the scanner; later calls raise ScannerClosedError."""
        self._closed = True

    def serialize(self) -> bytes:
        """Snapshot the indent stack and pending-dedent target."""
        self._check_open()
        indents, pending = self._state.snapshot()
        return encode_state(indents, pending, buffer_size=self._config.serialization_buffer_size)

    def deserialize(self, data: bytes) -> None:
        """Restore a snapshot; empty or damaged data degrades, never raises."""
        self._check_open()
        indents, pending = decode_state(data, max_depth=self._config.max_indent_depth)
        self._state.restore(indents, pending)

    def scan(self, cursor: Cursor, valid: Collection[TokenType]) -> TokenType | None:
        """Decide one token at the cursor.

        Args:
            cursor: Host cursor; characters are consumed through it
            valid: Token kinds the host accepts at this position

        Returns:
            The emitted TokenType, or None when the scanner declines.
        """
        self._check_open()
        state = self._state
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "scan: lookahead=%r, valid=%s, indents=%s, pending=%s",
                cursor.lookahead,
                sorted(kind.name for kind in valid),
                state.indents,
                state.pending_dedent,
            )

        mode = select_mode(valid, cursor.lookahead)
        if mode is ScanMode.INTERPOLATION:
            return self._scan_interpolation_start(cursor, valid)
        if mode is ScanMode.TEXT:
            return self._scan_text_segment(cursor)

        result = self._resolve_pending_dedent(valid)
        if result is not None:
            return result
        return self._scan_line_boundary(cursor, valid)

    def _check_open(self) -> None:
        if self._closed:
            raise ScannerClosedError("scanner was destroyed")


# =========================================================================
# Functional host contract
# =========================================================================


def create(config: ScanConfig | None = None) -> ExternalScanner:
    """Create a fresh scanner (stack [0], no pending dedent)."""
    return ExternalScanner.create(config)


def destroy(scanner: ExternalScanner) -> None:
    """Release ``scanner``."""
    scanner.destroy()


def serialize(scanner: ExternalScanner) -> bytes:
    """Snapshot ``scanner``'s state."""
    return scanner.serialize()


def deserialize(data: bytes, scanner: ExternalScanner) -> None:
    """Restore ``data`` into ``scanner``."""
    scanner.deserialize(data)


def scan(
    scanner: ExternalScanner, cursor: Cursor, valid: Collection[TokenType]
) -> TokenType | None:
    """Run one scan() call on ``scanner``."""
    return scanner.scan(cursor, valid)
