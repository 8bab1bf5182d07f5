"""Pending-dedent scanner mixin.

A pending target is dropped, not held, when the next call does not accept
DEDENT; the remaining levels then close at the following line boundary.
"""

from __future__ import annotations

from collections.abc import Collection

from scriptlex.lexer.state import IndentState
from scriptlex.tokens import TokenType
from scriptlex.utils.logger import get_logger

logger = get_logger(__name__)


class PendingDedentScannerMixin:
    """Mixin that pays out DEDENTs owed by an earlier line boundary.

    One newline can close several blocks, but the host asks for a single
    token per call. The line scanner closes the first block and leaves a
    pending-dedent target; this check runs before any line scanning and
    closes one more block per call until the target is reached.

    """

    # Set by ExternalScanner
    _state: IndentState

    def _resolve_pending_dedent(self, valid: Collection[TokenType]) -> TokenType | None:
        """Emit one owed DEDENT, or clear a marker that no longer applies.

        Returns:
            DEDENT when a level was closed, otherwise None. Consumes no
            characters either way.
        """
        state = self._state
        target = state.pending_dedent
        if target is None:
            return None

        if TokenType.DEDENT not in valid:
            logger.debug("  DEDENT not acceptable, dropping pending target %d", target)
            state.pending_dedent = None
            return None

        if target < state.current and not state.at_base:
            new_current = state.pop()
            if new_current <= target:
                state.pending_dedent = None
            logger.debug("  => DEDENT (pending, back to %d)", new_current)
            return TokenType.DEDENT

        logger.debug("  pending target %d no longer below %d, clearing", target, state.current)
        state.pending_dedent = None
        return None
