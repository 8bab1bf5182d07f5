"""Instruction-text scanner mixin.

Handles the raw text mode used inside instruction blocks, where the grammar
wants literal text and ``{!`` opens an interpolated expression.
"""

from __future__ import annotations

from collections.abc import Collection

from scriptlex.cursor import Cursor
from scriptlex.lexer.modes import INTERPOLATION_BANG, TEXT_TERMINATORS
from scriptlex.tokens import TokenType
from scriptlex.utils.logger import get_logger

logger = get_logger(__name__)


class InstructionScannerMixin:
    """Mixin providing INTERPOLATION_START and INSTRUCTION_TEXT_SEGMENT scanning.

    Neither scanner touches the indent state.

    """

    def _scan_interpolation_start(
        self, cursor: Cursor, valid: Collection[TokenType]
    ) -> TokenType | None:
        """Scan ``{!``; a lone ``{`` starts a text segment instead.

        The lookahead must be ``{``. Once consumed it stays consumed: when
        ``!`` does not follow, the brace becomes the first character of an
        INSTRUCTION_TEXT_SEGMENT, or the call declines if text is not
        acceptable.
        """
        cursor.advance()
        if cursor.lookahead == INTERPOLATION_BANG:
            cursor.advance()
            cursor.mark_end()
            logger.debug("  => INTERPOLATION_START")
            return TokenType.INTERPOLATION_START

        if TokenType.INSTRUCTION_TEXT_SEGMENT in valid:
            self._consume_text_run(cursor)
            logger.debug("  => INSTRUCTION_TEXT_SEGMENT (after lone '{')")
            return TokenType.INSTRUCTION_TEXT_SEGMENT

        logger.debug("  lone '{' with no text segment acceptable, declining")
        return None

    def _scan_text_segment(self, cursor: Cursor) -> TokenType:
        """Scan the longest run free of newline, ``{`` and end of input.

        The lookahead must not be a terminator, so the token is never empty.
        """
        self._consume_text_run(cursor)
        logger.debug("  => INSTRUCTION_TEXT_SEGMENT")
        return TokenType.INSTRUCTION_TEXT_SEGMENT

    def _consume_text_run(self, cursor: Cursor) -> None:
        while cursor.lookahead not in TEXT_TERMINATORS:
            cursor.advance()
        cursor.mark_end()
