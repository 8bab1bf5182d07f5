"""Line-boundary scanner mixin.

Measures the indentation of the next logical line and turns the change
into INDENT, DEDENT or NEWLINE. Characters after the first newline are
skipped, not included: the emitted token covers that newline only, and the
host resumes right after it.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from scriptlex.config import ScanConfig
from scriptlex.cursor import Cursor
from scriptlex.lexer.modes import COMMENT_CHAR, LINE_BREAK_CHARS
from scriptlex.lexer.state import IndentState
from scriptlex.tokens import TokenType
from scriptlex.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LineBoundary:
    """Result of measuring across a line boundary.

    Attributes:
        width: Indentation width of the next logical line (0 at end of input)
        consumed: Whether a newline was included in the token
        at_eof: Whether measuring stopped at end of input

    """

    width: int
    consumed: bool
    at_eof: bool


class LineScannerMixin:
    """Mixin providing line-boundary measurement and the INDENT/DEDENT/NEWLINE decision."""

    # Set by ExternalScanner
    _state: IndentState
    _config: ScanConfig

    def _scan_line_boundary(
        self, cursor: Cursor, valid: Collection[TokenType]
    ) -> TokenType | None:
        """Scan across a line boundary and decide the layout token.

        Declines unless the lookahead is a line break or end of input, so
        same-line whitespace is left to the host.
        """
        if cursor.lookahead not in LINE_BREAK_CHARS and not cursor.eof():
            logger.debug("  not at newline/eof, declining")
            return None

        boundary = self._measure_line_boundary(cursor)
        if boundary is None:
            logger.debug("  no line boundary found, declining")
            return None
        return self._decide_layout(boundary, cursor, valid)

    def _measure_line_boundary(self, cursor: Cursor) -> LineBoundary | None:
        """Consume newlines, blank lines and comment-only lines.

        Returns:
            The measured boundary, or None when a non-blank character was
            reached before any newline.
        """
        tab_width = self._config.tab_width
        found_end_of_line = False
        consumed = False
        width = 0

        while True:
            char = cursor.lookahead
            if char == "\n":
                if not found_end_of_line:
                    # First newline is the token's only content
                    cursor.advance()
                    cursor.mark_end()
                    consumed = True
                else:
                    cursor.advance(skip=True)
                found_end_of_line = True
                width = 0
            elif char == "\r":
                cursor.advance(skip=True)
            elif char == " " and found_end_of_line:
                width += 1
                cursor.advance(skip=True)
            elif char == "\t" and found_end_of_line:
                width += tab_width
                cursor.advance(skip=True)
            elif char == COMMENT_CHAR and found_end_of_line:
                # Comment-only line: its width is discarded by the next newline
                while cursor.lookahead not in ("", "\n"):
                    cursor.advance(skip=True)
            elif cursor.eof():
                if not found_end_of_line:
                    cursor.mark_end()
                logger.debug("  reached EOF")
                return LineBoundary(width=0, consumed=consumed, at_eof=True)
            else:
                logger.debug("  next line starts with %r, width=%d", char, width)
                if not found_end_of_line:
                    return None
                return LineBoundary(width=width, consumed=consumed, at_eof=False)

    def _decide_layout(
        self, boundary: LineBoundary, cursor: Cursor, valid: Collection[TokenType]
    ) -> TokenType | None:
        """Apply the indent-stack rules: INDENT, then DEDENT, then NEWLINE."""
        state = self._state
        width = boundary.width
        current = state.current
        logger.debug("  line boundary: width=%d, current=%d", width, current)

        if TokenType.INDENT in valid and width > current:
            if not state.push(width):
                logger.debug("  indent depth cap %d reached, level %d not tracked", state.max_depth, width)
            state.pending_dedent = None
            logger.debug("  => INDENT (new level %d)", width)
            return TokenType.INDENT

        if TokenType.DEDENT in valid and width < current:
            new_current = state.pop()
            if width < new_current:
                state.pending_dedent = width
            logger.debug("  => DEDENT (back to %d)", new_current)
            return TokenType.DEDENT

        if width < current:
            state.pending_dedent = width
            logger.debug("  DEDENT not acceptable, stored pending target %d", width)

        # A bare end of input must not yield NEWLINE, or the host would loop
        if TokenType.NEWLINE in valid and not (boundary.at_eof and not boundary.consumed):
            logger.debug("  => NEWLINE")
            return TokenType.NEWLINE

        logger.debug("  => no token")
        return None
