"""Host-owned character cursor handed to the external scanner.

Models the lexer callback an incremental parser passes to an external
scanner: the scanner peeks at ``lookahead``, moves forward with
``advance()`` (optionally skipping characters so they are not part of the
token), and fixes the token end with ``mark_end()``. The host brackets
every scan attempt with ``begin()`` and either ``finish()`` or ``reset()``.

Thread Safety:
Cursor instances are single-owner. Create one per source string.

"""

from __future__ import annotations


class Cursor:
    """Character cursor over a source string.

    Usage:
            >>> cursor = Cursor("\\n   x")
            >>> cursor.begin()
            >>> cursor.advance()
            >>> cursor.mark_end()
            >>> cursor.advance(skip=True)
            >>> cursor.finish()
            (0, 1)
            >>> cursor.lookahead
            ' '

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        # Current token attempt
        "_start",
        "_start_lineno",
        "_start_col",
        "_included",
        "_end",
        "_end_lineno",
        "_end_col",
        # Rollback point for a declined attempt
        "_saved",
    )

    def __init__(self, source: str, pos: int = 0) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        while self._pos < pos and self._pos < self._source_len:
            self._step()
        self.begin()

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._pos

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col

    @property
    def lookahead(self) -> str:
        """Current character, or empty string at end of input."""
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def eof(self) -> bool:
        return self._pos >= self._source_len

    # =========================================================================
    # Scanner-facing operations
    # =========================================================================

    def advance(self, skip: bool = False) -> None:
        """Move past the lookahead character.

        Skipped characters that precede every included character are left
        out of the token: the token start moves past them.
        """
        if self._pos >= self._source_len:
            return
        self._step()
        if skip and not self._included:
            self._start = self._pos
            self._start_lineno = self._lineno
            self._start_col = self._col
        elif not skip:
            self._included = True

    def mark_end(self) -> None:
        """Fix the token end at the current position."""
        self._end = self._pos
        self._end_lineno = self._lineno
        self._end_col = self._col

    # =========================================================================
    # Host-facing operations
    # =========================================================================

    def begin(self) -> None:
        """Start a new token attempt at the current position."""
        self._saved = (self._pos, self._lineno, self._col)
        self._start = self._pos
        self._start_lineno = self._lineno
        self._start_col = self._col
        self._included = False
        self._end = -1
        self._end_lineno = self._lineno
        self._end_col = self._col

    def reset(self) -> None:
        """Roll back a declined attempt to where begin() was called."""
        self._pos, self._lineno, self._col = self._saved
        self.begin()

    def finish(self) -> tuple[int, int]:
        """Accept the current attempt and return its (start, end) span.

        The cursor resumes at the token end, so characters the scanner
        looked at past ``mark_end()`` are scanned again by the next attempt.
        """
        if self._end < 0:
            self.mark_end()
        start, end = self._start, self._end
        self._pos, self._lineno, self._col = end, self._end_lineno, self._end_col
        return start, end

    @property
    def token_start(self) -> tuple[int, int, int]:
        """(offset, lineno, col) where the current attempt's token begins."""
        return self._start, self._start_lineno, self._start_col

    def _step(self) -> None:
        char = self._source[self._pos]
        self._pos += 1
        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1
