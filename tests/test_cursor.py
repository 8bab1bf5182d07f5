"""Tests for the host cursor handed to the scanner."""

from scriptlex.cursor import Cursor


class TestNavigation:
    def test_lookahead_and_eof(self) -> None:
        cursor = Cursor("ab")
        assert cursor.lookahead == "a"
        cursor.advance()
        cursor.advance()
        assert cursor.lookahead == ""
        assert cursor.eof()

    def test_advance_at_eof_is_noop(self) -> None:
        cursor = Cursor("")
        cursor.advance()
        assert cursor.position == 0

    def test_line_and_column_tracking(self) -> None:
        cursor = Cursor("ab\ncd")
        for _ in range(4):
            cursor.advance()
        assert (cursor.lineno, cursor.col) == (2, 2)

    def test_start_position(self) -> None:
        cursor = Cursor("ab\ncd", pos=3)
        assert cursor.lookahead == "c"
        assert (cursor.lineno, cursor.col) == (2, 1)


class TestTokenSpans:
    def test_finish_without_mark_end_uses_position(self) -> None:
        cursor = Cursor("abc")
        cursor.begin()
        cursor.advance()
        cursor.advance()
        assert cursor.finish() == (0, 2)
        assert cursor.lookahead == "c"

    def test_mark_end_sets_resume_point(self) -> None:
        cursor = Cursor("\n   x")
        cursor.begin()
        cursor.advance()
        cursor.mark_end()
        cursor.advance(skip=True)
        cursor.advance(skip=True)
        assert cursor.finish() == (0, 1)
        assert cursor.position == 1
        assert (cursor.lineno, cursor.col) == (2, 1)

    def test_leading_skips_move_token_start(self) -> None:
        cursor = Cursor("\r\nx")
        cursor.begin()
        cursor.advance(skip=True)
        cursor.advance()
        cursor.mark_end()
        assert cursor.token_start == (1, 1, 2)
        assert cursor.finish() == (1, 2)

    def test_skips_after_content_stay_in_span(self) -> None:
        cursor = Cursor("a b")
        cursor.begin()
        cursor.advance()
        cursor.advance(skip=True)
        cursor.advance()
        assert cursor.finish() == (0, 3)

    def test_reset_rolls_back(self) -> None:
        cursor = Cursor("{x")
        cursor.begin()
        cursor.advance()
        cursor.reset()
        assert cursor.position == 0
        assert cursor.lookahead == "{"
