"""Indent stack and pending-dedent marker.

The only state an ExternalScanner keeps between calls. Widths are column
counts with tabs already expanded. The stack always starts at 0, is never
empty, and strictly increases from bottom to top.

Depth cap:
    Once ``max_depth`` levels are open, push() stops recording new levels
    but callers still emit INDENT. A later DEDENT then closes the deepest
    tracked level, which may not be the block the source closes. This is a
    soft limit, not an error.

"""

from __future__ import annotations

from collections.abc import Iterable


class IndentState:
    """Open indentation levels plus an optional pending-dedent target.

    Usage:
            >>> state = IndentState()
            >>> state.push(3)
            True
            >>> state.indents
            (0, 3)
            >>> state.pop()
            0

    """

    __slots__ = ("_indents", "_max_depth", "pending_dedent")

    def __init__(self, max_depth: int = 100) -> None:
        self._max_depth = max_depth
        self._indents: list[int] = [0]
        # Target width while DEDENTs are still owed; None when unset
        self.pending_dedent: int | None = None

    @property
    def current(self) -> int:
        """Width of the innermost open block."""
        return self._indents[-1]

    @property
    def depth(self) -> int:
        """Number of open levels, base level included."""
        return len(self._indents)

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def indents(self) -> tuple[int, ...]:
        return tuple(self._indents)

    @property
    def at_base(self) -> bool:
        return len(self._indents) == 1

    def push(self, width: int) -> bool:
        """Open a level at ``width``.

        Returns:
            False when the depth cap is reached and the level is not tracked.
        """
        if len(self._indents) >= self._max_depth:
            return False
        self._indents.append(width)
        return True

    def pop(self) -> int:
        """Close the innermost level and return the new current width.

        The base level is never removed.
        """
        if len(self._indents) > 1:
            self._indents.pop()
        return self._indents[-1]

    def reset(self) -> None:
        """Return to the fresh-session state."""
        self._indents = [0]
        self.pending_dedent = None

    def restore(self, indents: Iterable[int], pending_dedent: int | None) -> None:
        """Replace the whole state, e.g. from a decoded snapshot.

        The sequence is normalized: the base is forced to 0, entries that
        do not strictly increase end the sequence, and it is clamped to
        the depth cap.
        """
        restored = [0]
        for width in list(indents)[1:]:
            if len(restored) >= self._max_depth or width <= restored[-1]:
                break
            restored.append(width)
        self._indents = restored
        self.pending_dedent = pending_dedent if pending_dedent is not None and pending_dedent >= 0 else None

    def snapshot(self) -> tuple[tuple[int, ...], int | None]:
        """(indents, pending_dedent) pair for comparison and encoding."""
        return tuple(self._indents), self.pending_dedent

    def __repr__(self) -> str:
        return f"IndentState(indents={self._indents!r}, pending_dedent={self.pending_dedent!r})"
