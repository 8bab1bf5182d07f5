"""Source location tracking for diagnostics and token dumps.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token in its source.

    Line and column are 1-indexed; offsets are 0-indexed character
    positions into the source string.

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=4, source_file="main.agent")
            >>> str(loc)
            'main.agent:2:4'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location as "file:line:col" or "line:col"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
