"""Token and TokenType definitions for the scriptlex scanner.

The external scanner decides one token kind per call; the reference host
(:mod:`scriptlex.tokenizer`) wraps each decision in a Token with its span.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scriptlex.location import SourceLocation


class TokenType(Enum):
    """Token kinds known to the scanner and its host.

    The first five members form the external-scanner contract and keep the
    host's ordering (their values are the indices a host passes in its
    valid-symbol array). CONTENT and EOF are produced only by the reference
    host, never by the scanner.

    """

    # Layout
    NEWLINE = 0
    INDENT = 1
    DEDENT = 2

    # Instruction text
    INTERPOLATION_START = 3  # {!
    INSTRUCTION_TEXT_SEGMENT = 4  # text up to {, newline or EOF

    # Host-side only
    CONTENT = 5
    EOF = 6


# Kinds the external scanner may return
SCANNER_KINDS: frozenset[TokenType] = frozenset(
    {
        TokenType.NEWLINE,
        TokenType.INDENT,
        TokenType.DEDENT,
        TokenType.INTERPOLATION_START,
        TokenType.INSTRUCTION_TEXT_SEGMENT,
    }
)


def valid_kinds_from_flags(flags: Sequence[bool]) -> frozenset[TokenType]:
    """Convert a host valid-symbol array into a set of token kinds.

    Index ``i`` of ``flags`` corresponds to the TokenType whose value is
    ``i``; entries past the scanner kinds are ignored.

    Example:
        >>> sorted(k.name for k in valid_kinds_from_flags([True, False, True]))
        ['DEDENT', 'NEWLINE']

    """
    return frozenset(kind for kind in SCANNER_KINDS if kind.value < len(flags) and flags[kind.value])


@dataclass(frozen=True, slots=True)
class Token:
    """A token emitted to the host.

    Attributes:
        type: The token kind
        value: Source text covered by the token (may be empty for DEDENT/EOF)
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _source_file: Optional source file path

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from scriptlex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def span(self) -> tuple[int, int]:
        """(start, end) offsets in the source."""
        return self._start_offset, self._end_offset
