"""Scanner modes and character constants.

The scanner has no mode of its own between calls. Each call picks one
mode from the kinds the host will accept and the lookahead character:
- INTERPOLATION: a ``{`` where INTERPOLATION_START is acceptable
- TEXT: literal instruction text where INSTRUCTION_TEXT_SEGMENT is acceptable
- LAYOUT: pending dedents and line-boundary handling

"""

from __future__ import annotations

from collections.abc import Collection
from enum import Enum, auto

from scriptlex.tokens import TokenType


class ScanMode(Enum):
    """Per-call scanning modes, in priority order."""

    INTERPOLATION = auto()
    TEXT = auto()
    LAYOUT = auto()


INTERPOLATION_OPEN = "{"
INTERPOLATION_BANG = "!"
COMMENT_CHAR = "#"

# Characters that end an instruction text segment ("" is end of input)
TEXT_TERMINATORS: frozenset[str] = frozenset({"", "\0", "\n", INTERPOLATION_OPEN})

# Lookahead characters that start line-boundary scanning
LINE_BREAK_CHARS: frozenset[str] = frozenset({"\n", "\r"})


def select_mode(valid: Collection[TokenType], lookahead: str) -> ScanMode:
    """Choose the scanning mode for one call.

    Args:
        valid: Token kinds the host accepts at this position
        lookahead: Current character ("" at end of input)

    Returns:
        The mode whose scanner handles this call.
    """
    if TokenType.INTERPOLATION_START in valid and lookahead == INTERPOLATION_OPEN:
        return ScanMode.INTERPOLATION
    if TokenType.INSTRUCTION_TEXT_SEGMENT in valid and lookahead not in TEXT_TERMINATORS:
        return ScanMode.TEXT
    return ScanMode.LAYOUT
