"""External scanner package for scriptlex.

Architecture:
lexer/
├── __init__.py          # Re-exports ExternalScanner and the host contract
├── core.py              # ExternalScanner (mixin composition + dispatch)
├── modes.py             # ScanMode, character constants, select_mode()
├── state.py             # IndentState (indent stack + pending-dedent target)
└── scanners/
    ├── instruction.py   # {! and instruction text segments
    ├── dedent.py        # Pending-dedent resolution
    └── line.py          # Line-boundary measurement, INDENT/DEDENT/NEWLINE

Usage:
    >>> from scriptlex.cursor import Cursor
    >>> from scriptlex.lexer import ExternalScanner
    >>> from scriptlex.tokens import TokenType
    >>> scanner = ExternalScanner.create()
    >>> scanner.scan(Cursor("{!name}"), {TokenType.INTERPOLATION_START})
    <TokenType.INTERPOLATION_START: 3>

"""

from scriptlex.lexer.core import (
    ExternalScanner,
    create,
    deserialize,
    destroy,
    scan,
    serialize,
)
from scriptlex.lexer.modes import ScanMode
from scriptlex.lexer.state import IndentState

__all__ = [
    "ExternalScanner",
    "IndentState",
    "ScanMode",
    "create",
    "deserialize",
    "destroy",
    "scan",
    "serialize",
]
