"""
scriptlex: external scanner for indentation-sensitive agent scripts

Supplies the tokens a grammar-driven parser cannot describe declaratively:
INDENT / DEDENT / NEWLINE from significant whitespace (3-column tabs,
comment-only lines ignored) and ``{!`` interpolation inside raw instruction
text. The scanner is driven one token at a time by a parser host through a
small fixed contract: create, destroy, serialize, deserialize, scan.

Quick Start:
    >>> from scriptlex import tokenize
    >>> [t.type.name for t in tokenize("topic:\\n   body\\n")]
    ['CONTENT', 'INDENT', 'CONTENT', 'DEDENT', 'EOF']

    >>> # Driving the scanner directly, as a parser host does
    >>> from scriptlex import Cursor, ExternalScanner, TokenType
    >>> scanner = ExternalScanner.create()
    >>> scanner.scan(Cursor("{!x}"), {TokenType.INTERPOLATION_START})
    <TokenType.INTERPOLATION_START: 3>
    >>> snapshot = scanner.serialize()

Installation:
    pip install scriptlex            # zero runtime dependencies
    pip install scriptlex[test]      # + pytest and hypothesis
"""

from scriptlex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from scriptlex.cursor import Cursor
from scriptlex.errors import (
    ConfigError,
    ScannerClosedError,
    ScriptLexError,
    StalledTokenizerError,
)
from scriptlex.lexer import (
    ExternalScanner,
    IndentState,
    create,
    deserialize,
    destroy,
    scan,
    serialize,
)
from scriptlex.location import SourceLocation
from scriptlex.protocols import ScannerProtocol
from scriptlex.serialization import FORMAT_VERSION, decode_state, encode_state
from scriptlex.tokenizer import INSTRUCTION_KINDS, LAYOUT_KINDS, Tokenizer, tokenize
from scriptlex.tokens import SCANNER_KINDS, Token, TokenType, valid_kinds_from_flags

__version__ = "0.1.0"

__all__ = [
    # Host contract
    "ExternalScanner",
    "ScannerProtocol",
    "create",
    "destroy",
    "serialize",
    "deserialize",
    "scan",
    # State
    "IndentState",
    "FORMAT_VERSION",
    "encode_state",
    "decode_state",
    # Cursor and tokens
    "Cursor",
    "Token",
    "TokenType",
    "SCANNER_KINDS",
    "SourceLocation",
    "valid_kinds_from_flags",
    # Reference host
    "Tokenizer",
    "tokenize",
    "LAYOUT_KINDS",
    "INSTRUCTION_KINDS",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "ScriptLexError",
    "ConfigError",
    "ScannerClosedError",
    "StalledTokenizerError",
    "__version__",
]
