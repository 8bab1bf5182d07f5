"""Reference host that drives the external scanner over a whole source.

A real parser asks the scanner for a token with the kinds its current parse
state allows, and falls back to its own rules when the scanner declines.
Tokenizer plays that role for tooling and tests, with deliberately simple
"ordinary rules":

- spaces, tabs, carriage returns and ``#`` comments are extras (skipped)
- a newline the scanner declined is skipped
- any other run of non-blank characters is one CONTENT token

The kinds offered on each step come from a fixed set or from a callable
that sees the previously emitted token.

Example:
    >>> from scriptlex.tokenizer import tokenize
    >>> [t.type.name for t in tokenize("a\\n   b\\n")]
    ['CONTENT', 'INDENT', 'CONTENT', 'DEDENT', 'EOF']

"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterator

from scriptlex.cursor import Cursor
from scriptlex.errors import StalledTokenizerError
from scriptlex.lexer import ExternalScanner
from scriptlex.lexer.modes import COMMENT_CHAR
from scriptlex.tokens import Token, TokenType
from scriptlex.utils.logger import get_logger

logger = get_logger(__name__)

LAYOUT_KINDS: frozenset[TokenType] = frozenset(
    {TokenType.NEWLINE, TokenType.INDENT, TokenType.DEDENT}
)
INSTRUCTION_KINDS: frozenset[TokenType] = frozenset(
    {TokenType.INTERPOLATION_START, TokenType.INSTRUCTION_TEXT_SEGMENT}
)

ValidPolicy = Callable[[Token | None], Collection[TokenType]]

_EXTRAS = frozenset(" \t\r")
_BLANKS = frozenset(" \t\r\n")


class Tokenizer:
    """Drives an ExternalScanner over a source string.

    Usage:
            >>> tokenizer = Tokenizer("x\\n", valid=LAYOUT_KINDS)
            >>> [t.type.name for t in tokenizer.tokenize()]
            ['CONTENT', 'NEWLINE', 'EOF']

    Thread Safety:
        Tokenizer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_cursor",
        "_scanner",
        "_policy",
        "_previous",
    )

    def __init__(
        self,
        source: str,
        valid: Collection[TokenType] | ValidPolicy = LAYOUT_KINDS,
        *,
        source_file: str | None = None,
        scanner: ExternalScanner | None = None,
    ) -> None:
        """Initialize with source text.

        Args:
            source: Script source text
            valid: Kinds offered on every step, or a callable returning
                them given the previous token (None on the first step)
            source_file: Optional source file path for token locations
            scanner: Scanner to drive; a fresh one is created when omitted
        """
        self._source = source
        self._source_file = source_file
        self._cursor = Cursor(source)
        self._scanner = scanner if scanner is not None else ExternalScanner.create()
        if callable(valid):
            self._policy: ValidPolicy = valid
        else:
            fixed = frozenset(valid)
            self._policy = lambda _previous: fixed
        self._previous: Token | None = None

    @property
    def scanner(self) -> ExternalScanner:
        return self._scanner

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the source.

        Yields:
            Tokens one at a time, ending with a single EOF token.

        Raises:
            StalledTokenizerError: If the scanner emits an empty token that
                changes no state, which would repeat forever.
        """
        cursor = self._cursor
        while True:
            valid = frozenset(self._policy(self._previous))
            token = self._scan_external(valid)
            if token is None:
                if cursor.eof():
                    break
                token = self._scan_ordinary()
                if token is None:
                    continue
            self._previous = token
            yield token

        cursor.begin()
        offset, lineno, col = cursor.token_start
        yield Token(TokenType.EOF, "", lineno, col, offset, offset, self._source_file)

    def _scan_external(self, valid: frozenset[TokenType]) -> Token | None:
        """Offer one token to the scanner; roll back if it declines."""
        cursor = self._cursor
        cursor.begin()
        snapshot = self._scanner.state.snapshot()
        kind = self._scanner.scan(cursor, valid)
        if kind is None:
            cursor.reset()
            return None

        offset, lineno, col = cursor.token_start
        start, end = cursor.finish()
        if start == end and self._scanner.state.snapshot() == snapshot:
            raise StalledTokenizerError(
                f"scanner emitted empty {kind.name} without changing state",
                lineno=lineno,
                col_offset=col,
                source_file=self._source_file,
            )
        return Token(kind, self._source[start:end], lineno, col, offset, end, self._source_file)

    def _scan_ordinary(self) -> Token | None:
        """Apply the host's own rules at the cursor.

        Returns:
            A CONTENT token, or None when only extras were skipped.
        """
        cursor = self._cursor
        cursor.begin()
        char = cursor.lookahead

        if char in _EXTRAS or char == "\n":
            cursor.advance()
            cursor.finish()
            return None

        if char == COMMENT_CHAR:
            while cursor.lookahead not in ("", "\n"):
                cursor.advance()
            cursor.finish()
            return None

        offset, lineno, col = cursor.token_start
        while cursor.lookahead and cursor.lookahead not in _BLANKS:
            cursor.advance()
        start, end = cursor.finish()
        return Token(
            TokenType.CONTENT, self._source[start:end], lineno, col, offset, end, self._source_file
        )


def tokenize(
    source: str,
    valid: Collection[TokenType] | ValidPolicy = LAYOUT_KINDS,
    *,
    source_file: str | None = None,
    scanner: ExternalScanner | None = None,
) -> Iterator[Token]:
    """Tokenize ``source`` with a fresh Tokenizer.

    See Tokenizer for the meaning of the arguments.
    """
    return Tokenizer(source, valid, source_file=source_file, scanner=scanner).tokenize()
