"""Shared fixtures for scriptlex tests."""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import NamedTuple

import pytest

from scriptlex.config import ScanConfig
from scriptlex.cursor import Cursor
from scriptlex.lexer import ExternalScanner
from scriptlex.tokens import TokenType

ALL_KINDS: frozenset[TokenType] = frozenset(
    {
        TokenType.NEWLINE,
        TokenType.INDENT,
        TokenType.DEDENT,
        TokenType.INTERPOLATION_START,
        TokenType.INSTRUCTION_TEXT_SEGMENT,
    }
)


class ScanResult(NamedTuple):
    """Outcome of a single host-style scan attempt."""

    kind: TokenType | None
    text: str
    resume: int


ScanOnce = Callable[[ExternalScanner, str, Collection[TokenType], int], ScanResult]


def _scan_once(
    scanner: ExternalScanner,
    source: str,
    valid: Collection[TokenType],
    pos: int = 0,
) -> ScanResult:
    cursor = Cursor(source, pos)
    cursor.begin()
    kind = scanner.scan(cursor, valid)
    if kind is None:
        cursor.reset()
        return ScanResult(None, "", cursor.position)
    start, end = cursor.finish()
    return ScanResult(kind, source[start:end], end)


@pytest.fixture
def scanner() -> ExternalScanner:
    """Fresh scanner with the default configuration."""
    return ExternalScanner.create(ScanConfig())


@pytest.fixture
def scan_once() -> ScanOnce:
    """Run one scan() call the way a host does and report kind, text and resume offset."""
    return _scan_once
