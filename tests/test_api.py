"""Tests for the high-level scriptlex API."""

from scriptlex import (
    SCANNER_KINDS,
    Cursor,
    ExternalScanner,
    ScannerProtocol,
    TokenType,
    create,
    deserialize,
    destroy,
    scan,
    serialize,
    valid_kinds_from_flags,
)


class TestHostContract:
    """Tests for the functional create/destroy/serialize/deserialize/scan entry points."""

    def test_create_is_fresh(self) -> None:
        scanner = create()
        assert scanner.state.indents == (0,)
        assert scanner.state.pending_dedent is None

    def test_scan_consumes_through_cursor(self) -> None:
        scanner = create()
        cursor = Cursor("\n   body")
        cursor.begin()
        assert scan(scanner, cursor, {TokenType.INDENT}) is TokenType.INDENT
        assert cursor.finish() == (0, 1)

    def test_scan_declines_on_content(self) -> None:
        scanner = create()
        assert scan(scanner, Cursor("body"), SCANNER_KINDS) is None

    def test_serialize_deserialize(self) -> None:
        first = create()
        scan(first, Cursor("\n   x"), {TokenType.INDENT})
        second = create()
        deserialize(serialize(first), second)
        assert second.state.indents == (0, 3)

    def test_destroy(self) -> None:
        scanner = create()
        destroy(scanner)
        assert scanner.closed

    def test_scanner_satisfies_protocol(self) -> None:
        scanner: ScannerProtocol = ExternalScanner.create()
        assert scanner.serialize()


class TestValidKindsFromFlags:
    """Tests for converting a host valid-symbol array."""

    def test_indices_follow_kind_order(self) -> None:
        flags = [False, True, False, True, False]
        assert valid_kinds_from_flags(flags) == {
            TokenType.INDENT,
            TokenType.INTERPOLATION_START,
        }

    def test_short_array(self) -> None:
        assert valid_kinds_from_flags([True]) == {TokenType.NEWLINE}

    def test_extra_entries_ignored(self) -> None:
        assert valid_kinds_from_flags([True] * 10) == SCANNER_KINDS

    def test_all_false(self) -> None:
        assert valid_kinds_from_flags([False] * 5) == frozenset()


class TestTokenType:
    def test_scanner_kinds_exclude_host_kinds(self) -> None:
        assert TokenType.CONTENT not in SCANNER_KINDS
        assert TokenType.EOF not in SCANNER_KINDS
        assert len(SCANNER_KINDS) == 5

    def test_contract_order(self) -> None:
        assert [kind.value for kind in sorted(SCANNER_KINDS, key=lambda k: k.value)] == [
            0,
            1,
            2,
            3,
            4,
        ]
        assert TokenType(2) is TokenType.DEDENT
