"""Tests for ContextVar-based scan configuration.

Validates defaults, validation, context manager behavior, and that
scanners capture the config active when they are created.
"""

import pytest

from scriptlex import (
    ConfigError,
    Cursor,
    ExternalScanner,
    ScanConfig,
    TokenType,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.tab_width == 3
        assert config.max_indent_depth == 100
        assert config.serialization_buffer_size == 1024

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.tab_width = 4  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("kwargs", "field_name"),
        [
            ({"tab_width": 0}, "tab_width"),
            ({"max_indent_depth": 0}, "max_indent_depth"),
            ({"max_indent_depth": 256}, "max_indent_depth"),
            ({"serialization_buffer_size": 5}, "serialization_buffer_size"),
        ],
    )
    def test_invalid_values_rejected(self, kwargs: dict, field_name: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ScanConfig(**kwargs)
        assert exc_info.value.field_name == field_name
        assert field_name in str(exc_info.value)

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"tab_width": 4, "unknown_key": "ignored"})
        assert config.tab_width == 4
        assert config.max_indent_depth == 100

    def test_from_dict_validates(self) -> None:
        with pytest.raises(ConfigError):
            ScanConfig.from_dict({"tab_width": -1})


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_reset(self) -> None:
        set_scan_config(ScanConfig(tab_width=8))
        assert get_scan_config().tab_width == 8
        reset_scan_config()
        assert get_scan_config().tab_width == 3

    def test_context_manager_restores(self) -> None:
        with scan_config_context(ScanConfig(tab_width=2)):
            assert get_scan_config().tab_width == 2
        assert get_scan_config().tab_width == 3

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(tab_width=2)):
                raise RuntimeError("boom")
        assert get_scan_config().tab_width == 3


class TestScannerCapturesConfig:
    """A scanner keeps the config active at creation."""

    def test_scanner_uses_context_config(self) -> None:
        with scan_config_context(ScanConfig(tab_width=4)):
            scanner = ExternalScanner.create()
        assert scanner.config.tab_width == 4
        assert scanner.scan(Cursor("\n\tx"), {TokenType.INDENT}) is TokenType.INDENT
        assert scanner.state.indents == (0, 4)

    def test_explicit_config_wins(self) -> None:
        with scan_config_context(ScanConfig(tab_width=4)):
            scanner = ExternalScanner.create(ScanConfig(tab_width=2))
        assert scanner.config.tab_width == 2

    def test_depth_cap_from_config(self) -> None:
        scanner = ExternalScanner.create(ScanConfig(max_indent_depth=5))
        assert scanner.state.max_depth == 5
