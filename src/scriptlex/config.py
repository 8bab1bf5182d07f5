"""ContextVar-based scanner configuration for scriptlex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A scanner captures the active config when it is created and keeps it for
its whole session, so changing the config never alters a live scanner.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from scriptlex.config import ScanConfig, scan_config_context
    from scriptlex.lexer import ExternalScanner

    with scan_config_context(ScanConfig(tab_width=4)):
        scanner = ExternalScanner.create()

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from scriptlex.errors import ConfigError

# Version byte + length byte + 2-byte pending marker
STATE_HEADER_SIZE = 4

# Serialization writes the stack length in a single byte
MAX_ENCODABLE_DEPTH = 255


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scanner configuration.

    Attributes:
        tab_width: Columns added per tab in leading indentation. Fixed stop,
            not aligned to a tab grid.
        max_indent_depth: Maximum number of tracked indent levels, base
            level included. Deeper levels are silently not tracked.
        serialization_buffer_size: Upper bound on serialized state size in
            bytes. Stack entries that do not fit are dropped.

    """

    tab_width: int = 3
    max_indent_depth: int = 100
    serialization_buffer_size: int = 1024

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            raise ConfigError("tab_width", f"must be at least 1, got {self.tab_width}")
        if not 1 <= self.max_indent_depth <= MAX_ENCODABLE_DEPTH:
            raise ConfigError(
                "max_indent_depth",
                f"must be between 1 and {MAX_ENCODABLE_DEPTH}, got {self.max_indent_depth}",
            )
        if self.serialization_buffer_size < STATE_HEADER_SIZE + 2:
            raise ConfigError(
                "serialization_buffer_size",
                f"must hold the header and one entry ({STATE_HEADER_SIZE + 2} bytes), "
                f"got {self.serialization_buffer_size}",
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from a dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"tab_width": 4, "color": "red"}).tab_width
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get the scan configuration active in this context."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for the current context.

    Only scanners created afterwards see the new values.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(tab_width=8)):
        ...     get_scan_config().tab_width
        8

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
