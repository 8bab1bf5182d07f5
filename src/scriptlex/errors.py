"""Exception classes for scriptlex.

The scanner itself never raises while scanning: every call either emits a
token or declines. These exceptions cover misuse of the API and invalid
configuration.
"""

from __future__ import annotations


class ScriptLexError(Exception):
    """Base exception for all scriptlex errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(ScriptLexError):
    """Invalid scanner configuration value."""

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending ScanConfig field
            message: Description of the constraint that failed
        """
        self.field_name = field_name
        super().__init__(f"Invalid config '{field_name}': {message}")


class ScannerClosedError(ScriptLexError):
    """A scanner was used after destroy()."""

    pass


class StalledTokenizerError(ScriptLexError):
    """The reference host made no progress at a source position.

    Raised when a step neither emits a token nor consumes a character, which
    would otherwise loop forever.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize with optional location.

        Args:
            message: Error description
            lineno: Line number where the host stalled (1-indexed)
            col_offset: Column where the host stalled (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
