"""
devlog exception hierarchy.

All devlog exceptions inherit from DevlogError, so the CLI can catch
library-level errors at the command boundary while tests still distinguish
specific failure modes.
"""


class DevlogError(Exception):
    """Base exception class for all devlog errors."""


class ConfigurationError(DevlogError):
    """Raised for configuration errors (missing keys, invalid values)."""


class NothingToExportError(DevlogError):
    """Raised when an export is requested but the journal is empty."""


class ExportError(DevlogError):
    """Raised when an export file cannot be written."""
