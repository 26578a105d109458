"""Tests for devlog.core.exceptions."""

from devlog.core.exceptions import ConfigurationError, DevlogError, NothingToExportError


def test_hierarchy():
    """All exceptions should inherit from DevlogError."""
    for exc_cls in [ConfigurationError, NothingToExportError]:
        assert issubclass(exc_cls, DevlogError)


def test_message_preserved():
    err = NothingToExportError("No entries to download.")
    assert str(err) == "No entries to download."
