"""
Abstract base class for storage backends.

Provides a unified async key-value interface over the local filesystem
or process memory.
"""

from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Abstract base class for storage backends.

    Values are text records. Writes replace the whole record; there is no
    append and no partial-write protection beyond what the medium offers.
    """

    def __init__(self, **config):
        self.config = config

    @abstractmethod
    async def save(self, key: str, data: str) -> None:
        """Write *data* under *key*, replacing any previous value."""

    @abstractmethod
    async def load(self, key: str) -> str:
        """Load a record. Raises StorageKeyError if not found."""

    async def get(self, key: str, default: str | None = None) -> str | None:
        """Load a record, returning *default* when the key is missing."""
        try:
            return await self.load(key)
        except StorageKeyError:
            return default


class StorageError(Exception):
    """Base exception for storage errors."""


class StorageKeyError(StorageError, KeyError):
    """Raised when a storage key doesn't exist."""


class StoragePermissionError(StorageError):
    """Raised when storage operation is not permitted."""
