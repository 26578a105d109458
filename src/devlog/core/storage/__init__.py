"""
Key-value storage backends for devlog.

The journal keeps its whole collection in a single record, so backends
only need to save, load and delete string-valued records by key.
"""

from .base import (
    StorageBackend,
    StorageError,
    StorageKeyError,
    StoragePermissionError,
)
from .local import LocalStorage
from .memory import MemoryStorage

__all__ = [
    "LocalStorage",
    "MemoryStorage",
    "StorageBackend",
    "StorageError",
    "StorageKeyError",
    "StoragePermissionError",
]
