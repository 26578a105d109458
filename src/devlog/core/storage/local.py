"""
Local filesystem storage backend.

Each key maps to one UTF-8 text file under ``base_path``.
"""

from pathlib import Path

import aiofiles
from loguru import logger

from .base import StorageBackend, StorageError, StorageKeyError, StoragePermissionError


class LocalStorage(StorageBackend):
    """Local filesystem storage backend."""

    def __init__(self, base_path: str = "~/.devlog/storage", **config):
        super().__init__(**config)
        self.base_path = Path(base_path).expanduser().resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, key: str) -> Path:
        """Resolve a storage key to an absolute path under ``base_path``.

        Rejects unsafe keys (absolute paths, traversal, empty keys, and
        backslash-delimited paths) to prevent writes outside ``base_path``.
        """
        raw_key = key.strip()
        if not raw_key:
            raise StoragePermissionError("Storage key cannot be empty.")
        if "\x00" in raw_key:
            raise StoragePermissionError("Storage key cannot contain null bytes.")
        if "\\" in raw_key:
            raise StoragePermissionError("Storage key cannot contain backslashes. Use '/' separators.")

        key_path = Path(raw_key)
        if key_path.is_absolute() or raw_key.startswith("~"):
            raise StoragePermissionError(f"Unsafe storage key '{key}': absolute paths are not allowed.")

        full_path = (self.base_path / key_path).resolve()
        try:
            full_path.relative_to(self.base_path)
        except ValueError as e:
            raise StoragePermissionError(f"Unsafe storage key '{key}': path traversal is not allowed.") from e
        return full_path

    async def save(self, key: str, data: str) -> None:
        path = self._get_full_path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(path, "w", encoding="utf-8") as f:
                await f.write(data)
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write to {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot write to {path}: {e}") from e

        logger.debug(f"Saved {len(data)} chars to {path}")

    async def load(self, key: str) -> str:
        path = self._get_full_path(key)
        if not path.is_file():
            raise StorageKeyError(f"Key not found: {key}")

        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                return await f.read()
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {path}: {e}") from e
