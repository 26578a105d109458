"""In-process storage backend. Nothing survives the process."""

from .base import StorageBackend, StorageKeyError


class MemoryStorage(StorageBackend):
    """Dict-backed storage, used for ephemeral sessions and tests."""

    def __init__(self, initial: dict[str, str] | None = None, **config):
        super().__init__(**config)
        self._records: dict[str, str] = dict(initial or {})

    async def save(self, key: str, data: str) -> None:
        self._records[key] = data

    async def load(self, key: str) -> str:
        try:
            return self._records[key]
        except KeyError:
            raise StorageKeyError(f"Key not found: {key}") from None
