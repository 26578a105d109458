"""Shared setup logic for CLI commands."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import click
from loguru import logger

from devlog.core.config import Config
from devlog.core.events import ENTRIES_LOADED, ENTRY_ADDED, ENTRY_REMOVED, EXPORT_CREATED, Event, EventBus
from devlog.core.exceptions import ConfigurationError, DevlogError
from devlog.core.storage import LocalStorage, MemoryStorage, StorageBackend, StorageError
from devlog.core.utils.logging import setup_logging
from devlog.journal.store import EntryStore

DEVLOG_DIR = Path.home() / ".devlog"
DEFAULT_CONFIG_PATH = DEVLOG_DIR / "config.yaml"


def load_config(config_file: str | None, data_dir: str | None = None, verbose: bool = False) -> Config:
    """Load config and configure logging from it."""
    config = Config(config_file=config_file, data_dir=data_dir)
    level = "DEBUG" if verbose else config.get("logging.level", "WARNING")
    setup_logging(level=level, log_file=config.get("logging.file"))
    return config


def create_storage(config: Config) -> StorageBackend:
    """Build the storage backend named by ``storage.backend``."""
    backend = str(config.get("storage.backend", "local")).lower()
    if backend == "local":
        return LocalStorage(base_path=os.path.join(config.get_data_dir(), "storage"))
    if backend == "memory":
        return MemoryStorage()
    raise ConfigurationError(f"Unknown storage backend '{backend}'. Use 'local' or 'memory'.")


def create_events() -> EventBus:
    """Event bus with an audit hook that records every journal change in the log."""
    bus = EventBus()
    for name in (ENTRIES_LOADED, ENTRY_ADDED, ENTRY_REMOVED, EXPORT_CREATED):
        bus.on(name, _audit)
    return bus


def _audit(event: Event) -> None:
    level = "DEBUG" if event.name == ENTRIES_LOADED else "INFO"
    logger.log(level, f"{event.name} {event.payload}")


def create_store(config: Config, events: EventBus | None = None) -> EntryStore:
    return EntryStore(
        create_storage(config),
        key=config.get("storage.key"),
        events=events if events is not None else create_events(),
    )


def run_async(coro):
    """Run *coro* to completion, turning devlog errors into clean CLI failures."""
    try:
        return asyncio.run(coro)
    except (DevlogError, StorageError) as e:
        raise click.ClickException(str(e)) from e
