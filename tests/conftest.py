"""Shared test fixtures for devlog."""

import os
import tempfile

import pytest

from devlog.core.storage import MemoryStorage
from devlog.journal.store import EntryStore


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "export_dir": os.path.join(tmp_dir, "exports"),
        },
        "export": {"filename": "journal.txt"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


class FakeClock:
    """Deterministic millisecond clock: 1000, 1001, 1002, ..."""

    def __init__(self, start: int = 1000):
        self.value = start

    def __call__(self) -> int:
        value = self.value
        self.value += 1
        return value


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return EntryStore(storage, clock=FakeClock(), today=lambda: "17/10/2026")


class FakeHost:
    """Host that records calls and answers confirmations from a preset value."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.prompts: list[str] = []
        self.alerts: list[str] = []
        self.downloads: list = []
        self.refreshes = 0

    async def confirm(self, message):
        self.prompts.append(message)
        return self.answer

    def alert(self, message):
        self.alerts.append(message)

    async def download(self, file):
        self.downloads.append(file)

    def refresh(self, view):
        self.refreshes += 1


@pytest.fixture
def host():
    return FakeHost()
