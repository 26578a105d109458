"""Writing export files to disk."""

from __future__ import annotations

from pathlib import Path

import aiofiles
from loguru import logger

from devlog.core.exceptions import ExportError

from .models import ExportFile


async def write_export(file: ExportFile, directory: str | Path) -> Path:
    """Write *file* into *directory* (created if needed) and return its path.

    An existing file with the same name is overwritten.

    Raises:
        ExportError: If the directory or file cannot be written.
    """
    target_dir = Path(directory).expanduser()
    path = target_dir / file.filename

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(path, "w", encoding="utf-8") as f:
            await f.write(file.content)
    except OSError as e:
        raise ExportError(f"Cannot write {path}: {e}") from e

    logger.info(f"Exported journal to {path}")
    return path
