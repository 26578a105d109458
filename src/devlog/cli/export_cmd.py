"""devlog export — write all entries to a plain-text file."""

from __future__ import annotations

from pathlib import Path

import click


@click.command()
@click.option("-o", "--out", default=None, help="Output file, or '-' for stdout (default: export dir / export.filename).")
@click.pass_obj
def export(config, out: str | None) -> None:
    """Export every entry as "[date] text", one per line."""
    from devlog.cli.common import create_events, create_store, run_async
    from devlog.core.events import EXPORT_CREATED, Event
    from devlog.journal.export import write_export
    from devlog.journal.models import ExportFile

    async def _export():
        events = create_events()
        store = create_store(config, events=events)
        await store.load()
        content = store.export_text()

        if out == "-":
            click.echo(content)
            return None
        if out:
            target = Path(out).expanduser()
            path = await write_export(ExportFile(filename=target.name, content=content), target.parent)
        else:
            file = ExportFile(filename=config.get("export.filename"), content=content)
            path = await write_export(file, config.get_export_dir())
        await events.emit(Event(name=EXPORT_CREATED, payload={"filename": path.name}, source="cli"))
        return path

    path = run_async(_export())
    if path is not None:
        click.echo(f"Exported to {path}")
