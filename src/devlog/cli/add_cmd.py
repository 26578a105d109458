"""devlog add — append one entry."""

from __future__ import annotations

import click


@click.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def add(config, words: tuple[str, ...]) -> None:
    """Log a new entry. Blank text is ignored."""
    from devlog.cli.common import create_store, run_async
    from devlog.view.models import count_label

    async def _add():
        store = create_store(config)
        await store.load()
        return await store.add(" ".join(words)), store.count()

    entry, count = run_async(_add())
    if entry is None:
        return
    click.echo(entry.formatted)
    click.echo(count_label(count))
