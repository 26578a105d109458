"""devlog list — print entries, optionally filtered."""

from __future__ import annotations

import click


@click.command(name="list")
@click.option("-s", "--search", "keyword", default="", help="Only show entries containing this text (case-insensitive).")
@click.option("--ids", is_flag=True, help="Prefix each line with the entry id.")
@click.pass_obj
def list_entries(config, keyword: str, ids: bool) -> None:
    """Print journal entries, oldest first."""
    from devlog.cli.common import create_store, run_async
    from devlog.journal.search import filter_entries

    async def _load():
        store = create_store(config)
        await store.load()
        return store.entries

    entries = filter_entries(run_async(_load()), keyword)
    if not entries:
        click.echo("No results found." if keyword else "No entries yet.")
        return
    for entry in entries:
        click.echo(f"{entry.id}  {entry.formatted}" if ids else entry.formatted)
