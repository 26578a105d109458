"""devlog delete — remove one entry after confirmation."""

from __future__ import annotations

import click


@click.command()
@click.argument("entry_id", type=int)
@click.option("-y", "--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def delete(config, entry_id: int, yes: bool) -> None:
    """Delete the entry with ENTRY_ID (see `devlog list --ids`)."""
    from devlog.cli.common import create_store, run_async
    from devlog.view.controller import CONFIRM_DELETE

    async def _delete():
        store = create_store(config)
        await store.load()
        entry = store.get(entry_id)
        if entry is None:
            raise click.ClickException(f"No entry with id {entry_id}.")
        click.echo(entry.formatted)
        if not yes and not click.confirm(CONFIRM_DELETE, default=False):
            return False
        return await store.remove(entry_id)

    if run_async(_delete()):
        click.echo("Deleted.")
