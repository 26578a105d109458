"""devlog shell — interactive terminal journal."""

from __future__ import annotations

import click


@click.command()
@click.pass_obj
def shell(config) -> None:
    """Open the journal in the terminal."""
    from devlog.cli.common import create_events, create_store, run_async
    from devlog.gateway.cli_gateway import CliGateway

    async def _shell():
        events = create_events()
        gateway = CliGateway(
            create_store(config, events=events),
            export_dir=config.get_export_dir(),
            export_filename=config.get("export.filename"),
            events=events,
        )
        await gateway.start()

    run_async(_shell())
