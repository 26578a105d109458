"""devlog CLI — entry point for the shell, add, list, delete and export commands."""

import click

from devlog import __version__
from devlog.core.exceptions import DevlogError

from .common import DEFAULT_CONFIG_PATH, load_config


@click.group()
@click.version_option(version=__version__, package_name="devlog")
@click.option("--config", "config_file", default=str(DEFAULT_CONFIG_PATH), help="Path to a YAML or JSON config file.")
@click.option("--data-dir", default=None, help="Directory holding the journal (default: ~/.devlog).")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_file: str, data_dir: str | None, verbose: bool) -> None:
    """devlog — a tiny developer journal."""
    try:
        ctx.obj = load_config(config_file, data_dir=data_dir, verbose=verbose)
    except DevlogError as e:
        raise click.ClickException(str(e)) from e


from .add_cmd import add
from .delete_cmd import delete
from .export_cmd import export
from .list_cmd import list_entries
from .shell_cmd import shell

main.add_command(shell)
main.add_command(add)
main.add_command(list_entries)
main.add_command(delete)
main.add_command(export)
