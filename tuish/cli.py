"""Command line entry point for tuish"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from tuish import __version__
from tuish.config import ConfigStore
from tuish.launcher import ShellLauncher
from tuish.logger import setup_logging
from tuish.storage import AliasStore

console = Console()


@click.group(invoke_without_command=True)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="TUISH_CONFIG",
    help="Config file to use instead of the default location",
)
@click.version_option(version=__version__, prog_name="tuish")
@click.pass_context
def main(ctx, config_file):
    """tuish - launch your shell aliases from a terminal menu

    Run without commands to open the interactive menu.
    """
    setup_logging()
    ctx.obj = ConfigStore(config_file)

    if ctx.invoked_subcommand is None:
        from tuish.tui import TuishApp

        app = TuishApp(ctx.obj)
        app.run()


@main.command(name="list")
@click.pass_obj
def list_aliases(store):
    """List all aliases in a table"""
    config = store.load()
    if not config.aliases:
        console.print("[yellow]No aliases found.[/] Add one from the menu with 'tuish'")
        return

    table = Table(title=f"Your Aliases ({len(config.aliases)} total)")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Key", style="yellow", justify="center")
    table.add_column("Command", style="green")
    for alias in config.aliases.values():
        table.add_row(alias.name, alias.keybind or "", alias.command)

    console.print(table)
    console.print(f"[dim]Shell: {config.default_shell}  Config: {store.path}[/]")


@main.command()
@click.argument("name")
@click.pass_obj
def run(store, name):
    """Run an alias through the default shell without opening the menu"""
    config = store.load()
    alias = AliasStore.from_mapping(config.aliases).get_by_name(name)
    if alias is None:
        console.print(f"[red]✗[/] Alias '{name}' not found")
        sys.exit(1)

    launcher = ShellLauncher(console=console)
    returncode = launcher.run_command(alias.command, config.default_shell)
    sys.exit(1 if returncode is None else returncode)
