"""Fabric version catalog command."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lodestone.config.settings import get_settings
from lodestone.exceptions import CatalogError
from lodestone.loaders.fabric import load_fabric_versions

console = Console()


def fabric_cmd(
    catalog: Annotated[Path, typer.Argument(help="Saved Fabric meta versions JSON file")],
    show_all: Annotated[
        bool,
        typer.Option("--all", help="Include unstable game versions"),
    ] = False,
) -> None:
    """List game versions from a saved Fabric version catalog."""
    from lodestone.cli.main import state

    state.logger.info(f"Reading Fabric version catalog from {catalog}")

    try:
        versions = load_fabric_versions(catalog)
    except CatalogError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        console.print(f"Save a fresh copy from {escape(get_settings().fabric_meta_url)}")
        raise typer.Exit(1)

    games = versions.game if show_all else versions.stable_game_versions()
    state.logger.debug(f"Loaded {len(versions.game)} game versions, showing {len(games)}")

    table = Table(title="Fabric game versions")
    table.add_column("Version")
    table.add_column("Stable")
    for game in games:
        table.add_row(escape(game.version), "yes" if game.stable else "no")
    console.print(table)

    loader = versions.latest_loader()
    if loader:
        console.print(f"Latest stable loader: {escape(loader.version)} (build {loader.build})")
    else:
        console.print("[yellow]No stable loader listed[/yellow]")
