"""Path cleaning commands."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from lodestone.exceptions import ExistenceCheckError, FilenameError
from lodestone.utils.filename import clean_filename
from lodestone.utils.paths import PathSanitizer, resolve_path

console = Console()


def _candidate(name: str, directory: Optional[str], clean: bool = True) -> Path:
    """Join NAME onto the target directory as exactly one path segment.

    Raises:
        FilenameError: If NAME is not a single usable file name.
    """
    if clean:
        name = clean_filename(name)
    if name in ("", ".", "..") or Path(name).name != name:
        raise FilenameError(name, "Not a single file name")

    base = resolve_path(directory) if directory else Path(".")
    return base / name


def clean_cmd(
    name: Annotated[str, typer.Argument(help="Proposed file or directory name")],
    directory: Annotated[
        Optional[str],
        typer.Option("--dir", help="Directory the name will be created in"),
    ] = None,
) -> None:
    """Remove characters that are not allowed in file names."""
    from lodestone.cli.main import state

    try:
        path = _candidate(name, directory)
    except FilenameError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    state.logger.debug(f"Cleaned name: {name!r} -> {path.name!r}")
    console.print(str(path), markup=False, highlight=False, soft_wrap=True)


def unique_cmd(
    name: Annotated[str, typer.Argument(help="Proposed file or directory name")],
    directory: Annotated[
        Optional[str],
        typer.Option("--dir", help="Directory the name will be created in"),
    ] = None,
    no_clean: Annotated[
        bool,
        typer.Option("--no-clean", help="Skip removing invalid characters first"),
    ] = False,
) -> None:
    """Print a path that does not exist yet, numbering the name if it is taken."""
    from lodestone.cli.main import state

    try:
        sanitizer = PathSanitizer(_candidate(name, directory, clean=not no_clean), logger=state.logger)
        sanitizer.unique()
    except (FilenameError, ExistenceCheckError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(str(sanitizer.path), markup=False, highlight=False, soft_wrap=True)
