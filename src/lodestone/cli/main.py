"""Main Typer CLI application for Lodestone."""

import logging
import sys
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from lodestone import __version__
from lodestone.config.settings import get_settings

# Create the Typer app
app = typer.Typer(
    name="lodestone",
    help="Turn arbitrary names into safe, non-colliding file and directory names.",
    no_args_is_help=True,
)

# Console for rich output
console = Console()


class State:
    """Options from the top-level callback, read by subcommands."""

    debug: bool = False
    logger: logging.Logger = logging.getLogger("lodestone")


state = State()


def setup_logging(debug: bool) -> logging.Logger:
    """Configure logging based on debug flag."""
    logger = logging.getLogger("lodestone")
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    return logger


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"lodestone {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Lodestone CLI - Clean and disambiguate file names."""
    # Load .env file
    load_dotenv()

    state.debug = debug or get_settings().debug
    state.logger = setup_logging(state.debug)

    if state.debug:
        state.logger.debug("Debug mode enabled")


# Import and register subcommands
from lodestone.cli.paths import clean_cmd, unique_cmd  # noqa: E402
from lodestone.cli.fabric import fabric_cmd  # noqa: E402

app.command(name="clean")(clean_cmd)
app.command(name="unique")(unique_cmd)
app.command(name="fabric")(fabric_cmd)


if __name__ == "__main__":
    app()
