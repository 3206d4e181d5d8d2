#!/usr/bin/env python3
"""
pace - live workout metric smoothing CLI

Usage:
    pace smooth 3.1 3.4 2.9      # Smooth raw pace readings
    pace replay samples.json     # Replay recorded samples through the pipeline
"""

import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from src.cli import __version__, display
from src.cli.commands import replay, smooth
from src.shared.config import get_settings

# Create the main app
app = typer.Typer(
    name="pace",
    help="Smooth live workout metrics from the terminal.",
    no_args_is_help=True,
    add_completion=True,
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"pace version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """
    pace - Smooth live workout metrics from the terminal.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        display.display_error(f"Invalid settings: {e}")
        raise typer.Exit(1) from e
    logging.basicConfig(level=settings.log_level)


# Register commands directly on the app
app.command(name="smooth")(smooth.smooth)
app.command(name="replay")(replay.replay)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
