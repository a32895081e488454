#!/usr/bin/env python3
"""
Main CLI entry point for splitpane
"""

import logging
from typing import Optional

import typer

from splitpane import __version__
from splitpane.commands.layout import app as layout_app
from splitpane.config.settings import validate_all_env_vars
from splitpane.layout.sash import set_sash_size
from splitpane.utils.logging import setup_logging

logger = logging.getLogger(__name__)


# Version command
def version():
    """Show splitpane version"""
    typer.echo(f"splitpane version {__version__}")
    typer.echo("Split view size distribution engine")


# Callback for global options
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
    sash_size: Optional[float] = typer.Option(
        None, "--sash-size", help="Sash thickness in pixels (clamped to 4-20)"
    ),
):
    """
    splitpane - Size distribution engine for resizable split views

    Lays out panes with minimum/maximum sizes, priorities and snapping, and
    shows how sizes are redistributed by sash drags and resizes.

    [bold]Examples:[/bold]

    Show a built-in layout:
        [cyan]splitpane show editor --size 1200[/cyan]

    Drag the first sash 80 pixels to the left:
        [cyan]splitpane drag editor --sash 0 --delta -80[/cyan]

    Use a layout file:
        [cyan]splitpane show ./my-layout.yaml --json[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    setup_logging(verbose=verbose, quiet=quiet)

    for error in validate_all_env_vars():
        logger.warning(error)

    if sash_size is not None:
        set_sash_size(sash_size)


def create_app() -> typer.Typer:
    """Create and configure the main CLI application"""
    app = typer.Typer(
        name="splitpane",
        help="Size distribution engine for resizable split views",
        rich_markup_mode="rich",
    )

    for command in layout_app.registered_commands:
        app.registered_commands.append(command)

    app.command()(version)
    app.callback()(main)

    return app


# Create the app instance
app = create_app()


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
