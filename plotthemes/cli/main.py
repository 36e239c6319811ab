#!/usr/bin/env python3
"""
Main CLI application entry point.

Aggregates the theme commands into a single Typer app.
"""

import logging

import typer

from plotthemes.cli.commands.themes import (
    build_command,
    diff_command,
    list_command,
    rc_command,
    show_command,
)

# Create the main Typer app
app = typer.Typer(
    name="plotthemes",
    help="Inspect, compare and build preset plot themes",
    add_completion=False
)


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING",
        "--log",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s | %(name)s | %(message)s",
    )


# Register theme commands
app.command(name="list")(list_command)
app.command(name="show")(show_command)
app.command(name="diff")(diff_command)
app.command(name="rc")(rc_command)
app.command(name="build")(build_command)


def main():
    """Main entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
