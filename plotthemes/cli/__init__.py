"""Command-line interface for browsing and building themes."""

from plotthemes.cli.main import app, main

__all__ = ["app", "main"]
