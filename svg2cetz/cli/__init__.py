"""Command-line interface for svg2cetz."""

from svg2cetz.cli.main import cli

__all__ = ["cli"]
