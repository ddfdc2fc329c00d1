"""CLI commands for svg2cetz."""

from svg2cetz.cli.commands.batch import batch
from svg2cetz.cli.commands.convert import convert

__all__ = ["convert", "batch"]
