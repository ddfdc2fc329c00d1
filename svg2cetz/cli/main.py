"""Entry point for the ``svg2cetz`` command."""

from __future__ import annotations

from pathlib import Path

import click

from svg2cetz import __version__
from svg2cetz.cli.commands import batch, convert
from svg2cetz.config import LOG_LEVELS, Config
from svg2cetz.exceptions import ConfigError
from svg2cetz.log import setup_logging


@click.group()
@click.version_option(__version__, prog_name="svg2cetz")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (overrides the config file)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, config_path: Path | None) -> None:
    """Convert SVG drawings to CeTZ drawing calls."""
    ctx.ensure_object(dict)
    try:
        config = Config.load(config_path)
    except (ConfigError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(convert)
cli.add_command(batch)


if __name__ == "__main__":
    cli()
