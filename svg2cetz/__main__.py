"""Allow ``python -m svg2cetz``."""

from svg2cetz.cli.main import cli

if __name__ == "__main__":
    cli()
