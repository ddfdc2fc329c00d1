"""Convert command - convert a single SVG file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from svg2cetz import Svg2CetzConverter
from svg2cetz.config import Config
from svg2cetz.emit.emitter import WRAP_MODES
from svg2cetz.exceptions import Svg2CetzError
from svg2cetz.geometry.transform import Transform

err_console = Console(stderr=True)


def _root_transform(config: Config, scale: float | None, flip: bool | None) -> Transform:
    if scale is None and flip is None:
        return config.root_transform
    if scale is None:
        scale = abs(config.root_transform.a)
    if flip is None:
        flip = True
    return Transform(scale, 0.0, 0.0, -scale if flip else scale, 0.0, 0.0)


@click.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(allow_dash=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output file (default: stdout)")
@click.option("--scale", type=float, help="Uniform scale from SVG units to canvas units")
@click.option("--flip/--no-flip", default=None, help="Point the y axis up (default with --scale)")
@click.option("--font-scale", type=float, help="Multiplier applied to font sizes")
@click.option("--wrap", type=click.Choice(WRAP_MODES), help="Wrap the calls in a CeTZ canvas")
@click.option("--lenient", is_flag=True, help="Skip text without a position instead of failing")
@click.pass_context
def convert(
    ctx: click.Context,
    input_path: Path,
    output: Path | None,
    scale: float | None,
    flip: bool | None,
    font_scale: float | None,
    wrap: str | None,
    lenient: bool,
) -> None:
    """Convert an SVG file to CeTZ drawing calls.

    INPUT: Path to the SVG file, or - to read standard input.
    """
    config = (ctx.obj or {}).get("config") or Config.load()

    converter = Svg2CetzConverter(
        config,
        root_transform=_root_transform(config, scale, flip),
        font_scale=font_scale,
        strict_text=False if lenient else None,
        wrap=wrap,
    )

    try:
        if str(input_path) == "-":
            source = click.get_binary_stream("stdin").read()
        else:
            source = input_path.read_bytes()
    except OSError as e:
        err_console.print(f"[red]Error:[/red] cannot read {escape(str(input_path))}: {e.strerror}", soft_wrap=True)
        raise SystemExit(1) from None

    try:
        text = converter.convert_string(source)
    except Svg2CetzError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True, highlight=False)
        raise SystemExit(1) from None

    if output is None:
        click.echo(text, nl=False)
        return

    output.write_text(text, encoding="utf-8")
    err_console.print(f"[green]Wrote[/green] {escape(str(output))}", soft_wrap=True)
