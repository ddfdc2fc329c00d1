"""Batch command - convert multiple SVG files."""

from __future__ import annotations

import concurrent.futures
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress

from svg2cetz import ConversionResult, Svg2CetzConverter
from svg2cetz.config import Config

console = Console()


def read_batch_file(batch_file: Path) -> list[Path]:
    """Read one input path per line, skipping blanks and ``#`` comments."""
    paths: list[Path] = []
    with open(batch_file, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                paths.append(Path(line))
    return paths


@click.command()
@click.argument("inputs", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output-dir", "-o", type=click.Path(file_okay=False, path_type=Path), required=True, help="Output directory")
@click.option("--batch-file", type=click.Path(exists=True, path_type=Path), help="File containing list of inputs")
@click.option("--suffix", default="", help="Output filename suffix")
@click.option("-j", "--jobs", type=click.IntRange(min=1), default=4, help="Parallel jobs")
@click.option("--continue-on-error", is_flag=True, help="Convert the remaining files after an error (exit status is still 1)")
@click.pass_context
def batch(
    ctx: click.Context,
    inputs: tuple[Path, ...],
    output_dir: Path,
    batch_file: Optional[Path],
    suffix: str,
    jobs: int,
    continue_on_error: bool,
) -> None:
    """Convert multiple SVG files to .typ files.

    INPUTS: Paths to SVG files (supports glob patterns via shell).
    """
    config = (ctx.obj or {}).get("config") or Config.load()

    all_inputs: list[Path] = list(inputs)
    if batch_file:
        all_inputs.extend(read_batch_file(batch_file))

    if not all_inputs:
        console.print("[red]Error:[/red] No input files specified")
        raise SystemExit(1)

    output_dir.mkdir(parents=True, exist_ok=True)
    converter = Svg2CetzConverter(config)

    success_count = 0
    error_count = 0

    def process_file(input_path: Path) -> ConversionResult:
        output_path = output_dir / f"{input_path.stem}{suffix}.typ"
        return converter.convert_file(input_path, output_path)

    with Progress(console=console) as progress:
        task = progress.add_task("[green]Converting...", total=len(all_inputs))

        with concurrent.futures.ThreadPoolExecutor(max_workers=jobs) as executor:
            future_to_path = {executor.submit(process_file, p): p for p in all_inputs}

            for future in concurrent.futures.as_completed(future_to_path):
                input_path = future_to_path[future]
                result = future.result()
                progress.advance(task)
                if result.success:
                    success_count += 1
                    continue
                error_count += 1
                message = escape("; ".join(result.errors))
                console.print(f"[red]Error in {escape(str(input_path))}:[/red] {message}", soft_wrap=True)
                if not continue_on_error:
                    for pending in future_to_path:
                        pending.cancel()
                    raise SystemExit(1)

    console.print()
    console.print("[bold]Batch complete:[/bold]")
    console.print(f"  [green]Success:[/green] {success_count}")
    console.print(f"  [red]Failed:[/red] {error_count}")
    console.print(f"  [blue]Output:[/blue] {escape(str(output_dir))}", soft_wrap=True)

    if error_count > 0:
        raise SystemExit(1)
