"""Report CLI command -- write the HTML report with the embedded payload."""

import logging
from pathlib import Path
from typing import Optional

import typer

from ..exceptions import BundlescopeError
from . import app
from ._common import CONFIG_OPTION, configure, console, fail, read_stats_file

logger = logging.getLogger(__name__)


@app.command()
def report(
    stats_file: Path = typer.Argument(..., help="Bundler stats JSON file", dir_okay=False),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output HTML file path (default: <outputPath>/<filename>)",
    ),
    filename: Optional[str] = typer.Option(
        None,
        "--filename",
        "-f",
        help="Report file name inside the bundle output directory",
    ),
    title: Optional[str] = typer.Option(None, "--title", help="Report page title"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Generate a self-contained HTML report from a stats file.

    The stats are reduced to assets, chunks and modules, checked for
    dangling references, compressed and embedded in the page.

    [bold cyan]Examples:[/bold cyan]

      bundlescope report dist/stats.json

      bundlescope report stats.json --output build/size-report.html
    """
    try:
        settings = configure(config, verbose, filename=filename, title=title)
        stats = read_stats_file(stats_file)

        from ..visualization import generate_report

        if output is None and not stats.get("outputPath"):
            output = stats_file.resolve().parent / settings.filename
            logger.warning("Stats have no outputPath; writing next to %s", stats_file)

        report_path = generate_report(stats, output_path=output, config=settings)
    except BundlescopeError as e:
        logger.debug("Report generation failed", exc_info=True)
        fail(e)

    console.print(f"\nReport saved to: [bold green]{report_path}[/bold green]", soft_wrap=True)
