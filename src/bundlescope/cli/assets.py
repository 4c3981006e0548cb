"""Assets CLI command -- per-asset module size table."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import BundlescopeError
from ..formatting import format_size
from ..visualization import summarize_assets
from . import app
from ._common import CONFIG_OPTION, configure, console, fail, load_source


@app.command()
def assets(
    source: Path = typer.Argument(..., help="Stats JSON file (or payload file with --encoded)", dir_okay=False),
    encoded: bool = typer.Option(False, "--encoded", "-e", help="SOURCE holds an encoded payload"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    List script assets by the size of the modules bundled into them.

    Entry assets (emitted for a named chunk) are highlighted.
    """
    try:
        data = load_source(source, encoded, configure(config, verbose))
    except BundlescopeError as e:
        fail(e)

    rows = summarize_assets(data)

    table = Table(title=f"All ({format_size(data.total_stat_size)}) {len(rows)}")
    table.add_column("Asset")
    table.add_column("Stat size", justify="right")
    table.add_column("Emitted size", justify="right")

    for row in rows:
        label = f"[green]{escape(row.label)}[/green]" if row.is_entry else escape(row.label)
        table.add_row(label, format_size(row.stat_size), format_size(row.size))

    console.print(table)
