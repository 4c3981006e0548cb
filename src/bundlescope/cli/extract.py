"""Extract CLI command -- write the encoded (or normalized) payload."""

import json
from pathlib import Path
from typing import Optional

import typer

from ..codec import encode
from ..exceptions import BundlescopeError, OutputFileError
from ..stats import normalize_stats
from . import app
from ._common import CONFIG_OPTION, configure, console, fail, read_stats_file


@app.command()
def extract(
    stats_file: Path = typer.Argument(..., help="Bundler stats JSON file", dir_okay=False),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout"
    ),
    raw: bool = typer.Option(False, "--raw", help="Write the normalized JSON instead of the encoded string"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Reduce a stats file to the report payload.

    [bold cyan]Examples:[/bold cyan]

      bundlescope extract stats.json -o payload.txt

      bundlescope extract stats.json --raw
    """
    try:
        settings = configure(config, verbose)
        payload = normalize_stats(read_stats_file(stats_file), settings.script_extensions)
        if raw:
            text = json.dumps(payload, indent=2, ensure_ascii=False)
        else:
            text = encode(payload, level=settings.compression_level)
    except BundlescopeError as e:
        fail(e)

    if output is None:
        typer.echo(text)
        return

    try:
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        fail(OutputFileError(output, e.strerror or str(e)))

    console.print(f"Payload saved to: [bold green]{output.resolve()}[/bold green]", soft_wrap=True)
