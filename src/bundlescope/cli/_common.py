"""Shared CLI helpers."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..analysis import load, load_encoded
from ..config import ReportConfig, load_config
from ..exceptions import BundlescopeError, StatsFileError
from ..logging_config import setup_logging
from ..stats import BundleData, normalize_stats

console = Console()

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Configuration file (TOML)",
    exists=True,
    file_okay=True,
    dir_okay=False,
)


def configure(config: Optional[Path] = None, verbose: bool = False, **overrides: Any) -> ReportConfig:
    """Build settings from CLI options and set up logging to match."""
    settings = load_config(config_file=config, verbose=verbose, **overrides)
    setup_logging(settings.verbosity)
    return settings


def read_stats_file(path: Path) -> Dict[str, Any]:
    """Read a stats JSON file; the top level must be an object."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise StatsFileError(path, e.strerror or str(e))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise StatsFileError(path, f"not valid JSON: {e}")

    if not isinstance(data, dict):
        raise StatsFileError(path, f"expected a JSON object, got {type(data).__name__}")
    return data


def load_source(path: Path, encoded: bool, settings: ReportConfig) -> BundleData:
    """Load bundle data from a stats JSON file or an encoded payload file."""
    if encoded:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise StatsFileError(path, e.strerror or str(e))
        return load_encoded(text, settings)

    stats = read_stats_file(path)
    return load(normalize_stats(stats, settings.script_extensions), settings)


def fail(error: BundlescopeError) -> None:
    """Print *error* and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False, soft_wrap=True)
    raise typer.Exit(1)
