"""CLI entry point — registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="bundlescope",
    help="Bundlescope - Bundle Size Breakdown from Build Statistics",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"bundlescope {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Turn bundler stats into a size breakdown."""


# Import subcommands to register them
from .report import report as _report  # noqa: F401, E402
from .extract import extract as _extract  # noqa: F401, E402
from .assets import assets as _assets  # noqa: F401, E402
from .tree import tree as _tree  # noqa: F401, E402
