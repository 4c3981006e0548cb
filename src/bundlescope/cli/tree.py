"""Tree CLI command -- compacted module trees of selected assets."""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.tree import Tree

from ..exceptions import BundlescopeError
from ..formatting import format_size
from ..visualization import TreeNode, build_asset_tree, select_assets
from ..visualization.tree import module_sizes
from . import app
from ._common import CONFIG_OPTION, configure, console, fail, load_source

logger = logging.getLogger(__name__)


def _add_branch(parent: Tree, node: TreeNode) -> None:
    size = format_size(node.leaf_total()) if node.children else _leaf_size(node)
    branch = parent.add(f"{escape(node.name)} [dim]({size})[/dim]")
    for child in node.children:
        _add_branch(branch, child)


def _leaf_size(node: TreeNode) -> str:
    return "?" if node.value is None else format_size(node.value)


@app.command()
def tree(
    source: Path = typer.Argument(..., help="Stats JSON file (or payload file with --encoded)", dir_okay=False),
    asset: Optional[List[str]] = typer.Option(
        None, "--asset", "-a", help="Asset to include (repeatable; default: all)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print treemap data as JSON"),
    encoded: bool = typer.Option(False, "--encoded", "-e", help="SOURCE holds an encoded payload"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Show where each asset's bytes come from, folder by folder.

    [bold cyan]Examples:[/bold cyan]

      bundlescope tree stats.json --asset main.js

      bundlescope tree payload.txt --encoded --json
    """
    try:
        data = load_source(source, encoded, configure(config, verbose))
    except BundlescopeError as e:
        fail(e)

    names = select_assets(data, asset or None)
    if asset:
        for missing in sorted(set(asset) - set(names)):
            logger.warning("Unknown asset: %s", missing)

    sizes = module_sizes(data.all_modules)
    roots = [build_asset_tree(data, name, sizes) for name in names]

    if as_json:
        typer.echo(json.dumps([root.to_dict() for root in roots], indent=2, ensure_ascii=False))
        return

    if not roots:
        console.print("[dim]No assets selected.[/dim]")
        return

    for root in roots:
        rendered = Tree(f"[bold]{escape(root.name)}[/bold] ({format_size(root.leaf_total())})")
        for child in root.children:
            _add_branch(rendered, child)
        console.print(rendered)
