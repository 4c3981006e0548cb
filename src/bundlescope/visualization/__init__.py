"""Visualization layer — size trees, treemap input and the HTML report."""

from .report import generate_report, render_html
from .tree import TreeNode, build_tree, compact, module_sizes
from .treemap import (
    AssetSummary,
    build_asset_tree,
    build_treemap_data,
    select_assets,
    summarize_assets,
)

__all__ = [
    "AssetSummary",
    "TreeNode",
    "build_asset_tree",
    "build_tree",
    "build_treemap_data",
    "compact",
    "generate_report",
    "module_sizes",
    "render_html",
    "select_assets",
    "summarize_assets",
]
