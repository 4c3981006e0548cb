"""
Bundlescope - Bundle Size Breakdown from Build Statistics

Trims a bundler's stats JSON down to a compact payload, embeds it in a
static report page and turns it back into per-asset module size trees
ready for treemap rendering.
"""

__version__ = "0.1.0"

from .analysis import load, load_encoded
from .codec import decode, encode
from .stats import Asset, BundleData, Chunk, Module, normalize_stats
from .visualization import TreeNode, build_tree, build_treemap_data, compact, generate_report

__all__ = [
    "load",  # Decoded payload -> BundleData
    "load_encoded",
    "encode",
    "decode",
    "normalize_stats",
    "build_tree",
    "compact",
    "build_treemap_data",
    "generate_report",
    "Asset",
    "BundleData",
    "Chunk",
    "Module",
    "TreeNode",
]
