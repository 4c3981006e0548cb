"""Build hierarchical treemap input from loaded bundle data.

Each selected asset becomes one root node whose children are the
compacted directory tree of the modules bundled into it::

    [
        {
            "name": "main.js",
            "path": "main.js",
            "children": [
                {"name": "src", "path": "src", "children": [...]},
                {"name": "node_modules/lodash/lodash.js", "path": "...", "value": 544098, "children": []}
            ]
        }
    ]

The structure is consumed directly as chart series data.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..analysis.aggregator import collect_asset_modules, index_chunks
from ..stats.models import BundleData
from .tree import RELATIVE_PREFIX, SEPARATOR, TreeNode, build_tree, compact, module_sizes


@dataclass(frozen=True)
class AssetSummary:
    """One row of the asset picker."""

    name: str
    label: str
    stat_size: int
    size: int
    is_entry: bool


def asset_label(name: str) -> str:
    """Last path segment of an asset name."""
    return name.split(SEPARATOR)[-1]


def select_assets(data: BundleData, checked: Optional[Iterable[str]] = None) -> List[str]:
    """Asset names to draw, in ``chunks_list`` order.

    ``None`` selects everything; unknown names are ignored.
    """
    if checked is None:
        return list(data.chunks_list)
    wanted = set(checked)
    return [name for name in data.chunks_list if name in wanted]


def asset_module_paths(data: BundleData, asset_name: str) -> List[str]:
    """Unique module names of an asset with a leading ``./`` removed."""
    asset = data.get_asset(asset_name)
    if asset is None:
        raise KeyError(asset_name)

    modules = collect_asset_modules(asset, index_chunks(data.chunks))
    names = dict.fromkeys(m.name for m in modules)
    return [
        name[len(RELATIVE_PREFIX):] if name.startswith(RELATIVE_PREFIX) else name
        for name in names
    ]


def build_asset_tree(
    data: BundleData, asset_name: str, sizes: Optional[Mapping[str, int]] = None
) -> TreeNode:
    """Root node for one asset, holding its compacted module tree."""
    if sizes is None:
        sizes = module_sizes(data.all_modules)
    label = asset_label(asset_name)
    children = compact(build_tree(asset_module_paths(data, asset_name), sizes))
    return TreeNode(path=label, name=label, children=tuple(children))


def build_treemap_data(
    data: BundleData, checked: Optional[Iterable[str]] = None
) -> List[Dict[str, Any]]:
    """Treemap series data for the checked assets (all of them by default).

    An empty selection gives an empty list.
    """
    sizes = module_sizes(data.all_modules)
    return [build_asset_tree(data, name, sizes).to_dict() for name in select_assets(data, checked)]


def summarize_assets(data: BundleData) -> List[AssetSummary]:
    """Script assets, largest stat size first."""
    rows = [
        AssetSummary(
            name=asset.name,
            label=asset_label(asset.name),
            stat_size=asset.stat_size or 0,
            size=asset.size,
            is_entry=data.is_entry_asset(asset.name),
        )
        for asset in data.assets
    ]
    return sorted(rows, key=lambda row: row.stat_size, reverse=True)
