"""Build a directory-like size tree from slash-delimited module paths.

``build_tree`` turns ``["src/a.js", "src/lib/b.js"]`` into nested nodes::

    src            (path "src")
    ├── a.js       (path "src/a.js", value 120)
    └── lib        (path "src/lib")
        └── b.js   (path "src/lib/b.js", value 80)

``compact`` then removes single-child levels (``src/lib`` above collapses
into ``b.js``) and relabels every node relative to its nearest surviving
ancestor, which keeps treemap nesting shallow.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..stats.models import Module

logger = logging.getLogger(__name__)

SEPARATOR = "/"
RELATIVE_PREFIX = "./"


@dataclass(frozen=True)
class TreeNode:
    """A directory-like group or a module leaf.

    ``path`` is the full slash-joined path from the tree root and ``name``
    the label shown for the node.  ``value`` is ``None`` when no module
    matches ``path``.
    """

    path: str
    name: str
    value: Optional[int] = None
    children: Tuple["TreeNode", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Depth-first, parents before children."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def iter_leaves(self) -> Iterator["TreeNode"]:
        return (node for node in self.iter_nodes() if node.is_leaf)

    def leaf_total(self) -> int:
        """Sum of leaf values, treating missing values as zero."""
        return sum(leaf.value or 0 for leaf in self.iter_leaves())

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "path": self.path}
        if self.value is not None:
            data["value"] = self.value
        data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class _Builder:
    path: str
    segment: str
    value: Optional[int]
    # keyed by (segment, is_leaf) so a file and a directory of the same
    # name stay separate nodes
    children: Dict[Tuple[str, bool], "_Builder"] = field(default_factory=dict)

    def emit(self) -> TreeNode:
        return TreeNode(
            path=self.path,
            name=self.segment,
            value=self.value,
            children=tuple(child.emit() for child in self.children.values()),
        )


def module_sizes(modules: Iterable[Module]) -> Dict[str, int]:
    """Name -> size lookup; the first module seen for a name wins."""
    sizes: Dict[str, int] = {}
    for module in modules:
        sizes.setdefault(module.name, module.size)
    return sizes


def resolve_size(path: str, sizes: Mapping[str, int]) -> Optional[int]:
    """Look *path* up as written, then with the ``./`` prefix bundlers add."""
    if path in sizes:
        return sizes[path]
    return sizes.get(RELATIVE_PREFIX + path)


def build_tree(paths: Iterable[str], sizes: Mapping[str, int]) -> List[TreeNode]:
    """Build the uncompacted forest for *paths*.

    Paths are visited in sorted order, so siblings come out sorted and a
    path is always seen before any longer path it prefixes.  Every node
    gets the size of the module matching its cumulative path; a miss
    leaves ``value`` as ``None``.
    """
    root = _Builder(path="", segment="", value=None)

    for path in sorted(set(paths)):
        segments = path.split(SEPARATOR)
        level = root
        for depth, segment in enumerate(segments):
            is_leaf = depth == len(segments) - 1
            key = (segment, is_leaf)
            node = level.children.get(key)
            if node is None:
                node_path = SEPARATOR.join(segments[: depth + 1])
                if not is_leaf and (segment, True) in level.children:
                    # the leaf twin already owns this path's size
                    value = None
                else:
                    value = resolve_size(node_path, sizes)
                    if value is None and is_leaf:
                        logger.debug("No module matches %r", node_path)
                node = _Builder(path=node_path, segment=segment, value=value)
                level.children[key] = node
            level = node

    return [child.emit() for child in root.children.values()]


def compact(forest: Iterable[TreeNode]) -> List[TreeNode]:
    """Collapse single-child nodes, then relabel nodes relative to their parent.

    Returns a new forest; the input is not modified.  The collapse runs
    bottom-up and finishes before any name is computed, since names are
    relative to ancestors that the collapse may remove.
    """
    collapsed = [_collapse(node) for node in forest]
    return [_relabel(node, None) for node in collapsed]


def _collapse(node: TreeNode) -> TreeNode:
    children = tuple(_collapse(child) for child in node.children)
    if len(children) == 1:
        return children[0]
    return dataclasses.replace(node, children=children)


def _relabel(node: TreeNode, parent_path: Optional[str]) -> TreeNode:
    name = node.path
    if parent_path is not None:
        prefix = parent_path + SEPARATOR
        if name.startswith(prefix):
            name = name[len(prefix):]
    children = tuple(_relabel(child, node.path) for child in node.children)
    return dataclasses.replace(node, name=name, children=children)
