"""Data models for bundle statistics — read-only views over a decoded payload.

Field names follow Python conventions; ``from_dict``/``to_dict`` translate
to and from the camelCase keys used by the bundler's stats JSON.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

Identifier = Union[int, str]


@dataclass(frozen=True)
class Module:
    """A single source unit tracked by the bundler."""

    name: str
    id: Optional[Identifier] = None
    size: int = 0
    type: Optional[str] = None
    module_type: Optional[str] = None
    depth: Optional[int] = None
    index: Optional[int] = None
    chunks: Tuple[Identifier, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Module":
        return cls(
            name=data.get("name") or "",
            id=data.get("id"),
            size=data.get("size") or 0,
            type=data.get("type"),
            module_type=data.get("moduleType"),
            depth=data.get("depth"),
            index=data.get("index"),
            chunks=tuple(data.get("chunks") or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "id": self.id,
            "size": self.size,
            "type": self.type,
            "moduleType": self.module_type,
            "depth": self.depth,
            "index": self.index,
            "chunks": list(self.chunks),
        }


@dataclass(frozen=True)
class Chunk:
    """A bundler grouping unit and the modules it contains, in stats order."""

    id: Identifier
    size: int = 0
    modules: Tuple[Module, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Chunk":
        return cls(
            id=data.get("id"),
            size=data.get("size") or 0,
            modules=tuple(Module.from_dict(m) for m in data.get("modules") or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "size": self.size,
            "modules": [m.to_dict() for m in self.modules],
        }


@dataclass(frozen=True)
class Asset:
    """An emitted output file.

    ``size`` is what the bundler reports for the file on disk;
    ``stat_size`` is the summed size of the distinct source modules that
    went into it and is only set once the payload has been loaded.
    """

    name: str
    size: int = 0
    type: Optional[str] = None
    chunks: Tuple[Identifier, ...] = ()
    chunk_names: Tuple[str, ...] = ()
    stat_size: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Asset":
        return cls(
            name=data.get("name") or "",
            size=data.get("size") or 0,
            type=data.get("type"),
            chunks=tuple(data.get("chunks") or ()),
            chunk_names=tuple(data.get("chunkNames") or ()),
            stat_size=data.get("statSize"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "size": self.size,
            "type": self.type,
            "chunks": list(self.chunks),
            "chunkNames": list(self.chunk_names),
            "statSize": self.stat_size,
        }


@dataclass(frozen=True)
class BundleData:
    """Everything the viewer needs, computed once per payload load.

    ``all_modules`` is the name-deduplicated module lookup and
    ``chunks_list`` the ordered names of the script assets.
    """

    assets_by_chunk_name: Dict[str, str] = field(default_factory=dict)
    assets: List[Asset] = field(default_factory=list)
    chunks: List[Chunk] = field(default_factory=list)
    modules: List[Module] = field(default_factory=list)
    all_modules: List[Module] = field(default_factory=list)
    output_path: Optional[str] = None

    @property
    def chunks_list(self) -> List[str]:
        return [asset.name for asset in self.assets]

    @property
    def total_stat_size(self) -> int:
        return sum(asset.stat_size or 0 for asset in self.assets)

    def get_asset(self, name: str) -> Optional[Asset]:
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None

    def is_entry_asset(self, name: str) -> bool:
        """True when *name* is the script emitted for a named chunk."""
        return name in self.assets_by_chunk_name.values()
