"""Attribute source-module sizes to the script assets they were bundled into.

An asset is produced by one or more chunks and a module can sit in many
chunks, so an asset's size is the sum over its *distinct* modules::

    stat_size(asset) = sum(size(m) for m in unique_by_id(modules of asset.chunks))

Runtime modules, extracted-stylesheet placeholders, externals and
delegated modules are bundler bookkeeping and are dropped before anything
is counted.  A reference to a chunk or module that is not in the payload
raises ``ReferentialIntegrityError`` instead of counting as zero.
"""

import dataclasses
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from ..codec import decode
from ..config import DEFAULT_CONFIG, ReportConfig
from ..exceptions import DecodeError, ReferentialIntegrityError
from ..stats.models import Asset, BundleData, Chunk, Identifier, Module

logger = logging.getLogger(__name__)


def is_noise_module(
    module: Module,
    noise_module_types: Sequence[str] = DEFAULT_CONFIG.noise_module_types,
    noise_name_prefixes: Sequence[str] = DEFAULT_CONFIG.noise_name_prefixes,
) -> bool:
    """True for entries that carry no real source weight."""
    if module.module_type in noise_module_types:
        return True
    return module.name.startswith(tuple(noise_name_prefixes))


def filter_modules(modules: Iterable[Module], config: ReportConfig = DEFAULT_CONFIG) -> List[Module]:
    return [
        m
        for m in modules
        if not is_noise_module(m, config.noise_module_types, config.noise_name_prefixes)
    ]


def filter_chunks(chunks: Iterable[Chunk], config: ReportConfig = DEFAULT_CONFIG) -> List[Chunk]:
    """Return copies of *chunks* with their noise modules removed."""
    return [dataclasses.replace(c, modules=tuple(filter_modules(c.modules, config))) for c in chunks]


def build_all_modules(chunks: Iterable[Chunk], modules: Iterable[Module]) -> List[Module]:
    """Union of top-level and chunk modules, deduplicated by name.

    Top-level modules come first, then chunk modules in chunk order; the
    first module seen for a name wins.
    """
    seen: Dict[str, Module] = {}
    for module in modules:
        seen.setdefault(module.name, module)
    for chunk in chunks:
        for module in chunk.modules:
            seen.setdefault(module.name, module)
    return list(seen.values())


def index_chunks(chunks: Iterable[Chunk]) -> Dict[Identifier, Chunk]:
    index: Dict[Identifier, Chunk] = {}
    for chunk in chunks:
        index.setdefault(chunk.id, chunk)
    return index


def collect_asset_modules(asset: Asset, chunk_index: Mapping[Identifier, Chunk]) -> List[Module]:
    """All modules of the chunks that produced *asset*, duplicates included."""
    collected: List[Module] = []
    for chunk_id in asset.chunks:
        chunk = chunk_index.get(chunk_id)
        if chunk is None:
            raise ReferentialIntegrityError("chunk", chunk_id, f"asset {asset.name!r}")
        collected.extend(chunk.modules)
    return collected


def compute_stat_size(
    asset: Asset,
    chunk_index: Mapping[Identifier, Chunk],
    module_index: Mapping[Optional[Identifier], Module],
) -> int:
    """Sum the sizes of the distinct modules (by id) reachable from *asset*."""
    module_ids = dict.fromkeys(m.id for m in collect_asset_modules(asset, chunk_index))

    total = 0
    for module_id in module_ids:
        module = module_index.get(module_id)
        if module is None:
            raise ReferentialIntegrityError("module", module_id, f"asset {asset.name!r}")
        total += module.size
    return total


def _entries(payload: Mapping[str, Any], key: str) -> Sequence[Mapping[str, Any]]:
    entries = payload.get(key) or ()
    if not isinstance(entries, (list, tuple)) or not all(isinstance(e, Mapping) for e in entries):
        raise DecodeError(f"{key!r} is not a list of JSON objects")
    return entries


def load(payload: Mapping[str, Any], config: Optional[ReportConfig] = None) -> BundleData:
    """Turn a decoded payload into ``BundleData`` with stat sizes attached.

    Only assets whose name ends in one of ``config.script_extensions`` are
    kept.

    Raises:
        DecodeError: If *payload* is not a JSON object or one of its
            sections is not a list of objects.
        ReferentialIntegrityError: If an asset names an unknown chunk or a
            chunk holds a module missing from the module lookup.
    """
    if not isinstance(payload, Mapping):
        raise DecodeError(f"payload is not a JSON object, got {type(payload).__name__}")

    config = config or DEFAULT_CONFIG
    suffixes = tuple(config.script_extensions)

    chunks = filter_chunks((Chunk.from_dict(c) for c in _entries(payload, "chunks")), config)
    modules = filter_modules((Module.from_dict(m) for m in _entries(payload, "modules")), config)
    all_modules = build_all_modules(chunks, modules)

    chunk_index = index_chunks(chunks)

    module_index: Dict[Optional[Identifier], Module] = {}
    for module in all_modules:
        module_index.setdefault(module.id, module)

    assets = []
    for raw in _entries(payload, "assets"):
        asset = Asset.from_dict(raw)
        if not asset.name.endswith(suffixes):
            continue
        stat_size = compute_stat_size(asset, chunk_index, module_index)
        assets.append(dataclasses.replace(asset, stat_size=stat_size))

    logger.info(
        "Loaded payload: %d script assets, %d chunks, %d distinct modules",
        len(assets),
        len(chunks),
        len(all_modules),
    )

    return BundleData(
        assets_by_chunk_name=dict(payload.get("assetsByChunkName") or {}),
        assets=assets,
        chunks=chunks,
        modules=modules,
        all_modules=all_modules,
        output_path=payload.get("outputPath"),
    )


def load_encoded(text: str, config: Optional[ReportConfig] = None) -> BundleData:
    """Decode an embedded payload string and load it."""
    return load(decode(text), config)
