"""Project a full bundler stats object down to the fields the viewer uses.

A complete stats dump carries reasons, sources, timings and profiles for
every module; the projection keeps only identity and size data so the
embedded payload stays small.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

logger = logging.getLogger(__name__)

ASSET_FIELDS = ("type", "name", "size", "chunks", "chunkNames")
CHUNK_FIELDS = ("id", "size")
CHUNK_MODULE_FIELDS = ("name", "type", "moduleType", "size", "index", "id", "chunks", "depth")
MODULE_FIELDS = ("type", "moduleType", "size", "name", "id", "chunks", "depth")


def pick(source: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """Copy the listed keys that are present in *source*, in *keys* order."""
    return {key: source[key] for key in keys if key in source}


def pick_script_file(
    files: Union[str, Sequence[str], None], script_extensions: Sequence[str] = (".js",)
) -> Optional[str]:
    """Return the first file name ending in one of *script_extensions*.

    Older bundler versions report a bare string instead of a list for
    chunks that emit a single file.
    """
    if files is None:
        return None
    if isinstance(files, str):
        files = [files]
    suffixes = tuple(script_extensions)
    return next((f for f in files if f.endswith(suffixes)), None)


def normalize_stats(
    stats: Mapping[str, Any], script_extensions: Sequence[str] = (".js",)
) -> Dict[str, Any]:
    """Reduce a bundler stats object to the payload embedded in the report.

    Returns a dict with ``outputPath``, ``assetsByChunkName`` (chunk name to
    its emitted script file), ``assets``, ``chunks`` (with their reduced
    modules) and ``modules``.  Chunk names whose files include no script
    are left out of ``assetsByChunkName``.  Missing sections are treated
    as empty and logged, they are not an error.
    """
    for section in ("assetsByChunkName", "assets", "chunks", "modules"):
        if section not in stats:
            logger.warning("Stats object has no '%s' section; treating it as empty", section)

    assets_by_chunk_name: Dict[str, str] = {}
    for chunk_name, files in (stats.get("assetsByChunkName") or {}).items():
        script = pick_script_file(files, script_extensions)
        if script is None:
            logger.debug("Chunk %r emitted no script file", chunk_name)
            continue
        assets_by_chunk_name[chunk_name] = script

    assets = [pick(asset, ASSET_FIELDS) for asset in stats.get("assets") or ()]

    chunks: List[Dict[str, Any]] = []
    for chunk in stats.get("chunks") or ():
        reduced = pick(chunk, CHUNK_FIELDS)
        reduced["modules"] = [pick(m, CHUNK_MODULE_FIELDS) for m in chunk.get("modules") or ()]
        chunks.append(reduced)

    modules = [pick(m, MODULE_FIELDS) for m in stats.get("modules") or ()]

    logger.debug(
        "Normalized stats: %d assets, %d chunks, %d modules", len(assets), len(chunks), len(modules)
    )

    return {
        "outputPath": stats.get("outputPath"),
        "assetsByChunkName": assets_by_chunk_name,
        "assets": assets,
        "chunks": chunks,
        "modules": modules,
    }
