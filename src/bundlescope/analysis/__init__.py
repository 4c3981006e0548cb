"""Size aggregation over a decoded payload."""

from .aggregator import (
    build_all_modules,
    collect_asset_modules,
    compute_stat_size,
    filter_chunks,
    filter_modules,
    index_chunks,
    is_noise_module,
    load,
    load_encoded,
)

__all__ = [
    "build_all_modules",
    "collect_asset_modules",
    "compute_stat_size",
    "filter_chunks",
    "filter_modules",
    "index_chunks",
    "is_noise_module",
    "load",
    "load_encoded",
]
