"""Build-stats projection and the typed records built from it."""

from .models import Asset, BundleData, Chunk, Module
from .normalizer import normalize_stats, pick_script_file

__all__ = [
    "Asset",
    "BundleData",
    "Chunk",
    "Module",
    "normalize_stats",
    "pick_script_file",
]
