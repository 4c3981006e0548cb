"""Exception hierarchy for Bundlescope."""

from .base import BundlescopeError
from .config import ConfigurationError, InvalidConfigError, OutputFileError, StatsFileError
from .payload import DecodeError, EncodeError, PayloadError, ReferentialIntegrityError

__all__ = [
    "BundlescopeError",
    "PayloadError",
    "DecodeError",
    "EncodeError",
    "ReferentialIntegrityError",
    "ConfigurationError",
    "InvalidConfigError",
    "StatsFileError",
    "OutputFileError",
]
