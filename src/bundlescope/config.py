"""Configuration loading and management for Bundlescope.

Configuration sources are merged in priority order:
    1. Defaults (defined in ReportConfig)
    2. Global config (~/.bundlescope.toml)
    3. Project config (./bundlescope.toml)
    4. Explicit config file
    5. Environment variables (BUNDLESCOPE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(filename="report.html")
    >>> config.filename
    'report.html'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_FILENAME = "WebpackAnalyzer.html"


@dataclass(frozen=True)
class ReportConfig:
    """Settings for payload extraction and report generation.

    Attributes:
        Report output:
            filename: Report file name written next to the bundle output
            title: Page title of the generated report

        Payload:
            compression_level: Raw-deflate level used by the codec (0-9)
            script_extensions: File suffixes that mark an asset as a script

        Noise filtering:
            noise_module_types: ``moduleType`` values with no source weight
            noise_name_prefixes: Module name prefixes of bundler bookkeeping
                entries (externals, delegated modules)

        Output control:
            verbosity: Logging verbosity level
    """

    filename: str = DEFAULT_FILENAME
    title: str = "Bundle Analyzer"

    compression_level: int = 9
    script_extensions: tuple[str, ...] = (".js",)

    noise_module_types: tuple[str, ...] = ("runtime", "css/mini-extract")
    noise_name_prefixes: tuple[str, ...] = ("external", "delegated")

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # TOML arrays arrive as lists
        for name in ("script_extensions", "noise_module_types", "noise_name_prefixes"):
            value = getattr(self, name)
            if isinstance(value, str):
                value = (value,)
            object.__setattr__(self, name, tuple(value))

        if not self.filename or "/" in self.filename or "\\" in self.filename:
            raise InvalidConfigError("filename", self.filename, "must be a bare file name")
        if not 0 <= self.compression_level <= 9:
            raise InvalidConfigError(
                "compression_level", self.compression_level, "must be between 0 and 9"
            )
        if not self.script_extensions:
            raise InvalidConfigError("script_extensions", self.script_extensions, "must not be empty")
        for ext in self.script_extensions:
            if not ext.startswith("."):
                raise InvalidConfigError("script_extensions", ext, "extensions start with '.'")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


DEFAULT_CONFIG = ReportConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset options keep lower-priority values

    Returns:
        Validated ReportConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".bundlescope.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "bundlescope.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ReportConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from BUNDLESCOPE_* environment variables.

    Tuple fields take a comma-separated list, e.g.
    ``BUNDLESCOPE_SCRIPT_EXTENSIONS=.js,.mjs``.
    """
    type_hints = get_type_hints(ReportConfig)
    result: dict[str, Any] = {}

    for field_name in ReportConfig.__dataclass_fields__:
        env_key = f"BUNDLESCOPE_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    origin = getattr(type_hint, "__origin__", None)

    if origin is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())

    if type_hint is int:
        return int(value)

    return value


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file, accepting either top-level keys or a [bundlescope] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    return data.get("bundlescope", data)
