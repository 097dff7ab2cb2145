"""Configuration file loading and saving."""

import os
import sys

from pathlib import Path
from typing import Optional

import yaml

from pydantic import ValidationError

from ..types import Variable
from ..utils.debug import debug_log
from .defaults import get_default_config
from .schema import FormatsConfig

# Module-level cache for config
_cached_config: Optional[FormatsConfig] = None
_cached_mtime: float = 0.0
_cached_path: Optional[Path] = None


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "statusline-values"


def get_config_path() -> Path:
    """Get the full configuration file path."""
    return get_config_dir() / "formats.yaml"


def _config_mtime(config_path: Path) -> float:
    try:
        return config_path.stat().st_mtime
    except OSError:
        return 0.0


def _warn_fallback(config_path: Path, error: Exception) -> None:
    print(
        f"Warning: Failed to load config from {config_path}: {error}",
        file=sys.stderr,
    )
    print("Using default configuration.", file=sys.stderr)


def load_config_file(config_path: Optional[Path] = None) -> FormatsConfig:
    """Read and validate a config file without caching or fallbacks.

    Raises:
        OSError: If the file cannot be read
        yaml.YAMLError: If the file is not valid YAML
        ValidationError: If the content does not match the schema
    """
    config_path = config_path or get_config_path()
    with open(config_path, encoding="utf-8") as f:
        config_data = yaml.safe_load(f)

    if config_data is None:
        config_data = {}

    return FormatsConfig(**config_data)


def load_config() -> FormatsConfig:
    """
    Load configuration from YAML file with mtime-based caching.

    If config file doesn't exist, creates it with defaults.
    If config is invalid, falls back to defaults and logs error.
    """
    global _cached_config, _cached_mtime, _cached_path

    config_path = get_config_path()

    if _cached_config is not None and _cached_path == config_path:
        if _config_mtime(config_path) == _cached_mtime:
            return _cached_config

    if not config_path.exists():
        config = get_default_config()
        try:
            save_config(config)
        except OSError as e:
            _warn_fallback(config_path, e)
            return config
        _cached_config = config
        _cached_mtime = _config_mtime(config_path)
        _cached_path = config_path
        return config

    try:
        config = load_config_file(config_path)
    except (yaml.YAMLError, ValidationError, OSError) as e:
        _warn_fallback(config_path, e)
        return get_default_config()

    debug_log(f"Loaded {len(config.formats)} formats from {config_path}")
    _cached_config = config
    _cached_mtime = _config_mtime(config_path)
    _cached_path = config_path
    return config


def save_config(config: FormatsConfig) -> None:
    """Save configuration to YAML file."""
    config_path = get_config_path()
    config_dir = config_path.parent

    config_dir.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(mode="json", exclude_none=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)


def get_variable(name: str) -> Variable:
    """Get the render request configured under `name`.

    Args:
        name: Format name (e.g., "net", "battery-bar")

    Returns:
        Configured Variable, or an empty Variable if the name is unknown
    """
    format_config = load_config().formats.get(name)
    if format_config is None:
        debug_log(f"Unknown format {name!r}, using defaults")
        return Variable()
    return format_config.to_variable()


def clear_config_cache() -> None:
    """Forget the cached config so the next load reads the file again."""
    global _cached_config, _cached_mtime, _cached_path

    _cached_config = None
    _cached_mtime = 0.0
    _cached_path = None
