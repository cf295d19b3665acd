"""Configuration loading with layered merging.

Config is merged from two optional layers, later layers winning:
1. Global user config (~/.sbtclient/config.json)
2. Project local config (<cwd>/.sbtclient/config.json)

With neither present, Pydantic defaults apply.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from sbtclient.config.load_utils import read_json_object, read_optional_json_object
from sbtclient.config.schema import Config
from sbtclient.core.constants import SBTCLIENT_DIR_NAME, get_default_config_path
from sbtclient.core.errors import ConfigError, LoadError

logger = logging.getLogger(__name__)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dicts. Override values take precedence.

    Dicts are merged key by key; every other value (lists included) is
    replaced. Neither input is modified.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None, cwd: Path | None = None) -> Config:
    """Load configuration from file with layered merging.

    Args:
        path: Explicit config file path. If provided, skips layered loading.
        cwd: Directory holding the project local layer. Defaults to Path.cwd().

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If a config file contains invalid JSON or the merged
            config fails validation.
    """
    if path is not None:
        return _load_from_path(path)

    effective_cwd = cwd or Path.cwd()
    layers = [
        get_default_config_path(),
        effective_cwd / SBTCLIENT_DIR_NAME / "config.json",
    ]

    merged: dict[str, Any] = {}
    loaded_from: list[Path] = []
    for layer in dict.fromkeys(layers):
        try:
            data = read_optional_json_object(layer, "config")
        except LoadError as e:
            raise ConfigError(e.message, cause=e) from e
        if data:
            merged = deep_merge(merged, data)
            loaded_from.append(layer)

    if loaded_from:
        logger.debug("Config loaded from: %s", [str(p) for p in loaded_from])
    else:
        logger.debug("No config files found, using defaults")

    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        sources = ", ".join(str(p) for p in loaded_from)
        raise ConfigError(f"Config validation failed (merged from {sources}): {e}", cause=e) from e


def _load_from_path(path: Path) -> Config:
    """Load and validate config from a specific path."""
    try:
        data = read_json_object(path, "config")
    except LoadError as e:
        raise ConfigError(e.message, cause=e) from e

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {path}: {e}", cause=e) from e
