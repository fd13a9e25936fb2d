"""Configuration loader with support for drop-in directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from argsplit.config.defaults import DEFAULT_CONFIG_YAML
from argsplit.config.schema import Config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "argsplit" / "config.yaml"
DEFAULT_DROPIN_DIR = Path.home() / ".config" / "argsplit" / "conf.d"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}
    logger.debug("Loading configuration from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return data


def load_dropin_directory(dropin_dir: Path) -> dict[str, Any]:
    """Load and merge all YAML files from drop-in directory."""
    if not dropin_dir.exists():
        return {}

    result: dict[str, Any] = {}
    yaml_files = sorted(dropin_dir.glob("*.yaml")) + sorted(dropin_dir.glob("*.yml"))

    for yaml_file in yaml_files:
        data = load_yaml_file(yaml_file)
        result = deep_merge(result, data)

    return result


def load_defaults() -> dict[str, Any]:
    """Load the built-in configuration."""
    return yaml.safe_load(DEFAULT_CONFIG_YAML)


def load_config(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
) -> Config:
    """Load configuration from defaults, file and drop-in directory.

    Args:
        config_path: Path to main config file (default: ~/.config/argsplit/config.yaml)
        dropin_dir: Path to drop-in directory (default: ~/.config/argsplit/conf.d/)

    Returns:
        Merged configuration object
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    elif isinstance(config_path, str):
        config_path = Path(config_path)

    if dropin_dir is None:
        dropin_dir = DEFAULT_DROPIN_DIR
    elif isinstance(dropin_dir, str):
        dropin_dir = Path(dropin_dir)

    merged_data = load_defaults()
    merged_data = deep_merge(merged_data, load_yaml_file(config_path))
    merged_data = deep_merge(merged_data, load_dropin_directory(dropin_dir))

    return Config(**merged_data)


def load_config_from_string(yaml_string: str, with_defaults: bool = False) -> Config:
    """Load configuration from a YAML string (useful for testing)."""
    data = yaml.safe_load(yaml_string) or {}
    if with_defaults:
        data = deep_merge(load_defaults(), data)
    return Config(**data)
