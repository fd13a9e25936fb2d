"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from argsplit.config.loader import load_config_from_string
from argsplit.config.schema import Config


@pytest.fixture
def sample_config() -> Config:
    """Sample configuration for testing."""
    yaml_content = """
config:
  format: json
  separators: ";"
  log_level: DEBUG

profiles:
  csv:
    separators: ","
    description: "Comma separated values"
  fields: [":", "|"]
  lines: "\\n"

themes:
  default:
    "argv.token": "blue"
    "argv.error": "bg:red"
  plain:
    "argv.token": ""
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def empty_config() -> Config:
    """Empty configuration for testing."""
    return Config()


@pytest.fixture
def isolated_args(tmp_path: Path) -> list[str]:
    """CLI arguments that keep the user's configuration out of the test."""
    return [
        "--config",
        str(tmp_path / "config.yaml"),
        "--config-dir",
        str(tmp_path / "conf.d"),
    ]
