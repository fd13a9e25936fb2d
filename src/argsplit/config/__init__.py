"""Configuration loading and schema definitions."""

from argsplit.config.loader import load_config
from argsplit.config.schema import Config, GlobalConfig, Profile, Theme

__all__ = [
    "Config",
    "GlobalConfig",
    "Profile",
    "Theme",
    "load_config",
]
