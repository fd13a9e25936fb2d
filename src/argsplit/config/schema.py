"""Pydantic models for configuration schema."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

OutputFormat = Literal["lines", "json", "null"]


def parse_separators(v: str | list[str] | None) -> str | None:
    """Normalize separators given as a string or a list of characters."""
    if v is None or isinstance(v, str):
        return v
    if isinstance(v, list):
        for sep in v:
            if not isinstance(sep, str) or len(sep) != 1:
                raise ValueError(f"Separator must be a single character: {sep!r}")
        return "".join(v)
    raise ValueError(f"Invalid separators: {v!r}")


class Profile(BaseModel):
    """Named separator set."""

    name: str = Field(description="Profile name, e.g., 'csv'")
    separators: str | None = Field(
        default=None, description="Separator characters (None for whitespace)"
    )
    description: str = Field(default="", description="Short description")

    @field_validator("separators", mode="before")
    @classmethod
    def validate_separators(cls, v: str | list[str] | None) -> str | None:
        return parse_separators(v)


class Theme(BaseModel):
    """Theme definition mapping highlight classes to prompt_toolkit styles."""

    name: str = Field(description="Theme name, e.g., 'default'")
    styles: dict[str, str] = Field(
        default_factory=dict, description="Style class to style string mapping"
    )


class GlobalConfig(BaseModel):
    """Global configuration options."""

    separators: str | None = Field(default=None, description="Default separator characters")
    format: OutputFormat = Field(default="lines", description="Output format")
    log_level: str = Field(default="WARNING", description="Logging level")
    history_file: str | None = Field(
        default=None, description="Interactive history file (in-memory if unset)"
    )

    @field_validator("separators", mode="before")
    @classmethod
    def validate_separators(cls, v: str | list[str] | None) -> str | None:
        return parse_separators(v)


class Config(BaseModel):
    """Top-level configuration."""

    config: GlobalConfig = Field(default_factory=GlobalConfig)
    profiles: dict[str, Profile] = Field(default_factory=dict)
    themes: dict[str, Theme] = Field(default_factory=dict)

    @field_validator("profiles", mode="before")
    @classmethod
    def parse_profiles(cls, v: dict[str, Any]) -> dict[str, Profile]:
        """Parse profile definitions.

        A profile may be given as a mapping or directly as its separators.
        """
        result = {}
        for name, data in v.items():
            if isinstance(data, dict):
                result[name.lower()] = Profile(name=name, **data)
            else:
                result[name.lower()] = Profile(name=name, separators=data)
        return result

    @field_validator("themes", mode="before")
    @classmethod
    def parse_themes(cls, v: dict[str, Any]) -> dict[str, Theme]:
        """Parse theme definitions."""
        result = {}
        for name, data in v.items():
            if isinstance(data, dict):
                result[name.lower()] = Theme(name=name, styles=data)
        return result

    def get_profile(self, name: str) -> Profile:
        """Get a profile by name.

        Raises:
            ValueError: If no such profile exists
        """
        profile = self.profiles.get(name.lower())
        if profile is None:
            known = ", ".join(sorted(self.profiles)) or "none"
            raise ValueError(f"Unknown profile: {name} (known: {known})")
        return profile

    def get_theme(self, name: str | None = None) -> Theme:
        """Get theme by name, or default theme."""
        if name and name.lower() in self.themes:
            return self.themes[name.lower()]
        if "default" in self.themes:
            return self.themes["default"]
        return Theme(name="default", styles={})

    def resolve_separators(
        self, profile: str | None = None, override: str | None = None
    ) -> str | None:
        """Pick the separators to split with.

        An explicit override wins over a named profile, which wins over the
        global default. None means the built-in whitespace set.
        """
        if override is not None:
            return override
        if profile is not None:
            return self.get_profile(profile).separators
        return self.config.separators
