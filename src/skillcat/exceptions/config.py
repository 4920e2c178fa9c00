"""Configuration-related exceptions."""

from __future__ import annotations

from skillcat.exceptions.base import SkillcatError


class ConfigError(SkillcatError, ValueError):
    """Raised when generator configuration is invalid."""
