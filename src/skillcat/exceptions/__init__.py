"""Shared exception hierarchy for Skillcat."""

from __future__ import annotations

from .base import SkillcatError
from .catalog import CatalogRootError
from .config import ConfigError
from .parsing import SkillParseError

__all__ = ["CatalogRootError", "ConfigError", "SkillParseError", "SkillcatError"]
