"""Parsing-related exceptions."""

from __future__ import annotations

from skillcat.exceptions.base import SkillcatError


class SkillParseError(SkillcatError, ValueError):
    """Raised when a SKILL.md file cannot be read or has no header block."""
