"""Base exception for Skillcat."""

from __future__ import annotations


class SkillcatError(Exception):
    """Base class for all Skillcat errors."""
