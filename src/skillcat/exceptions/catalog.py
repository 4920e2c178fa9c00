"""Catalog generation exceptions."""

from __future__ import annotations

from skillcat.exceptions.base import SkillcatError


class CatalogRootError(SkillcatError, ValueError):
    """Raised when the skills directory is missing or cannot be listed."""
