"""Core data models for Skillcat."""

from .entities import Catalog, SkillDescriptor, SkillMetadata

__all__ = ["Catalog", "SkillDescriptor", "SkillMetadata"]
