"""Dataclasses for parsed skill metadata and the generated catalog."""

from __future__ import annotations

from dataclasses import dataclass

from skillcat.types import JsonObject


@dataclass(frozen=True)
class SkillMetadata:
    """Fields extracted from a single SKILL.md header block."""

    name: str = ""
    description: str = ""
    category: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class SkillDescriptor:
    """Catalog entry for one skill directory."""

    name: str
    slug: str
    description: str = ""
    category: str = ""
    tags: tuple[str, ...] = ()

    @classmethod
    def from_metadata(cls, slug: str, metadata: SkillMetadata) -> SkillDescriptor:
        """Build a descriptor whose slug comes from the directory name."""
        return cls(
            name=metadata.name,
            slug=slug,
            description=metadata.description,
            category=metadata.category,
            tags=metadata.tags,
        )

    def to_dict(self) -> JsonObject:
        return {
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "category": self.category,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class Catalog:
    """Aggregated skill catalog written to ``index.json``."""

    skills: tuple[SkillDescriptor, ...]
    categories: tuple[str, ...]
    updated_at: str

    def to_dict(self) -> JsonObject:
        return {
            "skills": [skill.to_dict() for skill in self.skills],
            "categories": list(self.categories),
            "updatedAt": self.updated_at,
        }

    def content_key(self) -> JsonObject:
        """Return the catalog payload without the timestamp, for staleness checks."""
        payload = self.to_dict()
        payload.pop("updatedAt")
        return payload
