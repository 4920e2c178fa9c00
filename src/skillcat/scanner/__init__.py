"""Skill directory scanning and catalog generation."""

from .catalog import build_catalog, render_catalog_json
from .discovery import list_skill_directories
from .orchestrator import collect_descriptors, generate_index

__all__ = [
    "build_catalog",
    "collect_descriptors",
    "generate_index",
    "list_skill_directories",
    "render_catalog_json",
]
