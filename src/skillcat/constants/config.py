"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillcat.yaml"
CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"skills_dir", "skill_filename", "output"})
