"""Constants for skill directory discovery."""

from __future__ import annotations

SKILLS_DIRNAME: str = "skills"
SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
INDEX_FILENAME: str = "index.json"
