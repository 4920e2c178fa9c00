"""Config data model for Skillcat runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillcat.constants.discovery import INDEX_FILENAME, SKILL_MARKDOWN_FILENAME, SKILLS_DIRNAME


@dataclass(frozen=True)
class SkillcatConfig:
    """Resolved generator config; relative paths resolve against ``root``."""

    root: Path
    skills_dir: Path = Path(SKILLS_DIRNAME)
    skill_filename: str = SKILL_MARKDOWN_FILENAME
    output: Path | None = None

    @property
    def skills_path(self) -> Path:
        return self.root / self.skills_dir

    @property
    def output_path(self) -> Path:
        """Catalog destination, defaulting to ``index.json`` inside the skills directory."""
        if self.output is None:
            return self.skills_path / INDEX_FILENAME
        return self.root / self.output
