"""Parser for SKILL.md files with a delimited metadata header."""

from __future__ import annotations

from pathlib import Path

from skillcat.constants.parsing import CATEGORY_KEY, DESCRIPTION_KEY, NAME_KEY, TAGS_KEY
from skillcat.exceptions import SkillParseError
from skillcat.model import SkillMetadata
from skillcat.parsers.frontmatter import extract_field, extract_header_block, extract_list


def parse_skill_metadata(text: str) -> SkillMetadata | None:
    """Extract catalog metadata from SKILL.md text, or ``None`` without a header."""
    header = extract_header_block(text)
    if header is None:
        return None

    return SkillMetadata(
        name=extract_field(header, NAME_KEY),
        description=extract_field(header, DESCRIPTION_KEY),
        category=extract_field(header, CATEGORY_KEY, nested=True),
        tags=extract_list(header, TAGS_KEY),
    )


def parse_skill_markdown_file(path: Path) -> SkillMetadata:
    """Read a SKILL.md file and extract its header metadata.

    Invalid UTF-8 bytes decode to U+FFFD rather than failing the read.
    """
    try:
        raw_text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SkillParseError(f"Cannot read {path}: {exc}") from exc

    metadata = parse_skill_metadata(raw_text)
    if metadata is None:
        raise SkillParseError(f"No header block in {path}")
    return metadata
