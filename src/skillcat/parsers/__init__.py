"""Parsers for SKILL.md documents."""

from .frontmatter import extract_field, extract_header_block, extract_list
from .skill_markdown import parse_skill_metadata, parse_skill_markdown_file

__all__ = [
    "extract_field",
    "extract_header_block",
    "extract_list",
    "parse_skill_markdown_file",
    "parse_skill_metadata",
]
