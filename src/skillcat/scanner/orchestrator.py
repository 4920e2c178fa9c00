"""End-to-end index generation for Skillcat."""

from __future__ import annotations

import logging
from pathlib import Path

from skillcat.constants.catalog import CATALOG_TEMP_PREFIX, CATALOG_TEMP_SUFFIX
from skillcat.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillcat.exceptions import SkillParseError
from skillcat.io import replace_text_file
from skillcat.model import Catalog, SkillDescriptor
from skillcat.parsers import parse_skill_markdown_file
from skillcat.scanner.catalog import build_catalog, render_catalog_json
from skillcat.scanner.discovery import list_skill_directories

logger = logging.getLogger(__name__)


def collect_descriptors(
    skills_dir: Path,
    *,
    skill_filename: str = SKILL_MARKDOWN_FILENAME,
) -> list[SkillDescriptor]:
    """Parse every skill directory under ``skills_dir`` in name order.

    Directories whose metadata file is missing, unreadable, headerless or
    lacks a ``name`` contribute nothing.
    """
    descriptors: list[SkillDescriptor] = []

    for slug in list_skill_directories(skills_dir):
        skill_file = skills_dir / slug / skill_filename
        if not skill_file.is_file():
            logger.debug("Skipping %s: no %s", slug, skill_filename)
            continue
        try:
            metadata = parse_skill_markdown_file(skill_file)
        except SkillParseError as exc:
            logger.debug("Skipping %s: %s", slug, exc)
            continue
        if not metadata.name:
            logger.debug("Skipping %s: header has no name", slug)
            continue
        descriptors.append(SkillDescriptor.from_metadata(slug, metadata))

    return descriptors


def generate_index(
    *,
    skills_dir: Path,
    output_path: Path | None = None,
    skill_filename: str = SKILL_MARKDOWN_FILENAME,
) -> Catalog:
    """Build the catalog for ``skills_dir`` and write it when ``output_path`` is set.

    The output file is replaced atomically and never merged with its previous
    content.
    """
    catalog = build_catalog(collect_descriptors(skills_dir, skill_filename=skill_filename))
    logger.debug(
        "Collected %d skills and %d categories from %s",
        len(catalog.skills),
        len(catalog.categories),
        skills_dir,
    )

    if output_path is not None:
        replace_text_file(
            path=output_path,
            content=render_catalog_json(catalog),
            temp_prefix=CATALOG_TEMP_PREFIX,
            temp_suffix=CATALOG_TEMP_SUFFIX,
        )
    return catalog
