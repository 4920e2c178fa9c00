"""Skill directory discovery."""

from __future__ import annotations

import logging
from pathlib import Path

from skillcat.exceptions import CatalogRootError

logger = logging.getLogger(__name__)


def list_skill_directories(root: Path) -> list[str]:
    """Return the sorted names of immediate child directories of ``root``.

    Raises ``CatalogRootError`` when ``root`` is missing or cannot be listed.
    Entries that are not directories, or whose status cannot be read, are
    left out.
    """
    if not root.is_dir():
        raise CatalogRootError(f"Skills directory not found: {root}")

    try:
        children = list(root.iterdir())
    except OSError as exc:
        raise CatalogRootError(f"Cannot list skills directory {root}: {exc}") from exc

    names: list[str] = []
    for child in children:
        try:
            if not child.is_dir():
                continue
        except OSError as exc:
            logger.debug("Skipping %s: %s", child, exc)
            continue
        names.append(child.name)

    return sorted(names)
