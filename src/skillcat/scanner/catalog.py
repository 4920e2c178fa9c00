"""Catalog aggregation and JSON rendering."""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import UTC, datetime

from skillcat.constants.catalog import (
    CATALOG_JSON_INDENT,
    TIMESTAMP_TIMESPEC,
    UTC_OFFSET_SUFFIX,
    UTC_ZULU_SUFFIX,
)
from skillcat.model import Catalog, SkillDescriptor


def build_catalog(descriptors: Iterable[SkillDescriptor], *, updated_at: datetime | None = None) -> Catalog:
    """Aggregate descriptors into a catalog.

    Descriptor order is preserved. ``categories`` holds every distinct,
    non-empty category of the given descriptors, sorted.
    """
    skills = tuple(descriptors)
    categories = sorted({skill.category for skill in skills if skill.category})
    return Catalog(
        skills=skills,
        categories=tuple(categories),
        updated_at=format_timestamp(updated_at or datetime.now(UTC)),
    )


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    rendered = moment.astimezone(UTC).isoformat(timespec=TIMESTAMP_TIMESPEC)
    return rendered.removesuffix(UTC_OFFSET_SUFFIX) + UTC_ZULU_SUFFIX


def render_catalog_json(catalog: Catalog) -> str:
    """Serialize a catalog as indented JSON with a trailing newline."""
    return json.dumps(catalog.to_dict(), indent=CATALOG_JSON_INDENT, ensure_ascii=False) + "\n"
