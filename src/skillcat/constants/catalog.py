"""Constants for catalog serialization."""

from __future__ import annotations

CATALOG_JSON_INDENT: int = 2
CATALOG_TEMP_PREFIX: str = ".index-"
CATALOG_TEMP_SUFFIX: str = ".json.tmp"
TIMESTAMP_TIMESPEC: str = "milliseconds"
UTC_OFFSET_SUFFIX: str = "+00:00"
UTC_ZULU_SUFFIX: str = "Z"
