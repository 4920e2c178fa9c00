"""Constants for skill header parsing."""

from __future__ import annotations

import re
from re import Pattern

BYTE_ORDER_MARK: str = "\ufeff"
FRONTMATTER_DELIMITER: str = "---"
LINE_SEPARATOR: str = "\n"
LINE_CARRIAGE_RETURN: str = "\r"
INDENT_CHARS: str = " \t"

# Folding indicators accepted after ``key:``; all three are space-joined.
BLOCK_SCALAR_INDICATORS: frozenset[str] = frozenset({">-", ">", "|"})
QUOTE_CHARS: frozenset[str] = frozenset({'"', "'"})

KEY_LINE_PATTERN: Pattern[str] = re.compile(r"^(?P<indent>[ \t]*)(?P<key>[A-Za-z0-9_-]+):(?P<value>.*)$")
LIST_VALUE_PATTERN: Pattern[str] = re.compile(r"^\[(?P<items>[^\]]*)\]")
LIST_ITEM_SEPARATOR: str = ","

NAME_KEY: str = "name"
DESCRIPTION_KEY: str = "description"
CATEGORY_KEY: str = "category"
TAGS_KEY: str = "tags"
