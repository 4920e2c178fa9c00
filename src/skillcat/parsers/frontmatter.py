"""Line-based extraction of a fixed set of fields from a SKILL.md header.

The header is a small subset of YAML. Rather than loading it with a full YAML
parser, lines are scanned into ``HeaderEntry`` records so that a malformed or
partially specified header degrades to empty values instead of failing.

Supported value shapes:

* ``key: value`` single-line scalars, optionally wrapped in one layer of quotes;
* ``key: >-`` / ``key: >`` / ``key: |`` block scalars, folded into one line;
* ``key: [a, "b", 'c']`` inline lists.
"""

from __future__ import annotations

from dataclasses import dataclass

from skillcat.constants.parsing import (
    BLOCK_SCALAR_INDICATORS,
    BYTE_ORDER_MARK,
    FRONTMATTER_DELIMITER,
    INDENT_CHARS,
    KEY_LINE_PATTERN,
    LINE_CARRIAGE_RETURN,
    LINE_SEPARATOR,
    LIST_ITEM_SEPARATOR,
    LIST_VALUE_PATTERN,
    QUOTE_CHARS,
)


@dataclass(frozen=True)
class HeaderEntry:
    """One ``key:`` line in a header block, with its resolved raw value."""

    key: str
    value: str
    indent: int
    block_scalar: bool = False


def extract_header_block(text: str) -> str | None:
    """Return the text between the leading ``---`` pair, or ``None``.

    The opening delimiter must be the first line of the document. When it is
    missing, or no closing delimiter follows, the document has no header.
    """
    lines = split_lines(text.lstrip(BYTE_ORDER_MARK))
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None

    for index in range(1, len(lines)):
        if lines[index].strip() == FRONTMATTER_DELIMITER:
            return LINE_SEPARATOR.join(lines[1:index])
    return None


def scan_header_entries(header_text: str) -> tuple[HeaderEntry, ...]:
    """Split a header block into key entries in document order.

    Lines belonging to a block scalar are folded into that entry's value and
    are never reported as keys of their own.
    """
    lines = split_lines(header_text)
    entries: list[HeaderEntry] = []
    index = 0

    while index < len(lines):
        match = KEY_LINE_PATTERN.match(lines[index])
        index += 1
        if match is None:
            continue

        indent = _indent_width(match.group("indent"))
        value = match.group("value").strip()
        if value in BLOCK_SCALAR_INDICATORS:
            folded, index = _fold_block_scalar(lines, index, indent)
            entries.append(HeaderEntry(key=match.group("key"), value=folded, indent=indent, block_scalar=True))
        else:
            entries.append(HeaderEntry(key=match.group("key"), value=value, indent=indent))

    return tuple(entries)


def extract_field(header_text: str, key: str, *, nested: bool = False) -> str:
    """Return the value of ``key`` as a single logical string.

    Top-level keys only are considered unless ``nested`` is set, in which case
    an indented key (for example under ``metadata:``) also matches. The first
    match wins; a missing key or a key without a value yields ``""``.
    """
    entry = _find_entry(scan_header_entries(header_text), key, nested=nested)
    if entry is None:
        return ""
    if entry.block_scalar:
        return entry.value
    return strip_quotes(entry.value)


def extract_list(header_text: str, key: str, *, nested: bool = True) -> tuple[str, ...]:
    """Return the items of an inline ``key: [a, b]`` list.

    Anything other than the bracketed inline form yields an empty tuple.
    """
    entry = _find_entry(scan_header_entries(header_text), key, nested=nested)
    if entry is None or entry.block_scalar:
        return ()

    match = LIST_VALUE_PATTERN.match(entry.value)
    if match is None:
        return ()

    items = (strip_quotes(item.strip()) for item in match.group("items").split(LIST_ITEM_SEPARATOR))
    return tuple(item for item in items if item)


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` from each line.

    Other characters that ``str.splitlines`` treats as boundaries (form feed,
    NEL, U+2028) stay inside the line they appear in.
    """
    return [line.removesuffix(LINE_CARRIAGE_RETURN) for line in text.split(LINE_SEPARATOR)]


def strip_quotes(value: str) -> str:
    """Remove one layer of matching single or double quotes."""
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        return value[1:-1]
    return value


def _find_entry(entries: tuple[HeaderEntry, ...], key: str, *, nested: bool) -> HeaderEntry | None:
    for entry in entries:
        if entry.key != key:
            continue
        if entry.indent == 0 or nested:
            return entry
    return None


def _fold_block_scalar(lines: list[str], start: int, key_indent: int) -> tuple[str, int]:
    """Collect block scalar lines starting at ``start``.

    Returns the space-joined content and the index of the first line that is
    not part of the block.
    """
    parts: list[str] = []
    index = start
    while index < len(lines):
        line = lines[index]
        stripped = line.strip()
        if stripped and _indent_width(line[: len(line) - len(line.lstrip(INDENT_CHARS))]) <= key_indent:
            break
        if stripped:
            parts.append(stripped)
        index += 1
    return " ".join(parts), index


def _indent_width(prefix: str) -> int:
    return len(prefix.expandtabs())
