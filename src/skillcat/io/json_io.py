"""Catalog file I/O: decode an existing catalog, swap in a new one."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path


def read_json(path: Path) -> object:
    """Return the decoded JSON document stored at ``path``."""
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def replace_text_file(
    *,
    path: Path,
    content: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Write ``content`` to a sibling temp file, then move it over ``path``.

    Readers see either the previous file or the complete new one. If writing
    fails the temp file is removed and the error propagates.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(content)
        os.replace(temp_path, path)
    except Exception:
        if temp_path is not None:
            with suppress(FileNotFoundError):
                temp_path.unlink()
        raise
