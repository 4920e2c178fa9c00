#!/usr/bin/env python3
"""Regenerate skills/index.json from every skills/*/SKILL.md.

Requires the package to be importable, e.g. after `pip install -e .`
from the repository root.

Usage:
  python3 scripts/generate_index.py
"""

from __future__ import annotations

from pathlib import Path

from skillcat.cli import main

REPO_ROOT: Path = Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    raise SystemExit(main(["--root", str(REPO_ROOT)]))
