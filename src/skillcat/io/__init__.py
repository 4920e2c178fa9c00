"""Catalog file I/O helpers."""

from .json_io import read_json, replace_text_file

__all__ = ["read_json", "replace_text_file"]
