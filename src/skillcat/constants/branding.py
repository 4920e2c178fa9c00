"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "skillcat"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: generate a JSON catalog from SKILL.md headers"
SUMMARY_TEMPLATE: str = "Generated {filename} with {skills} skills and {categories} categories"
STALE_TEMPLATE: str = "{filename} is out of date; rerun without --check to regenerate"
FRESH_TEMPLATE: str = "{filename} is up to date ({skills} skills, {categories} categories)"
