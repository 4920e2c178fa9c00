"""Config loading and normalization for Skillcat runs."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import yaml

from skillcat.config.model import SkillcatConfig
from skillcat.constants.config import CONFIG_ALLOWED_KEYS, CONFIG_FILENAME
from skillcat.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> SkillcatConfig:
    """Load config from ``skillcat.yaml`` under ``root`` or an explicit path.

    A missing default config file yields the built-in defaults.
    """
    root = root.resolve()
    config = SkillcatConfig(root=root)
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return config

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    if "skills_dir" in raw:
        config = replace(config, skills_dir=Path(_require_string(raw, "skills_dir")))
    if "skill_filename" in raw:
        skill_filename = _require_string(raw, "skill_filename")
        if Path(skill_filename).name != skill_filename:
            raise ConfigError("skill_filename must be a bare file name")
        config = replace(config, skill_filename=skill_filename)
    if "output" in raw:
        config = replace(config, output=Path(_require_string(raw, "output")))

    return config


def _require_string(raw: dict[object, object], key: str) -> str:
    value = raw[key]
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    return value.strip()
