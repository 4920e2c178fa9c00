"""CLI entrypoint for the Skillcat index generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillcat import __version__
from skillcat.config import SkillcatConfig, load_config
from skillcat.constants.branding import (
    CLI_DESCRIPTION,
    FRESH_TEMPLATE,
    STALE_TEMPLATE,
    SUMMARY_TEMPLATE,
)
from skillcat.exceptions import ConfigError, SkillcatError
from skillcat.io import read_json
from skillcat.model import Catalog
from skillcat.scanner import generate_index

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="skillcat", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Workspace root containing the skills directory (default: current directory)",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Override the catalog output path")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit 1 if the existing catalog is stale instead of writing it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped directories")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    output_path = args.output.resolve() if args.output is not None else config.output_path

    try:
        if args.check:
            return _check_catalog(config, output_path)
        catalog = generate_index(
            skills_dir=config.skills_path,
            output_path=output_path,
            skill_filename=config.skill_filename,
        )
    except SkillcatError as exc:
        print(f"Index error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Cannot write {output_path}: {exc}", file=sys.stderr)
        return 1

    print(
        SUMMARY_TEMPLATE.format(
            filename=output_path.name,
            skills=len(catalog.skills),
            categories=len(catalog.categories),
        )
    )
    return 0


def _check_catalog(config: SkillcatConfig, output_path: Path) -> int:
    """Compare a fresh in-memory catalog against the file on disk."""
    catalog = generate_index(skills_dir=config.skills_path, skill_filename=config.skill_filename)
    if _is_stale(catalog, output_path):
        print(STALE_TEMPLATE.format(filename=output_path.name), file=sys.stderr)
        return 1

    print(
        FRESH_TEMPLATE.format(
            filename=output_path.name,
            skills=len(catalog.skills),
            categories=len(catalog.categories),
        )
    )
    return 0


def _is_stale(catalog: Catalog, output_path: Path) -> bool:
    try:
        existing = read_json(output_path)
    except FileNotFoundError:
        return True
    except (OSError, ValueError) as exc:
        logger.debug("Existing catalog at %s is unreadable: %s", output_path, exc)
        return True

    if not isinstance(existing, dict):
        return True
    existing.pop("updatedAt", None)
    return existing != catalog.content_key()


if __name__ == "__main__":
    raise SystemExit(main())
