"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from skillcat.cli.main import build_parser, main

ALPHA_SKILL = "---\nname: Alpha\ncategory: tools\ntags: [x]\n---\n"


def test_build_parser_defaults_to_current_directory() -> None:
    args = build_parser().parse_args([])

    assert args.root == Path.cwd()
    assert args.config is None
    assert args.output is None
    assert args.check is False


def test_build_parser_short_and_long_flags_match(tmp_path: Path) -> None:
    parser = build_parser()
    short = parser.parse_args(["-r", str(tmp_path), "-c", "c.yaml", "-o", "out.json", "-v"])
    long = parser.parse_args(["--root", str(tmp_path), "--config", "c.yaml", "--output", "out.json", "--verbose"])

    assert vars(short) == vars(long)


def test_main_writes_index_and_prints_summary(
    tmp_path: Path,
    make_skill: Callable[[str, str], Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    make_skill("alpha", ALPHA_SKILL)
    make_skill("beta", "no header\n")

    exit_code = main(["--root", str(tmp_path)])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "Generated index.json with 1 skills and 1 categories"
    payload = json.loads((tmp_path / "skills" / "index.json").read_text(encoding="utf-8"))
    assert [skill["slug"] for skill in payload["skills"]] == ["alpha"]


def test_main_missing_skills_directory_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--root", str(tmp_path)])

    assert exit_code == 1
    assert "Skills directory not found" in capsys.readouterr().err
    assert not (tmp_path / "skills" / "index.json").exists()


def test_main_config_error_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "skillcat.yaml").write_text("bogus: true\n", encoding="utf-8")

    exit_code = main(["--root", str(tmp_path)])

    assert exit_code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_main_output_override(tmp_path: Path, make_skill: Callable[[str, str], Path]) -> None:
    make_skill("alpha", ALPHA_SKILL)
    output = tmp_path / "dist" / "catalog.json"

    assert main(["--root", str(tmp_path), "--output", str(output)]) == 0

    assert json.loads(output.read_text(encoding="utf-8"))["categories"] == ["tools"]
    assert not (tmp_path / "skills" / "index.json").exists()


def test_main_check_reports_fresh_and_stale(
    tmp_path: Path,
    make_skill: Callable[[str, str], Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    make_skill("alpha", ALPHA_SKILL)

    assert main(["--root", str(tmp_path), "--check"]) == 1
    assert not (tmp_path / "skills" / "index.json").exists()

    assert main(["--root", str(tmp_path)]) == 0
    capsys.readouterr()
    assert main(["--root", str(tmp_path), "--check"]) == 0
    assert "up to date" in capsys.readouterr().out

    make_skill("beta", "---\nname: Beta\ncategory: writing\n---\n")
    assert main(["--root", str(tmp_path), "--check"]) == 1
    assert "out of date" in capsys.readouterr().err


def test_main_check_treats_corrupt_index_as_stale(tmp_path: Path, make_skill: Callable[[str, str], Path]) -> None:
    make_skill("alpha", ALPHA_SKILL)
    (tmp_path / "skills" / "index.json").write_text("{not json", encoding="utf-8")

    assert main(["--root", str(tmp_path), "--check"]) == 1
