"""Smoke tests for the toolpolicy CLI surface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from toolpolicy_cli import cli


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("TOOLPOLICY_PLATFORM", "TOOLPOLICY_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("TOOLPOLICY_CONFIG", str(tmp_path / "config.toml"))


def test_lookup_defaults() -> None:
    parser = cli.build_parser()
    args = parser.parse_args(["lookup", "git"])
    assert args.command == "lookup"
    assert args.names == ["git"]
    assert args.format == "text"


def test_lookup_prints_policy(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--platform", "linux", "lookup", "clang", "mystery"])
    assert code == 0
    out = capsys.readouterr().out
    assert "[toolpolicy:lookup] clang preset=forbidden symlink=false log=true error=true" in out
    assert "[toolpolicy:lookup] mystery preset=missing symlink=true log=true error=true" in out


def test_lookup_json(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--platform", "darwin", "lookup", "ps", "--format", "json"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["platform"] == "darwin"
    assert payload["tools"] == [
        {
            "name": "ps",
            "preset": "allowed",
            "symlink": True,
            "log": False,
            "error": False,
            "linux_only_prebuilt": False,
        }
    ]


def test_list_filters_by_preset(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--platform", "linux", "list", "--preset", "linux_only_prebuilt"])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[1] for line in lines] == ["pgrep", "pkill", "ps"]


def test_list_reports_empty_filter(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--platform", "darwin", "list", "--preset", "linux_only_prebuilt"])
    assert code == 0
    assert "no matching tools" in capsys.readouterr().out


def test_status_reads_platform_from_config(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "config.toml").write_text('platform = "darwin"\n', encoding="utf-8")
    code = cli.main(["status"])
    assert code == 0
    out = capsys.readouterr().out
    assert "[toolpolicy:status] platform=darwin" in out
    assert "[toolpolicy:status] adjusted=true" in out


def test_invalid_env_log_level_is_reported(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("TOOLPOLICY_LOG_LEVEL", "chatty")
    code = cli.main(["status"])
    assert code == 1
    assert "[toolpolicy] error:" in capsys.readouterr().out


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([]) == 0
    assert "usage: toolpolicy" in capsys.readouterr().out


def test_config_flag_points_at_alternative_file(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    alternative = tmp_path / "ci.toml"
    alternative.write_text('[toolpolicy]\nplatform = "osx"\n', encoding="utf-8")
    code = cli.main(["--config", str(alternative), "status"])
    assert code == 0
    out = capsys.readouterr().out
    assert "[toolpolicy:status] platform=darwin" in out
    assert f"[toolpolicy:status] config={alternative}" in out
