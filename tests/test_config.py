"""Tests for layered settings resolution."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from toolpolicy_core.config import ConfigError, Settings, SettingsResolver
from toolpolicy_core.paths import UserDirs
from toolpolicy_core.platform import detect_host_platform


def _resolver(tmp_path: Path, **kwargs) -> SettingsResolver:
    return SettingsResolver(user_dirs=UserDirs(config_dir_override=tmp_path), **kwargs)


def test_defaults_without_config(tmp_path: Path) -> None:
    settings = _resolver(tmp_path, env={}).resolve()
    assert settings.platform == detect_host_platform()
    assert settings.log_level == "WARNING"
    assert settings.log_level_value == logging.WARNING
    assert settings.config_path == tmp_path / "config.toml"


def test_user_config_file_is_read(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text(
        '[toolpolicy]\nplatform = "darwin"\nlog_level = "debug"\n',
        encoding="utf-8",
    )
    settings = _resolver(tmp_path, env={}).resolve()
    assert settings.platform == "darwin"
    assert settings.log_level == "DEBUG"


def test_env_beats_config_and_cli_beats_env(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text('platform = "windows"\n', encoding="utf-8")
    env = {"TOOLPOLICY_PLATFORM": "osx"}
    assert _resolver(tmp_path, env=env).resolve().platform == "darwin"
    settings = _resolver(tmp_path, env=env, cli_overrides={"platform": "linux"}).resolve()
    assert settings.platform == "linux"


def test_empty_cli_override_is_ignored(tmp_path: Path) -> None:
    env = {"TOOLPOLICY_PLATFORM": "darwin"}
    settings = _resolver(tmp_path, env=env, cli_overrides={"platform": None}).resolve()
    assert settings.platform == "darwin"


def test_config_path_from_env(tmp_path: Path) -> None:
    alternative = tmp_path / "other.toml"
    alternative.write_text('log_level = "ERROR"\n', encoding="utf-8")
    settings = _resolver(tmp_path, env={"TOOLPOLICY_CONFIG": str(alternative)}).resolve()
    assert settings.config_path == alternative
    assert settings.log_level == "ERROR"


def test_malformed_config_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("platform = [unterminated\n", encoding="utf-8")
    settings = _resolver(tmp_path, env={}).resolve()
    assert settings.log_level == "WARNING"


def test_unknown_log_level_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        _resolver(tmp_path, env={"TOOLPOLICY_LOG_LEVEL": "chatty"}).resolve()


def test_settings_normalizes_log_level() -> None:
    settings = Settings(platform="linux", log_level="info")
    assert settings.log_level == "INFO"
    assert settings.log_level_value == logging.INFO


def test_settings_rejects_unknown_log_level() -> None:
    with pytest.raises(ConfigError):
        Settings(platform="linux", log_level="verbose")


def test_malformed_config_is_read_once_per_resolve(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    (tmp_path / "config.toml").write_text("platform = [unterminated\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="toolpolicy_core.config"):
        _resolver(tmp_path, env={}).resolve()
    warnings = [record for record in caplog.records if "ignoring unreadable config" in record.message]
    assert len(warnings) == 1
