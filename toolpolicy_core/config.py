"""Layered settings: CLI overrides, environment, user config.toml, defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import tomllib

from .paths import UserDirs
from .platform import detect_host_platform, normalize_platform

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_KEY_MAP: dict[str, str] = {
    "platform": "TOOLPOLICY_PLATFORM",
    "log_level": "TOOLPOLICY_LOG_LEVEL",
    "config_file": "TOOLPOLICY_CONFIG",
}

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a resolved setting has an unusable value."""


def _load_config_from_file(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data: dict[str, Any] = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    section = data.get("toolpolicy")
    if isinstance(section, dict):
        data = section
    return {key: str(value) for key, value in data.items() if not isinstance(value, dict)}


@dataclass(frozen=True)
class Settings:
    platform: str
    log_level: str = DEFAULT_LOG_LEVEL
    config_path: Path | None = None

    def __post_init__(self) -> None:
        log_level = self.log_level.strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"unknown log level {log_level!r}; expected one of {', '.join(LOG_LEVELS)}."
            )
        object.__setattr__(self, "log_level", log_level)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@dataclass
class SettingsResolver:
    """Resolve settings honoring CLI, env, user config, defaults order."""

    user_dirs: UserDirs | None = None
    cli_overrides: Mapping[str, str | None] | None = None
    env: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        self.user_dirs = self.user_dirs or UserDirs()
        self.cli_overrides = {
            key: value for key, value in (self.cli_overrides or {}).items() if value
        }
        self.env = self.env if self.env is not None else os.environ

    def config_path(self) -> Path:
        if override := self.cli_overrides.get("config_file"):
            return Path(override).expanduser()
        if override := self.env.get(_ENV_KEY_MAP["config_file"]):
            return Path(override).expanduser()
        return self.user_dirs.config_file()

    def resolve_setting(self, key: str, file_layer: Mapping[str, str] | None = None) -> str | None:
        if value := self.cli_overrides.get(key):
            return value
        alias = _ENV_KEY_MAP.get(key)
        if alias and (value := self.env.get(alias)):
            return value
        if file_layer is None:
            file_layer = _load_config_from_file(self.config_path())
        return file_layer.get(key)

    def resolve(self) -> Settings:
        config_path = self.config_path()
        file_layer = _load_config_from_file(config_path)
        platform = self.resolve_setting("platform", file_layer)
        return Settings(
            platform=normalize_platform(platform) if platform else detect_host_platform(),
            log_level=self.resolve_setting("log_level", file_layer) or DEFAULT_LOG_LEVEL,
            config_path=config_path,
        )
