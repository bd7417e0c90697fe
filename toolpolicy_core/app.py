"""Application object performing the one-time policy initialization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from toolpolicy_core.config import Settings, SettingsResolver
from toolpolicy_core.platform import PLATFORM_WITHOUT_LINUX_PREBUILTS
from toolpolicy_core.policy import ToolPolicyRegistry, build_registry


@dataclass(frozen=True)
class ToolPolicyStatus:
    platform: str
    adjusted: bool
    entries: int
    config_path: Path | None


class ToolPolicyApp:
    """Owns the settings and the sealed registry handed to callers."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("toolpolicy_core.app")
        self.settings = settings or SettingsResolver().resolve()
        self._registry: ToolPolicyRegistry | None = None
        self._status: ToolPolicyStatus | None = None

    @property
    def registry(self) -> ToolPolicyRegistry:
        if self._registry is None:
            self.bootstrap()
        assert self._registry is not None
        return self._registry

    def bootstrap(self) -> ToolPolicyStatus:
        if self._status is not None:
            return self._status
        self._registry = build_registry(self.settings.platform)
        platform = self._registry.platform
        assert platform is not None
        self._status = ToolPolicyStatus(
            platform=platform,
            adjusted=platform == PLATFORM_WITHOUT_LINUX_PREBUILTS,
            entries=len(self._registry),
            config_path=self.settings.config_path,
        )
        self.logger.info(
            "tool policy ready for %s (%d entries)", platform, self._status.entries
        )
        return self._status
