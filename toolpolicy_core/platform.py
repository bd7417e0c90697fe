"""Host operating system detection for the policy adjustments."""

from __future__ import annotations

import sys

DARWIN = "darwin"
LINUX = "linux"
WINDOWS = "windows"

# The platform the tree ships no Linux-only prebuilts for.
PLATFORM_WITHOUT_LINUX_PREBUILTS = DARWIN

_ALIASES: dict[str, str] = {
    "macos": DARWIN,
    "mac": DARWIN,
    "osx": DARWIN,
    "win": WINDOWS,
    "win32": WINDOWS,
    "cygwin": WINDOWS,
}


def normalize_platform(value: str) -> str:
    """Map a user or interpreter supplied platform string to an OS family."""

    lowered = value.strip().lower()
    if lowered.startswith(LINUX):
        return LINUX
    return _ALIASES.get(lowered, lowered)


def detect_host_platform(sys_platform: str | None = None) -> str:
    return normalize_platform(sys_platform if sys_platform is not None else sys.platform)
