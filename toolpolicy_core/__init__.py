"""Core runtime pieces for the toolpolicy PATH interposer table."""

from .app import ToolPolicyApp, ToolPolicyStatus
from .config import ConfigError, Settings, SettingsResolver
from .paths import UserDirs
from .platform import detect_host_platform, normalize_platform

__all__ = [
    "ToolPolicyApp",
    "ToolPolicyStatus",
    "ConfigError",
    "Settings",
    "SettingsResolver",
    "UserDirs",
    "detect_host_platform",
    "normalize_platform",
]
