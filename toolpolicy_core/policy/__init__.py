"""Tool policy table and registry for the build PATH interposer."""

from .errors import DuplicateToolError, PolicyError, RegistrySealedError, RegistryStateError
from .records import (
    ALLOWED,
    FORBIDDEN,
    LINUX_ONLY_PREBUILT,
    LOG,
    MISSING,
    PRESETS,
    PolicyRecord,
    preset_name,
)
from .registry import ToolPolicyRegistry, build_registry
from .table import DARWIN_HOST_TOOLS, TOOL_POLICY_TABLE

__all__ = [
    "ALLOWED",
    "FORBIDDEN",
    "LINUX_ONLY_PREBUILT",
    "LOG",
    "MISSING",
    "PRESETS",
    "PolicyRecord",
    "preset_name",
    "ToolPolicyRegistry",
    "build_registry",
    "DARWIN_HOST_TOOLS",
    "TOOL_POLICY_TABLE",
    "PolicyError",
    "DuplicateToolError",
    "RegistryStateError",
    "RegistrySealedError",
]
