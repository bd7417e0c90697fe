"""Policy records consumed by the PATH interposer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PolicyRecord:
    # Whether to create the shim for this tool in the interposed PATH.
    symlink: bool

    # Whether invocations of this tool are logged.
    log: bool

    # Whether to refuse the invocation instead of running the host tool.
    error: bool

    # Whether the tree only ships a Linux prebuilt of this tool. On darwin the
    # host executable is trusted instead.
    linux_only_prebuilt: bool = False

    def as_dict(self) -> dict[str, bool]:
        return {
            "symlink": self.symlink,
            "log": self.log,
            "error": self.error,
            "linux_only_prebuilt": self.linux_only_prebuilt,
        }


# Run from PATH without any logging. Every entry here makes the build depend on
# a tool that is not shipped in the source tree, so keep the list short.
ALLOWED = PolicyRecord(symlink=True, log=False, error=False)

# Never reachable from PATH; callers see "executable not found".
FORBIDDEN = PolicyRecord(symlink=False, log=True, error=True)

# Allowed, but every use is logged.
LOG = PolicyRecord(symlink=True, log=True, error=False)

# Fallback for tools that are not listed. The shim is still created so the
# use gets logged before the invocation is refused.
MISSING = PolicyRecord(symlink=True, log=True, error=True)

# Prebuilt exists for Linux only; forbidden there, allowed from the host on darwin.
LINUX_ONLY_PREBUILT = PolicyRecord(
    symlink=False,
    log=True,
    error=True,
    linux_only_prebuilt=True,
)

PRESETS: dict[str, PolicyRecord] = {
    "allowed": ALLOWED,
    "forbidden": FORBIDDEN,
    "log": LOG,
    "missing": MISSING,
    "linux_only_prebuilt": LINUX_ONLY_PREBUILT,
}


def preset_name(record: PolicyRecord) -> str:
    """Return the preset name equal to ``record`` or ``"custom"``."""

    for name, preset in PRESETS.items():
        if preset == record:
            return name
    return "custom"
