"""Which binaries from $PATH may run during the build.

The table is data only; ``ToolPolicyRegistry`` turns it into a lookup and
applies the host platform adjustments.
"""

from __future__ import annotations

from .records import ALLOWED, FORBIDDEN, LINUX_ONLY_PREBUILT, PolicyRecord

ToolPolicyEntry = tuple[str, PolicyRecord]

TOOL_POLICY_TABLE: tuple[ToolPolicyEntry, ...] = (
    ("bash", ALLOWED),
    ("brotli", ALLOWED),
    ("ccache", ALLOWED),
    ("cpio", ALLOWED),
    ("curl", ALLOWED),
    ("date", ALLOWED),
    ("diff", ALLOWED),
    ("dlv", ALLOWED),
    ("expr", ALLOWED),
    ("flock", ALLOWED),
    ("fuser", ALLOWED),
    ("gcert", ALLOWED),
    ("gcertstatus", ALLOWED),
    ("gcloud", ALLOWED),
    ("getopt", ALLOWED),
    ("git", ALLOWED),
    ("hexdump", ALLOWED),
    ("jar", ALLOWED),
    ("java", ALLOWED),
    ("javap", ALLOWED),
    ("locale", ALLOWED),
    ("lsof", ALLOWED),
    ("ld.lld", ALLOWED),
    ("llvm-ar", ALLOWED),
    ("nproc", ALLOWED),
    ("openssl", ALLOWED),
    ("patch", ALLOWED),
    ("pkg-config", ALLOWED),
    ("pstree", ALLOWED),
    ("python3", ALLOWED),
    ("python3.6", ALLOWED),
    ("python3.7", ALLOWED),
    ("python3.8", ALLOWED),
    ("python3.9", ALLOWED),
    ("python3.10", ALLOWED),
    ("repo", ALLOWED),
    ("rsync", ALLOWED),
    ("sh", ALLOWED),
    ("stubby", ALLOWED),
    ("tar", ALLOWED),
    ("tr", ALLOWED),
    ("unzip", ALLOWED),
    ("zip", ALLOWED),
    ("zipdetails", ALLOWED),
    ("arm-linux-androidkernel-as", ALLOWED),
    ("arm-linux-androidkernel-ld", ALLOWED),
    # Host toolchain is removed; the in-tree toolchain must be used instead.
    # GCC also can't find cc1 through the interposer.
    ("ar", FORBIDDEN),
    ("as", FORBIDDEN),
    ("cc", FORBIDDEN),
    ("clang", FORBIDDEN),
    ("clang++", FORBIDDEN),
    ("gcc", FORBIDDEN),
    ("g++", FORBIDDEN),
    ("ld", ALLOWED),  # HACK
    ("ld.bfd", FORBIDDEN),
    ("ld.gold", FORBIDDEN),
    ("perl", ALLOWED),  # HACK
    # Toybox tools that only work on Linux.
    ("pgrep", LINUX_ONLY_PREBUILT),
    ("pkill", LINUX_ONLY_PREBUILT),
    ("ps", LINUX_ONLY_PREBUILT),
)

# Native macOS utilities allowed from the host on darwin.
DARWIN_HOST_TOOLS: tuple[str, ...] = ("sw_vers", "xcrun")
