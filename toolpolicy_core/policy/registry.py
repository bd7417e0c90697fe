"""In-memory registry answering PATH interposer policy lookups."""

from __future__ import annotations

import logging
from typing import Iterable

from toolpolicy_core.platform import PLATFORM_WITHOUT_LINUX_PREBUILTS, normalize_platform

from .errors import DuplicateToolError, RegistrySealedError, RegistryStateError
from .records import ALLOWED, MISSING, PolicyRecord
from .table import DARWIN_HOST_TOOLS, TOOL_POLICY_TABLE, ToolPolicyEntry

logger = logging.getLogger(__name__)


class ToolPolicyRegistry:
    """Tool name to ``PolicyRecord`` mapping with a ``MISSING`` fallback.

    The registry is adjusted for the host platform once and then sealed.
    A sealed registry never changes, so readers need no locking.
    """

    def __init__(self, entries: Iterable[ToolPolicyEntry] = TOOL_POLICY_TABLE) -> None:
        self._entries: dict[str, PolicyRecord] = {}
        for name, record in entries:
            if name in self._entries:
                raise DuplicateToolError(name)
            self._entries[name] = record
        self._platform: str | None = None
        self._sealed = False

    @property
    def platform(self) -> str | None:
        return self._platform

    @property
    def sealed(self) -> bool:
        return self._sealed

    def lookup(self, name: str) -> PolicyRecord:
        """Return the policy for ``name``; unlisted tools get ``MISSING``."""

        return self._entries.get(name, MISSING)

    def apply_platform_adjustments(self, platform: str) -> None:
        """Trust host tools the tree has no prebuilt for on ``platform``.

        Only the platform without Linux prebuilts changes the table: its
        native utilities are allowed and every Linux-only prebuilt entry
        becomes ``ALLOWED``. Repeating the call for the same platform is a
        no-op.
        """

        if self._sealed:
            raise RegistrySealedError("the tool policy registry is sealed.")
        normalized = normalize_platform(platform)
        if self._platform is not None:
            if self._platform == normalized:
                logger.debug("platform adjustments for %s already applied", normalized)
                return
            raise RegistryStateError(
                f"platform adjustments already applied for {self._platform!r}, "
                f"refusing {normalized!r}."
            )
        self._platform = normalized
        if normalized != PLATFORM_WITHOUT_LINUX_PREBUILTS:
            return

        for name in DARWIN_HOST_TOOLS:
            self._entries[name] = ALLOWED
            logger.debug("allowing host tool %s on %s", name, normalized)

        for name, record in list(self._entries.items()):
            if record.linux_only_prebuilt:
                self._entries[name] = ALLOWED
                logger.debug("no %s prebuilt for %s, allowing the host version", name, normalized)

    def seal(self) -> "ToolPolicyRegistry":
        self._sealed = True
        return self

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._entries))

    def entries(self) -> tuple[ToolPolicyEntry, ...]:
        return tuple(sorted(self._entries.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def build_registry(
    platform: str,
    entries: Iterable[ToolPolicyEntry] = TOOL_POLICY_TABLE,
) -> ToolPolicyRegistry:
    """Construct, adjust for ``platform`` and seal a registry."""

    registry = ToolPolicyRegistry(entries)
    registry.apply_platform_adjustments(platform)
    return registry.seal()
