"""Errors raised while building the tool policy registry."""

from __future__ import annotations


class PolicyError(Exception):
    """Base class for tool policy failures."""


class DuplicateToolError(PolicyError, ValueError):
    """Raised when a tool name appears twice in a policy table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name!r} is listed more than once in the policy table.")
        self.name = name


class RegistryStateError(PolicyError, RuntimeError):
    """Raised when a platform adjustment conflicts with an earlier one."""


class RegistrySealedError(RegistryStateError):
    """Raised when a sealed registry is asked to change."""
