"""Ports for the host platform and the logs it hands out."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_platform.domain.status import StatusRecord


@runtime_checkable
class PlatformLogPort(Protocol):
    """Log owned by the host platform for a single target (plugin/bundle)."""

    def write(self, record: StatusRecord) -> None:
        """Append ``record`` to the platform log."""


@runtime_checkable
class PlatformPort(Protocol):
    """Look up platform logs by target name."""

    def lookup_target(self, name: str) -> PlatformLogPort | None:
        """Return the log registered for ``name`` or ``None`` when unknown."""


__all__ = ["PlatformLogPort", "PlatformPort"]
