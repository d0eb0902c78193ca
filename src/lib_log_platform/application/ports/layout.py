"""Port describing the layout that turns events into display text."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_platform.domain.events import LogEvent


@runtime_checkable
class LayoutPort(Protocol):
    """Render a :class:`LogEvent` into the message written to the platform."""

    @property
    def template(self) -> str | None:
        """Return the template the layout renders with, or ``None`` when unset."""

    def layout(self, event: LogEvent) -> str:
        """Return the text for ``event``."""


__all__ = ["LayoutPort"]
