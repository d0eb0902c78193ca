"""Journald platform writing status records as structured journal entries.

Purpose
-------
Use systemd-journald as the host error log on Linux. Each target resolves to
a log that tags entries with ``SYSLOG_IDENTIFIER`` set to the target name.

Contents
--------
* :data:`_PRIORITY_MAP` - status to syslog priority mapping.
* :class:`JournaldPlatform` and its per-target :class:`JournaldLog`.

System Role
-----------
Transforms :class:`StatusRecord` objects into journald field dictionaries and
invokes ``systemd.journal.send`` (or a supplied sender).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

from lib_log_platform.application.ports.platform import PlatformLogPort, PlatformPort
from lib_log_platform.domain.status import PlatformStatus, StatusRecord

from ._targets import accepts_target, normalise_targets

Sender = Callable[..., None]

_PRIORITY_MAP = {
    PlatformStatus.ERROR: 3,
    PlatformStatus.WARNING: 4,
    PlatformStatus.INFO: 6,
    PlatformStatus.OK: 7,
    PlatformStatus.CANCEL: 7,
}

#: Map :class:`PlatformStatus` to syslog numeric priorities.


def _default_sender(**fields: Any) -> None:  # pragma: no cover - depends on systemd
    """Proxy to :func:`systemd.journal.send`, raising if unavailable."""
    try:
        from systemd import journal
    except ImportError as exc:  # pragma: no cover - executed only when systemd missing
        raise RuntimeError("systemd.journal is not available") from exc
    journal.send(**fields)


class JournaldLog(PlatformLogPort):
    """Journal writer bound to a single target."""

    def __init__(self, target_name: str, sender: Sender) -> None:
        self._target_name = target_name
        self._sender = sender

    @property
    def target_name(self) -> str:
        return self._target_name

    def write(self, record: StatusRecord) -> None:
        """Send ``record`` to journald using the configured sender."""
        self._sender(**self._build_fields(record))

    def _build_fields(self, record: StatusRecord) -> dict[str, Any]:
        """Construct a journald field dictionary for ``record``.

        Examples
        --------
        >>> log = JournaldLog("app.core", sender=lambda **fields: None)
        >>> fields = log._build_fields(StatusRecord(PlatformStatus.WARNING, "app.core", 30, "disk low"))
        >>> fields["MESSAGE"], fields["PRIORITY"], fields["SYSLOG_IDENTIFIER"]
        ('disk low', 4, 'app.core')
        """
        return {
            "MESSAGE": record.message,
            "PRIORITY": _PRIORITY_MAP[record.status],
            "SYSLOG_IDENTIFIER": record.target_name,
            "PLATFORM_STATUS": record.status.name,
            "PLATFORM_CODE": record.code,
        }


class JournaldPlatform(PlatformPort):
    """Platform resolving targets to journald writers."""

    def __init__(self, *, sender: Sender | None = None, targets: Iterable[str] | None = None) -> None:
        self._sender = sender or _default_sender
        self._targets = normalise_targets(targets)

    def lookup_target(self, name: str) -> JournaldLog | None:
        if not accepts_target(self._targets, name):
            return None
        return JournaldLog(name, self._sender)


__all__ = ["JournaldLog", "JournaldPlatform"]
