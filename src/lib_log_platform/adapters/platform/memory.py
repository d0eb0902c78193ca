"""In-memory platform keeping written records per target.

Useful for embedding hosts that collect entries themselves and as the test
double for :class:`PlatformPort`.
"""

from __future__ import annotations

from collections.abc import Iterable
from threading import RLock

from lib_log_platform.application.ports.platform import PlatformLogPort, PlatformPort
from lib_log_platform.domain.status import StatusRecord


class MemoryLog(PlatformLogPort):
    """Platform log storing records in arrival order."""

    def __init__(self, target_name: str) -> None:
        self.target_name = target_name
        self._records: list[StatusRecord] = []
        self._lock = RLock()

    def write(self, record: StatusRecord) -> None:
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> list[StatusRecord]:
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class InMemoryPlatform(PlatformPort):
    """Platform that only resolves explicitly registered targets.

    Examples
    --------
    >>> platform = InMemoryPlatform(["app.core"])
    >>> platform.lookup_target("app.core") is platform.log_for("app.core")
    True
    >>> platform.lookup_target("app.ui") is None
    True
    """

    def __init__(self, targets: Iterable[str] = ()) -> None:
        self._logs: dict[str, MemoryLog] = {}
        self._lock = RLock()
        for name in targets:
            self.register(name)

    def register(self, name: str) -> MemoryLog:
        """Make ``name`` resolvable and return its log."""
        with self._lock:
            log = self._logs.get(name)
            if log is None:
                log = MemoryLog(name)
                self._logs[name] = log
            return log

    def unregister(self, name: str) -> None:
        with self._lock:
            self._logs.pop(name, None)

    def lookup_target(self, name: str) -> MemoryLog | None:
        with self._lock:
            return self._logs.get(name)

    def log_for(self, name: str) -> MemoryLog:
        """Return the log for ``name``; raises ``KeyError`` when unregistered."""
        with self._lock:
            return self._logs[name]

    @property
    def targets(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._logs)


__all__ = ["InMemoryPlatform", "MemoryLog"]
