"""Diagnostic log collecting lifecycle messages emitted by appenders.

Purpose
-------
Give appenders a channel for informational and error messages produced while
they validate their configuration. Entries are kept for inspection, mirrored
to the stdlib logger ``lib_log_platform.diagnostics`` and optionally handed to
a caller-supplied hook.

Contents
--------
* :class:`DiagnosticLevel` - the two severities of the channel.
* :class:`Diagnostic` - immutable entry.
* :class:`DiagnosticLog` - thread-safe recorder.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from typing import Any

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None

logger = logging.getLogger("lib_log_platform.diagnostics")


class DiagnosticLevel(Enum):
    INFO = "info"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class Diagnostic:
    """Single message recorded during an appender lifecycle step."""

    level: DiagnosticLevel
    message: str
    origin: str
    error: BaseException | None = None


_HOOK_EVENTS = {
    DiagnosticLevel.INFO: "configuration_info",
    DiagnosticLevel.ERROR: "configuration_error",
}

_PYTHON_LEVELS = {
    DiagnosticLevel.INFO: logging.INFO,
    DiagnosticLevel.ERROR: logging.ERROR,
}


class DiagnosticLog:
    """Record diagnostics in order of arrival."""

    def __init__(self, *, hook: DiagnosticHook = None) -> None:
        self._entries: list[Diagnostic] = []
        self._lock = RLock()
        self._hook = hook

    def info(self, message: str, *, origin: str) -> Diagnostic:
        """Record an informational message."""
        return self._record(Diagnostic(DiagnosticLevel.INFO, message, origin))

    def error(self, message: str, *, origin: str, error: BaseException | None = None) -> Diagnostic:
        """Record an error message together with the exception describing it."""
        return self._record(Diagnostic(DiagnosticLevel.ERROR, message, origin, error))

    @property
    def entries(self) -> tuple[Diagnostic, ...]:
        with self._lock:
            return tuple(self._entries)

    @property
    def infos(self) -> tuple[Diagnostic, ...]:
        return tuple(entry for entry in self.entries if entry.level is DiagnosticLevel.INFO)

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(entry for entry in self.entries if entry.level is DiagnosticLevel.ERROR)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _record(self, entry: Diagnostic) -> Diagnostic:
        with self._lock:
            self._entries.append(entry)
        logger.log(_PYTHON_LEVELS[entry.level], "%s", entry.message, extra={"appender": entry.origin})
        if self._hook is not None:
            payload: dict[str, Any] = {"appender": entry.origin, "message": entry.message}
            if entry.error is not None:
                payload["error"] = type(entry.error).__name__
            self._hook(_HOOK_EVENTS[entry.level], payload)
        return entry


__all__ = ["Diagnostic", "DiagnosticHook", "DiagnosticLevel", "DiagnosticLog"]
