"""Runtime state container and access helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock

from lib_log_platform.adapters.logging_handler import PlatformLogHandler
from lib_log_platform.application.appender import PlatformLogAppender
from lib_log_platform.domain import LogLevel


@dataclass(slots=True)
class PlatformRuntime:
    """Appender, handler and the logger the handler is attached to."""

    appender: PlatformLogAppender
    handler: PlatformLogHandler
    logger: logging.Logger
    level: LogLevel


_STATE: PlatformRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: PlatformRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> PlatformRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_platform.init() must be called before using the runtime API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_log_platform.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "PlatformRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
