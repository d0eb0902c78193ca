"""Domain event describing a single log message handed to the appender.

Purpose
-------
Provide an immutable representation of log events so the appender and the
layouts never depend on :class:`logging.LogRecord` directly.

Contents
--------
* :class:`LogEvent` dataclass.
* Utility function ``_ensure_aware`` for timestamp validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .levels import LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event travelling from the logging framework to the appender.

    Attributes
    ----------
    logger_name:
        Logical logger emitting the event.
    level:
        :class:`LogLevel` severity associated with the event.
    message:
        Fully merged message text (arguments already applied).
    timestamp:
        Time of the event in timezone-aware UTC.
    thread_name / process_id:
        Origin of the event inside the host process.
    function / line:
        Call site, when known.
    extra:
        Shallow copy of caller-supplied key/value pairs.
    exc_info:
        Rendered traceback text when an exception was logged.
    """

    logger_name: str
    level: LogLevel
    message: str
    timestamp: datetime
    thread_name: str | None = None
    process_id: int | None = None
    function: str | None = None
    line: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    exc_info: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        if not isinstance(self.message, str):
            raise TypeError("message must be a string")
        object.__setattr__(self, "extra", dict(self.extra))


__all__ = ["LogEvent"]
