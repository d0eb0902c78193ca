"""Bridge from the standard :mod:`logging` package into the appender.

Purpose
-------
Let applications keep using ``logging.getLogger(...)`` while records end up in
the host platform log. The handler converts each :class:`logging.LogRecord`
into a :class:`LogEvent` and hands it to its :class:`PlatformLogAppender`.

System Role
-----------
Inbound adapter. Unlike most handlers it does not route exceptions to
:meth:`logging.Handler.handleError`: a failing platform write reaches the
logging call site.
"""

from __future__ import annotations

import logging
import traceback
from datetime import datetime, timezone
from typing import Any

from lib_log_platform.application.appender import PlatformLogAppender
from lib_log_platform.domain.events import LogEvent
from lib_log_platform.domain.levels import LogLevel

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def event_from_record(record: logging.LogRecord) -> LogEvent:
    """Convert ``record`` into a :class:`LogEvent`.

    Examples
    --------
    >>> record = logging.LogRecord("svc", logging.CRITICAL, __file__, 12, "hello %s", ("world",), None)
    >>> event = event_from_record(record)
    >>> event.message, event.level.name, event.line
    ('hello world', 'ERROR', 12)
    """
    exc_text: str | None = None
    if record.exc_info and record.exc_info[0] is not None:
        exc_text = "".join(traceback.format_exception(*record.exc_info)).rstrip()
    elif record.exc_text:
        exc_text = record.exc_text

    extra: dict[str, Any] = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES}

    return LogEvent(
        logger_name=record.name,
        level=LogLevel.from_python_level(record.levelno),
        message=record.getMessage(),
        timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
        thread_name=record.threadName,
        process_id=record.process,
        function=record.funcName,
        line=record.lineno,
        extra=extra,
        exc_info=exc_text,
    )


class PlatformLogHandler(logging.Handler):
    """Logging handler writing records through a :class:`PlatformLogAppender`."""

    def __init__(self, appender: PlatformLogAppender, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._appender = appender

    @property
    def appender(self) -> PlatformLogAppender:
        return self._appender

    def emit(self, record: logging.LogRecord) -> None:
        """Forward ``record`` to the appender; write errors propagate."""
        self._appender.append(event_from_record(record))

    def close(self) -> None:
        """Stop the appender, then release handler resources."""
        try:
            self._appender.stop()
        finally:
            super().close()


__all__ = ["PlatformLogHandler", "event_from_record"]
