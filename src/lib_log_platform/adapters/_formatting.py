"""Utilities that normalise log events into template-friendly dictionaries.

Why
---
Layout templates use ``str.format`` placeholders. Producing the payload in one
place keeps the documented placeholder list and the presets in sync.

Contents
--------
* :func:`build_format_payload` – generate placeholder values for a log event.
"""

from __future__ import annotations

from typing import Any

from lib_log_platform.domain.events import LogEvent

_LEVEL_CODES = {
    "TRACE": "TRCE",
    "DEBUG": "DEBG",
    "INFO": "INFO",
    "WARN": "WARN",
    "ERROR": "ERRO",
    "OFF": "OFF_",
}


def build_format_payload(event: LogEvent) -> dict[str, Any]:
    """Return the mapping of placeholders exposed to layout templates."""

    extra_dict = dict(event.extra)
    extra_fields = ""
    pairs = {key: value for key, value in extra_dict.items() if value not in (None, {})}
    if pairs:
        extra_fields = " " + " ".join(f"{key}={value}" for key, value in sorted(pairs.items()))

    level_text = event.level.name

    return {
        "timestamp": event.timestamp.isoformat(),
        "YYYY": f"{event.timestamp.year:04d}",
        "MM": f"{event.timestamp.month:02d}",
        "DD": f"{event.timestamp.day:02d}",
        "hh": f"{event.timestamp.hour:02d}",
        "mm": f"{event.timestamp.minute:02d}",
        "ss": f"{event.timestamp.second:02d}",
        "level": level_text,
        "level_name": level_text,
        "level_code": _LEVEL_CODES[level_text],
        "logger_name": event.logger_name,
        "message": event.message,
        "thread_name": event.thread_name or "",
        "process_id": event.process_id if event.process_id is not None else "",
        "function": event.function or "",
        "line": event.line if event.line is not None else "",
        "extra": extra_dict,
        "extra_fields": extra_fields,
        "exc_info": event.exc_info or "",
    }


__all__ = ["build_format_payload"]
