"""Log level abstraction bridging stdlib numbers and the appender severities.

Purpose
-------
Offer the ordered severity scale the appender understands (``TRACE`` through
``ERROR`` plus the ``OFF`` sentinel) together with conversions from the
:mod:`logging` integers produced by the standard library.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.
* :func:`install_python_level_names` registering ``TRACE`` with :mod:`logging`.

System Role
-----------
Used by the logging handler to classify records and by the appender to pick a
platform status for each event.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Ordered severities; ``OFF`` means "never log"."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    OFF = 2**31 - 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value <= other.value

    def to_python_level(self) -> int:
        """Return the :mod:`logging` number matching this level."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _NAME_ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging number into :class:`LogLevel`.

        Numbers between two levels fall to the lower one, so ``CRITICAL``
        becomes ``ERROR``. Anything below ``TRACE`` is treated as ``TRACE``.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.CRITICAL)
        <LogLevel.ERROR: 40>
        >>> LogLevel.from_python_level(logging.NOTSET)
        <LogLevel.TRACE: 5>
        """
        try:
            return cls(level)
        except ValueError:
            pass
        resolved = cls.TRACE
        for member in cls:
            if member.value <= level:
                resolved = member
        return resolved


_NAME_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "ERROR",
    "FATAL": "ERROR",
}
# Stdlib spellings accepted by :meth:`LogLevel.from_name`.


def install_python_level_names() -> None:
    """Register ``TRACE`` and ``OFF`` as level names with :mod:`logging`."""

    logging.addLevelName(LogLevel.TRACE.value, LogLevel.TRACE.name)
    logging.addLevelName(LogLevel.OFF.value, LogLevel.OFF.name)


__all__ = ["LogLevel", "install_python_level_names"]
