"""Platform status taxonomy and the record written to a platform log.

Purpose
-------
Model the small status vocabulary host platforms use to triage entries in
their error log, and the immutable record the appender hands to a platform
log handle.

Contents
--------
* :class:`PlatformStatus` enum using the host's numeric flag values.
* :class:`StatusRecord` dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PlatformStatus(Enum):
    """Status values understood by the host error log."""

    OK = 0
    INFO = 1
    WARNING = 2
    ERROR = 4
    CANCEL = 8

    @classmethod
    def from_name(cls, name: str) -> "PlatformStatus":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown platform status: {name!r}") from exc


@dataclass(slots=True, frozen=True)
class StatusRecord:
    """Entry forwarded to a platform log handle.

    Attributes
    ----------
    status:
        :class:`PlatformStatus` derived from the event severity.
    target_name:
        Name of the plugin/bundle whose log receives the entry.
    code:
        Numeric value of the originating :class:`~lib_log_platform.domain.levels.LogLevel`.
    message:
        Text rendered by the configured layout.
    """

    status: PlatformStatus
    target_name: str
    code: int
    message: str


__all__ = ["PlatformStatus", "StatusRecord"]
