"""Forward Python logging records into a host platform's error log.

The public surface re-exports the appender, its ports and concrete adapters,
plus the runtime façade (:func:`init`, :func:`shutdown`) that wires them into
the standard :mod:`logging` package.
"""

from __future__ import annotations

from .adapters import (
    LAYOUT_PRESETS,
    InMemoryPlatform,
    JournaldPlatform,
    MemoryLog,
    PlatformLogHandler,
    RichConsolePlatform,
    TemplateLayout,
)
from .application import DEFAULT_TARGET_NAME, STATUS_BY_LEVEL, PlatformLogAppender, status_for
from .application.ports import LayoutPort, PlatformLogPort, PlatformPort
from .domain import (
    ConfigurationError,
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    LogEvent,
    LogLevel,
    MissingLayoutError,
    PlatformStatus,
    StatusRecord,
    UnresolvableTargetError,
)
from .runtime import RuntimeSnapshot, get_appender, init, inspect_runtime, is_initialised, shutdown, summary_info

__all__ = [
    "ConfigurationError",
    "DEFAULT_TARGET_NAME",
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "InMemoryPlatform",
    "JournaldPlatform",
    "LAYOUT_PRESETS",
    "LayoutPort",
    "LogEvent",
    "LogLevel",
    "MemoryLog",
    "MissingLayoutError",
    "PlatformLogAppender",
    "PlatformLogHandler",
    "PlatformLogPort",
    "PlatformPort",
    "PlatformStatus",
    "RichConsolePlatform",
    "RuntimeSnapshot",
    "STATUS_BY_LEVEL",
    "StatusRecord",
    "TemplateLayout",
    "UnresolvableTargetError",
    "get_appender",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
    "status_for",
    "summary_info",
]
