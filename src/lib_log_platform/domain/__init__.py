"""Domain entities and value objects used by the platform log appender."""

from __future__ import annotations

from .diagnostics import Diagnostic, DiagnosticHook, DiagnosticLevel, DiagnosticLog
from .errors import ConfigurationError, MissingLayoutError, UnresolvableTargetError
from .events import LogEvent
from .levels import LogLevel, install_python_level_names
from .status import PlatformStatus, StatusRecord

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticHook",
    "DiagnosticLevel",
    "DiagnosticLog",
    "LogEvent",
    "LogLevel",
    "MissingLayoutError",
    "PlatformStatus",
    "StatusRecord",
    "UnresolvableTargetError",
    "install_python_level_names",
]
