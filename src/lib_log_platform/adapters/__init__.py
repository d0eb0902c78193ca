"""Adapter implementations for the appender ports and the stdlib bridge."""

from __future__ import annotations

from .layout import LAYOUT_PRESETS, TemplateLayout
from .logging_handler import PlatformLogHandler, event_from_record
from .platform import (
    InMemoryPlatform,
    JournaldLog,
    JournaldPlatform,
    MemoryLog,
    RichConsoleLog,
    RichConsolePlatform,
)

__all__ = [
    "InMemoryPlatform",
    "JournaldLog",
    "JournaldPlatform",
    "LAYOUT_PRESETS",
    "MemoryLog",
    "PlatformLogHandler",
    "RichConsoleLog",
    "RichConsolePlatform",
    "TemplateLayout",
    "event_from_record",
]
