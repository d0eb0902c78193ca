"""Concrete platforms the appender can write to."""

from __future__ import annotations

from .journald import JournaldLog, JournaldPlatform
from .memory import InMemoryPlatform, MemoryLog
from .rich_console import RichConsoleLog, RichConsolePlatform

__all__ = [
    "InMemoryPlatform",
    "JournaldLog",
    "JournaldPlatform",
    "MemoryLog",
    "RichConsoleLog",
    "RichConsolePlatform",
]
