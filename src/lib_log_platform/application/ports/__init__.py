"""Protocols the appender depends on."""

from __future__ import annotations

from .layout import LayoutPort
from .platform import PlatformLogPort, PlatformPort

__all__ = ["LayoutPort", "PlatformLogPort", "PlatformPort"]
