"""Application layer: the appender and the ports it talks to."""

from __future__ import annotations

from .appender import DEFAULT_TARGET_NAME, STATUS_BY_LEVEL, PlatformLogAppender, status_for

__all__ = ["DEFAULT_TARGET_NAME", "STATUS_BY_LEVEL", "PlatformLogAppender", "status_for"]
