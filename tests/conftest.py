from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

import pytest

from lib_log_platform.adapters.platform.memory import InMemoryPlatform
from lib_log_platform.application.appender import DEFAULT_TARGET_NAME
from lib_log_platform.domain.events import LogEvent
from lib_log_platform.domain.levels import LogLevel
from tests.doubles import RecordingLayout

EventFactory = Callable[[Mapping[str, Any] | None], LogEvent]


@pytest.fixture(autouse=True)
def _clear_platform_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep LOG_PLATFORM_* overrides from the host environment out of tests."""

    for name in (
        "LOG_PLATFORM_NAME",
        "LOG_PLATFORM_TARGET",
        "LOG_PLATFORM_TEMPLATE",
        "LOG_PLATFORM_PRESET",
        "LOG_PLATFORM_LEVEL",
        "LOG_PLATFORM_LOGGER",
        "LOG_USE_DOTENV",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def event_factory() -> EventFactory:
    def _factory(overrides: Mapping[str, Any] | None = None) -> LogEvent:
        payload: dict[str, Any] = {
            "logger_name": "tests.app",
            "level": LogLevel.INFO,
            "message": "hello",
            "timestamp": datetime(2025, 9, 30, 12, 0, 5, tzinfo=timezone.utc),
            "thread_name": "MainThread",
            "process_id": 4242,
            "function": "handler",
            "line": 17,
        }
        if overrides:
            payload.update(overrides)
        return LogEvent(**payload)

    return _factory


@pytest.fixture
def platform() -> InMemoryPlatform:
    return InMemoryPlatform([DEFAULT_TARGET_NAME, "app.core"])


@pytest.fixture
def recording_layout() -> RecordingLayout:
    return RecordingLayout()
