from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest


def test_event_normalises_timestamp_to_utc(event_factory) -> None:
    local = datetime(2025, 9, 30, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    event = event_factory({"timestamp": local})

    assert event.timestamp == datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    assert event.timestamp.tzinfo is timezone.utc


def test_event_rejects_naive_timestamp(event_factory) -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        event_factory({"timestamp": datetime(2025, 9, 30, 12, 0)})


def test_event_rejects_non_string_message(event_factory) -> None:
    with pytest.raises(TypeError):
        event_factory({"message": 42})


def test_event_accepts_empty_message(event_factory) -> None:
    assert event_factory({"message": ""}).message == ""


def test_event_copies_extra(event_factory) -> None:
    extra = {"request": "r-1"}
    event = event_factory({"extra": extra})
    extra["request"] = "mutated"

    assert event.extra == {"request": "r-1"}


