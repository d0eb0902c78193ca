from __future__ import annotations

import logging

import pytest

from lib_log_platform.domain.levels import LogLevel, install_python_level_names


@pytest.mark.parametrize(
    "name, expected",
    [
        ("trace", LogLevel.TRACE),
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warn", LogLevel.WARN),
        ("warning", LogLevel.WARN),
        ("error", LogLevel.ERROR),
        ("critical", LogLevel.ERROR),
        ("OFF", LogLevel.OFF),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


def test_levels_are_ordered() -> None:
    assert LogLevel.TRACE < LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARN < LogLevel.ERROR < LogLevel.OFF
    assert LogLevel.INFO <= LogLevel.INFO


@pytest.mark.parametrize(
    "number, expected",
    [
        (logging.NOTSET, LogLevel.TRACE),
        (5, LogLevel.TRACE),
        (logging.DEBUG, LogLevel.DEBUG),
        (15, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFO),
        (logging.WARNING, LogLevel.WARN),
        (logging.ERROR, LogLevel.ERROR),
        (logging.CRITICAL, LogLevel.ERROR),
        (2**31 - 1, LogLevel.OFF),
    ],
)
def test_from_python_level_floors_to_known_levels(number: int, expected: LogLevel) -> None:
    assert LogLevel.from_python_level(number) is expected


@pytest.mark.parametrize("level", LogLevel)
def test_to_python_level_roundtrips(level: LogLevel) -> None:
    assert LogLevel.from_python_level(level.to_python_level()) is level


def test_install_python_level_names_registers_trace() -> None:
    install_python_level_names()

    assert logging.getLevelName(5) == "TRACE"
    assert logging.getLevelName(2**31 - 1) == "OFF"
