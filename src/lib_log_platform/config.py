"""Configuration helpers: ``.env`` loading and appender settings resolution.

Purpose
-------
Collect the knobs that shape an appender (name, target, layout, level,
logger) from call arguments and ``LOG_PLATFORM_*`` environment variables, and
optionally seed the environment from the nearest ``.env`` file.

Contents
--------
* :func:`enable_dotenv` - load ``.env`` once per process via python-dotenv.
* :class:`AppenderSettings` / :func:`resolve_settings` - resolved settings.

System Role
-----------
Consumed by :func:`lib_log_platform.init` and the CLI. Environment variables
take precedence over call arguments so operators can re-point a deployed
application without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from threading import RLock

from dotenv import find_dotenv, load_dotenv

from lib_log_platform.domain.levels import LogLevel

DOTENV_ENV_VAR = "LOG_USE_DOTENV"

ENV_NAME = "LOG_PLATFORM_NAME"
ENV_TARGET = "LOG_PLATFORM_TARGET"
ENV_TEMPLATE = "LOG_PLATFORM_TEMPLATE"
ENV_PRESET = "LOG_PLATFORM_PRESET"
ENV_LEVEL = "LOG_PLATFORM_LEVEL"
ENV_LOGGER = "LOG_PLATFORM_LOGGER"

DEFAULT_PRESET = "short"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOCK = RLock()
_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


def enable_dotenv(path: str | Path | None = None) -> Path | None:
    """Load ``.env`` entries into :data:`os.environ` without overriding them.

    When ``path`` is omitted the nearest ``.env`` is searched upwards from the
    working directory. Returns the resolved file loaded, or ``None`` when no
    file was found. Subsequent calls return the first result.
    """
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        if _DOTENV_ATTEMPTED:
            return _DOTENV_LOADED
        _DOTENV_ATTEMPTED = True
        candidate = str(path) if path is not None else find_dotenv(usecwd=True)
        if not candidate or not Path(candidate).is_file():
            return None
        resolved = Path(candidate).resolve()
        load_dotenv(resolved, override=False)
        _DOTENV_LOADED = resolved
        return resolved


def dotenv_requested(flag: bool | None = None) -> bool:
    """Return whether ``.env`` loading is wanted.

    An explicit ``flag`` wins; otherwise :data:`DOTENV_ENV_VAR` decides.

    Examples
    --------
    >>> dotenv_requested(True)
    True
    >>> import os
    >>> _ = os.environ.pop(DOTENV_ENV_VAR, None)
    >>> dotenv_requested()
    False
    """
    if flag is not None:
        return flag
    return _env_bool(DOTENV_ENV_VAR, default=False)


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None
        _DOTENV_ATTEMPTED = False


@dataclass(frozen=True)
class AppenderSettings:
    """Resolved appender configuration."""

    name: str
    target_name: str | None
    template: str | None
    preset: str | None
    level: LogLevel
    logger_name: str | None


def resolve_settings(
    *,
    name: str = "platform",
    target_name: str | None = None,
    template: str | None = None,
    preset: str | None = None,
    level: str | LogLevel = LogLevel.TRACE,
    logger_name: str | None = None,
) -> AppenderSettings:
    """Merge arguments with ``LOG_PLATFORM_*`` overrides.

    A template (argument or environment) wins over a preset; when neither is
    given the :data:`DEFAULT_PRESET` is used.

    Raises
    ------
    ValueError
        When the level cannot be parsed.
    """
    resolved_template = _env_str(ENV_TEMPLATE) or template
    resolved_preset = _env_str(ENV_PRESET) or preset
    if resolved_template is None and resolved_preset is None:
        resolved_preset = DEFAULT_PRESET
    env_level = _env_str(ENV_LEVEL)
    raw_level = env_level if env_level is not None else level
    return AppenderSettings(
        name=_env_str(ENV_NAME) or name,
        target_name=_env_str(ENV_TARGET) or target_name,
        template=resolved_template,
        preset=resolved_preset,
        level=coerce_level(raw_level),
        logger_name=_env_str(ENV_LOGGER) or logger_name,
    )


def coerce_level(level: str | LogLevel) -> LogLevel:
    """Normalise level inputs (string or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARN
    True
    >>> coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    return LogLevel.from_name(level)


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


__all__ = [
    "AppenderSettings",
    "DEFAULT_PRESET",
    "DOTENV_ENV_VAR",
    "coerce_level",
    "dotenv_requested",
    "enable_dotenv",
    "resolve_settings",
]
