"""Runtime façade attaching a platform appender to stdlib logging.

Purpose
-------
Give host applications one call (:func:`init`) that resolves settings, builds
the layout, appender and handler, starts the appender and attaches the
handler to a logger; and one call (:func:`shutdown`) that undoes it.

Contents
--------
* ``init`` – composition root.
* ``get_appender`` / ``inspect_runtime`` – accessors.
* ``shutdown`` / ``is_initialised`` – lifecycle helpers.
* ``summary_info`` – metadata banner used by the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lib_log_platform.adapters import PlatformLogHandler, RichConsolePlatform, TemplateLayout
from lib_log_platform.application.appender import PlatformLogAppender
from lib_log_platform.application.ports import LayoutPort, PlatformPort
from lib_log_platform.config import AppenderSettings, resolve_settings
from lib_log_platform.domain import Diagnostic, DiagnosticHook, DiagnosticLog, LogLevel, install_python_level_names

from ._state import PlatformRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active runtime."""

    name: str
    target_name: str | None
    started: bool
    level: LogLevel
    logger_name: str
    diagnostics: tuple[Diagnostic, ...]


def init(
    platform: PlatformPort | None = None,
    *,
    name: str = "platform",
    target_name: str | None = None,
    template: str | None = None,
    preset: str | None = None,
    level: str | LogLevel = LogLevel.TRACE,
    logger_name: str | None = None,
    diagnostic_hook: DiagnosticHook = None,
) -> None:
    """Compose and install the platform appender.

    Parameters
    ----------
    platform:
        Host platform; defaults to :class:`RichConsolePlatform`.
    name, target_name, template, preset, level, logger_name:
        Appender settings, overridable through ``LOG_PLATFORM_*`` variables
        (see :func:`lib_log_platform.config.resolve_settings`). ``logger_name``
        of ``None`` attaches to the root logger.
    diagnostic_hook:
        Optional callback receiving configuration diagnostics.

    Side Effects
    ------------
    Registers the ``TRACE``/``OFF`` level names with :mod:`logging` and adds
    a handler to the chosen logger. The appender may end up not started when
    its configuration is invalid; inspect :func:`inspect_runtime` for the
    recorded diagnostics.

    Raises
    ------
    RuntimeError
        When called twice without :func:`shutdown`.
    ValueError
        For unknown level names or layout presets.
    """

    if is_initialised():
        raise RuntimeError(
            "lib_log_platform.init() cannot be called twice without shutdown(); call lib_log_platform.shutdown() first",
        )

    settings = resolve_settings(
        name=name,
        target_name=target_name,
        template=template,
        preset=preset,
        level=level,
        logger_name=logger_name,
    )
    install_python_level_names()

    appender = PlatformLogAppender(
        platform if platform is not None else RichConsolePlatform(),
        name=settings.name,
        layout=_build_layout(settings),
        target_name=settings.target_name,
        diagnostics=DiagnosticLog(hook=diagnostic_hook),
    )
    appender.start()

    handler = PlatformLogHandler(appender, level=settings.level.to_python_level())
    logger = logging.getLogger(settings.logger_name or None)
    logger.addHandler(handler)
    set_runtime(PlatformRuntime(appender=appender, handler=handler, logger=logger, level=settings.level))


def get_appender() -> PlatformLogAppender:
    """Return the appender installed by :func:`init`."""

    return current_runtime().appender


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    return RuntimeSnapshot(
        name=runtime.appender.name,
        target_name=runtime.appender.target_name,
        started=runtime.appender.is_started,
        level=runtime.level,
        logger_name=runtime.logger.name,
        diagnostics=runtime.appender.diagnostics.entries,
    )


def shutdown() -> None:
    """Detach the handler, stop the appender and clear runtime state."""

    runtime = current_runtime()
    try:
        runtime.logger.removeHandler(runtime.handler)
        runtime.handler.close()
    finally:
        clear_runtime()


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """

    from .. import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


def _build_layout(settings: AppenderSettings) -> LayoutPort:
    if settings.template is not None:
        return TemplateLayout(settings.template)
    return TemplateLayout.from_preset(settings.preset or "short")


__all__ = [
    "RuntimeSnapshot",
    "get_appender",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
    "summary_info",
]
