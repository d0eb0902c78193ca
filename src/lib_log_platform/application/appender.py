"""Appender forwarding log events to a host platform's error log.

Purpose
-------
Validate the configured layout and target, resolve the platform log for the
target once on :meth:`PlatformLogAppender.start`, then translate each event
into a :class:`StatusRecord` and write it to that log.

Contents
--------
* :data:`DEFAULT_TARGET_NAME` - target used when none is configured.
* :data:`STATUS_BY_LEVEL` - severity to platform status table.
* :func:`status_for` - table lookup with the ``OK`` fallback.
* :class:`PlatformLogAppender` - the appender itself.

System Role
-----------
Sits between the stdlib logging bridge (:mod:`lib_log_platform.adapters.logging_handler`)
and whichever :class:`PlatformPort` the host provides. Configuration problems
are reported through :class:`DiagnosticLog` instead of exceptions; write
failures after start propagate to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from lib_log_platform.application.ports import LayoutPort, PlatformLogPort, PlatformPort
from lib_log_platform.domain import (
    DiagnosticLog,
    LogEvent,
    LogLevel,
    MissingLayoutError,
    PlatformStatus,
    StatusRecord,
    UnresolvableTargetError,
)

DEFAULT_TARGET_NAME = "lib_log_platform.default"

STATUS_BY_LEVEL: Mapping[LogLevel, PlatformStatus] = MappingProxyType(
    {
        LogLevel.WARN: PlatformStatus.WARNING,
        LogLevel.ERROR: PlatformStatus.ERROR,
        LogLevel.INFO: PlatformStatus.INFO,
        LogLevel.TRACE: PlatformStatus.CANCEL,
    }
)
#: Levels missing from the table (``DEBUG``, ``OFF``) map to ``PlatformStatus.OK``.


def status_for(level: LogLevel) -> PlatformStatus:
    """Return the platform status for ``level``.

    Examples
    --------
    >>> status_for(LogLevel.TRACE)
    <PlatformStatus.CANCEL: 8>
    >>> status_for(LogLevel.DEBUG)
    <PlatformStatus.OK: 0>
    """
    return STATUS_BY_LEVEL.get(level, PlatformStatus.OK)


class PlatformLogAppender:
    """Write log events to the platform log registered for ``target_name``.

    Parameters
    ----------
    platform:
        Host platform used to look up the target log.
    name:
        Appender name quoted in diagnostics.
    layout:
        Layout rendering event text; required before :meth:`start`.
    target_name:
        Plugin/bundle name whose log receives the records. Falls back to
        :data:`DEFAULT_TARGET_NAME` on start when unset.
    diagnostics:
        Log receiving configuration messages. A private one is created when
        omitted.
    """

    def __init__(
        self,
        platform: PlatformPort,
        *,
        name: str = "platform",
        layout: LayoutPort | None = None,
        target_name: str | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self._platform = platform
        self._name = name
        self._layout = layout
        self._target_name = target_name
        self._diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self._log: PlatformLogPort | None = None
        self._active_target: str | None = None
        self._active_layout: LayoutPort | None = None
        self._started = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def platform(self) -> PlatformPort:
        return self._platform

    @property
    def layout(self) -> LayoutPort | None:
        return self._layout

    @layout.setter
    def layout(self, layout: LayoutPort | None) -> None:
        self._layout = layout

    @property
    def target_name(self) -> str | None:
        """Name of the plugin/bundle whose log receives records."""
        return self._target_name

    @target_name.setter
    def target_name(self, target_name: str | None) -> None:
        self._target_name = target_name

    @property
    def diagnostics(self) -> DiagnosticLog:
        return self._diagnostics

    @property
    def is_started(self) -> bool:
        return self._started

    def start(self) -> None:
        """Validate configuration and activate the appender.

        Never raises for configuration problems: a missing layout or an
        unknown target is recorded as an error diagnostic and the appender
        stays inactive. The layout and target resolved here stay in effect
        until the next :meth:`start`, whatever the setters are given meanwhile.
        """
        self._deactivate()

        layout = self._layout
        if layout is None or not layout.template:
            message = f"no layout set for appender [{self._name}]"
            self._diagnostics.error(
                message,
                origin=self._name,
                error=MissingLayoutError(message, appender_name=self._name),
            )
            return

        if self._target_name is None:
            self._diagnostics.info(
                f'assuming target name "{DEFAULT_TARGET_NAME}" for appender [{self._name}]',
                origin=self._name,
            )
            self._target_name = DEFAULT_TARGET_NAME

        target_name = self._target_name
        log = self._platform.lookup_target(target_name)
        if log is None:
            message = f'invalid target name "{target_name}" for appender [{self._name}]'
            self._diagnostics.error(
                message,
                origin=self._name,
                error=UnresolvableTargetError(message, appender_name=self._name, target_name=target_name),
            )
            return

        self._log = log
        self._active_target = target_name
        self._active_layout = layout
        self._started = True

    def stop(self) -> None:
        """Deactivate the appender; later events are ignored."""
        self._deactivate()

    def append(self, event: LogEvent) -> None:
        """Write ``event`` to the platform log.

        Does nothing while the appender is not started or when the event level
        is ``OFF``. Errors from the layout or the platform log propagate.
        """
        log, target_name, layout = self._log, self._active_target, self._active_layout
        if not self._started or log is None or target_name is None or layout is None:
            return
        if event.level is LogLevel.OFF:
            return

        record = StatusRecord(
            status=status_for(event.level),
            target_name=target_name,
            code=event.level.value,
            message=layout.layout(event),
        )
        log.write(record)

    def _deactivate(self) -> None:
        self._started = False
        self._log = None
        self._active_target = None
        self._active_layout = None


__all__ = ["DEFAULT_TARGET_NAME", "STATUS_BY_LEVEL", "PlatformLogAppender", "status_for"]
