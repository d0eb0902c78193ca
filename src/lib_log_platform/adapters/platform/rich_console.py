"""Rich-powered platform printing status records to a console.

Purpose
-------
Stand in for a host error log when running from a terminal: each target
resolves to a view onto one shared Rich :class:`Console` and records are
printed with a style per :class:`PlatformStatus`.

Contents
--------
* :data:`_STYLE_MAP` - default status-to-style mapping.
* :class:`RichConsolePlatform` and its per-target :class:`RichConsoleLog`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Mapping

from rich.console import Console

from lib_log_platform.application.ports.platform import PlatformLogPort, PlatformPort
from lib_log_platform.domain.status import PlatformStatus, StatusRecord

from ._targets import accepts_target, normalise_targets

_STYLE_MAP: Mapping[PlatformStatus, str] = {
    PlatformStatus.OK: "dim",
    PlatformStatus.INFO: "cyan",
    PlatformStatus.WARNING: "yellow",
    PlatformStatus.ERROR: "bold red",
    PlatformStatus.CANCEL: "magenta",
}

#: Default Rich styles keyed by :class:`PlatformStatus`.


class RichConsoleLog(PlatformLogPort):
    """Console view bound to a single target."""

    def __init__(self, console: Console, target_name: str, styles: Mapping[PlatformStatus, str], *, colorize: bool) -> None:
        self._console = console
        self._target_name = target_name
        self._styles = styles
        self._colorize = colorize

    @property
    def target_name(self) -> str:
        return self._target_name

    def write(self, record: StatusRecord) -> None:
        """Print ``record`` on the console.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> log = RichConsoleLog(console, "app", _STYLE_MAP, colorize=False)
        >>> log.write(StatusRecord(PlatformStatus.INFO, "app", 20, "ready"))
        >>> console.export_text().strip()
        '[app]    INFO ready'
        """
        style = self._styles.get(record.status, "") if self._colorize else ""
        line = self._format_line(record)
        self._console.print(line, style=style, highlight=False, markup=False, soft_wrap=True)

    @staticmethod
    def _format_line(record: StatusRecord) -> str:
        return f"[{record.target_name}] {record.status.name:>7} {record.message}"


class RichConsolePlatform(PlatformPort):
    """Platform handing out console logs for accepted targets."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        targets: Iterable[str] | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[PlatformStatus | str, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color
        self._targets = normalise_targets(targets)
        merged = dict(_STYLE_MAP)
        if styles:
            for key, value in styles.items():
                status = PlatformStatus.from_name(key) if isinstance(key, str) else key
                merged[status] = value
        self._style_map = merged

    @property
    def console(self) -> Console:
        return self._console

    def lookup_target(self, name: str) -> RichConsoleLog | None:
        if not accepts_target(self._targets, name):
            return None
        return RichConsoleLog(self._console, name, self._style_map, colorize=not self._no_color)


__all__ = ["RichConsoleLog", "RichConsolePlatform"]
