"""Template layout rendering events with ``str.format`` placeholders.

Purpose
-------
Provide the default :class:`LayoutPort` implementation. Templates reference
the placeholders produced by :func:`build_format_payload`; named presets cover
the common shapes.

Contents
--------
* :data:`LAYOUT_PRESETS` - named templates.
* :class:`TemplateLayout` - the layout adapter.
"""

from __future__ import annotations

from typing import Mapping

from lib_log_platform.application.ports.layout import LayoutPort
from lib_log_platform.domain.events import LogEvent

from ._formatting import build_format_payload

LAYOUT_PRESETS: Mapping[str, str] = {
    "full": "{timestamp} {level_code} {logger_name} [{thread_name}] {function}:{line} - {message}{extra_fields}",
    "short": "{hh}:{mm}:{ss}|{level_code}|{logger_name}: {message}",
    "short_loc": "{hh}:{mm}:{ss}|{level_code}|{logger_name}:{function}:{line}: {message}",
    "message": "{message}",
}


class TemplateLayout(LayoutPort):
    """Render events with a ``str.format`` template."""

    def __init__(self, template: str | None = None) -> None:
        self._template = template

    @classmethod
    def from_preset(cls, preset: str) -> "TemplateLayout":
        """Return a layout using the named preset.

        Examples
        --------
        >>> TemplateLayout.from_preset("message").template
        '{message}'
        """
        key = preset.strip().lower()
        try:
            return cls(LAYOUT_PRESETS[key])
        except KeyError as exc:
            raise ValueError(f"Unknown layout preset: {preset!r}") from exc

    @property
    def template(self) -> str | None:
        return self._template

    def layout(self, event: LogEvent) -> str:
        """Render ``event`` with the configured template.

        Raises
        ------
        ValueError
            When no template is set or it references an unknown placeholder.
        """
        if not self._template:
            raise ValueError("TemplateLayout has no template")
        payload = build_format_payload(event)
        try:
            return self._template.format(**payload)
        except (KeyError, IndexError, AttributeError) as exc:
            raise ValueError(f"Unknown placeholder in layout template {self._template!r}: {exc}") from exc

    def __repr__(self) -> str:
        return f"TemplateLayout(template={self._template!r})"


__all__ = ["LAYOUT_PRESETS", "TemplateLayout"]
