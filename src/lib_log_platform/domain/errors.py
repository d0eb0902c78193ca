"""Configuration errors detected while starting an appender.

These are recorded on the diagnostic log rather than raised, so a broken
configuration disables forwarding without taking the host down.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base class for problems found when validating appender configuration."""

    def __init__(self, message: str, *, appender_name: str) -> None:
        super().__init__(message)
        self.appender_name = appender_name


class MissingLayoutError(ConfigurationError):
    """No layout, or a layout without a template, was configured."""


class UnresolvableTargetError(ConfigurationError):
    """The target name did not resolve to a platform log."""

    def __init__(self, message: str, *, appender_name: str, target_name: str) -> None:
        super().__init__(message, appender_name=appender_name)
        self.target_name = target_name


__all__ = ["ConfigurationError", "MissingLayoutError", "UnresolvableTargetError"]
