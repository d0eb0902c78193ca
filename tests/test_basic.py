"""Metadata banner checks backing the ``info`` command."""

from __future__ import annotations

from lib_log_platform import __init__conf__, summary_info


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()

    assert summary.startswith("Info for lib_log_platform:")
    assert f"version       = {__init__conf__.version}" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()
