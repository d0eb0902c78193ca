"""Target-name filtering shared by the platform adapters."""

from __future__ import annotations

from collections.abc import Iterable


def normalise_targets(targets: Iterable[str] | None) -> frozenset[str] | None:
    """Return ``targets`` as a frozen set, keeping ``None`` for "accept all"."""
    if targets is None:
        return None
    return frozenset(targets)


def accepts_target(targets: frozenset[str] | None, name: str) -> bool:
    """Return ``True`` when ``name`` is a known target.

    Examples
    --------
    >>> accepts_target(None, "app.core")
    True
    >>> accepts_target(None, "  ")
    False
    >>> accepts_target(frozenset({"app.core"}), "app.ui")
    False
    """
    if not name or not name.strip():
        return False
    return targets is None or name in targets


__all__ = ["accepts_target", "normalise_targets"]
