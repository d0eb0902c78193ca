from __future__ import annotations

import pytest

from lib_log_platform.adapters.platform.journald import JournaldPlatform
from lib_log_platform.domain.status import PlatformStatus, StatusRecord
from tests.os_markers import LINUX_ONLY, OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_journald_platform_emits_fields() -> None:
    recorded: dict[str, object] = {}

    def _sender(**fields) -> None:
        recorded.update(fields)

    log = JournaldPlatform(sender=_sender).lookup_target("app.core")
    assert log is not None
    log.write(StatusRecord(PlatformStatus.ERROR, "app.core", 40, "boom"))

    assert recorded == {
        "MESSAGE": "boom",
        "PRIORITY": 3,
        "SYSLOG_IDENTIFIER": "app.core",
        "PLATFORM_STATUS": "ERROR",
        "PLATFORM_CODE": 40,
    }


@pytest.mark.parametrize(
    "status, priority",
    [
        (PlatformStatus.ERROR, 3),
        (PlatformStatus.WARNING, 4),
        (PlatformStatus.INFO, 6),
        (PlatformStatus.OK, 7),
        (PlatformStatus.CANCEL, 7),
    ],
)
def test_journald_platform_translates_status(status: PlatformStatus, priority: int) -> None:
    recorded: dict[str, object] = {}
    log = JournaldPlatform(sender=lambda **fields: recorded.update(fields)).lookup_target("app")
    assert log is not None

    log.write(StatusRecord(status, "app", 0, "msg"))

    assert recorded["PRIORITY"] == priority


def test_journald_platform_honours_target_allowlist() -> None:
    platform = JournaldPlatform(sender=lambda **fields: None, targets=["app.core"])

    assert platform.lookup_target("app.core") is not None
    assert platform.lookup_target("app.ui") is None
    assert platform.lookup_target("") is None


@LINUX_ONLY
def test_journald_platform_with_systemd(monkeypatch: pytest.MonkeyPatch) -> None:
    journal = pytest.importorskip("systemd.journal")
    captured: dict[str, object] = {}

    def fake_send(**fields) -> None:
        captured.update(fields)

    monkeypatch.setattr(journal, "send", fake_send)

    log = JournaldPlatform().lookup_target("app.core")
    assert log is not None
    log.write(StatusRecord(PlatformStatus.INFO, "app.core", 20, "ready"))

    assert captured["MESSAGE"] == "ready"
    assert captured["PRIORITY"] == 6
