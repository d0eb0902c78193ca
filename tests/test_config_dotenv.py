from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_platform import cli as cli_module
from lib_log_platform import config as log_config
from lib_log_platform.domain.levels import LogLevel


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> Iterator[None]:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values found in a parent directory."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_PLATFORM_TARGET=dotenv.target\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LOG_PLATFORM_TARGET", raising=False)

    loaded = log_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["LOG_PLATFORM_TARGET"] == "dotenv.target"

    os.environ.pop("LOG_PLATFORM_TARGET", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LOG_PLATFORM_TARGET=dotenv.target\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("LOG_PLATFORM_TARGET", "real.target")

    result = log_config.enable_dotenv()

    assert result is not None
    assert os.environ["LOG_PLATFORM_TARGET"] == "real.target"


def test_enable_dotenv_with_explicit_missing_path(tmp_path: Path) -> None:
    assert log_config.enable_dotenv(tmp_path / "absent.env") is None


def test_enable_dotenv_only_loads_once(tmp_path: Path) -> None:
    first = tmp_path / "first.env"
    first.write_text("LOG_PLATFORM_NAME=first\n")
    second = tmp_path / "second.env"
    second.write_text("LOG_PLATFORM_PRESET=full\n")

    assert log_config.enable_dotenv(first) == first.resolve()
    assert log_config.enable_dotenv(second) == first.resolve()
    assert "LOG_PLATFORM_PRESET" not in os.environ

    os.environ.pop("LOG_PLATFORM_NAME", None)


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()
    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["info"], env={log_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env={log_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert calls == []


def test_resolve_settings_defaults() -> None:
    settings = log_config.resolve_settings()

    assert settings.name == "platform"
    assert settings.target_name is None
    assert settings.template is None
    assert settings.preset == log_config.DEFAULT_PRESET
    assert settings.level is LogLevel.TRACE
    assert settings.logger_name is None


def test_resolve_settings_environment_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_PLATFORM_PRESET", "full")
    monkeypatch.setenv("LOG_PLATFORM_LEVEL", "warning")
    monkeypatch.setenv("LOG_PLATFORM_LOGGER", "app")

    settings = log_config.resolve_settings(preset="message", level="debug", logger_name="other")

    assert settings.preset == "full"
    assert settings.level is LogLevel.WARN
    assert settings.logger_name == "app"


def test_resolve_settings_keeps_template_over_preset() -> None:
    settings = log_config.resolve_settings(template="{message}")

    assert settings.template == "{message}"
    assert settings.preset is None


def test_resolve_settings_rejects_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_PLATFORM_LEVEL", "loud")

    with pytest.raises(ValueError, match="Unknown log level"):
        log_config.resolve_settings()
