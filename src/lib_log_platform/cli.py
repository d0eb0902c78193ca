"""Click command-line interface for lib_log_platform.

Purpose
-------
Expose the metadata banner and a demo that pushes one event per severity
through a :class:`PlatformLogAppender` onto the Rich console platform, so
operators can check level mapping and layouts from a shell.

Contents
--------
* :func:`cli` - root group with ``--traceback`` and ``--use-dotenv`` toggles.
* :func:`cli_info`, :func:`cli_logdemo` - subcommands.
* :func:`main` - entry point running the group through ``lib_cli_exit_tools``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from .adapters import LAYOUT_PRESETS, RichConsolePlatform, TemplateLayout
from .application import PlatformLogAppender, status_for
from .domain import LogEvent, LogLevel
from .runtime import summary_info

CLICK_CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before running (default: ${log_config.DOTENV_ENV_VAR})",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool | None) -> None:
    """Root command storing global flags."""

    if log_config.dotenv_requested(use_dotenv):
        log_config.enable_dotenv()
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--target", default=None, help="Target name the records are written to")
@click.option(
    "--preset",
    type=click.Choice(sorted(LAYOUT_PRESETS), case_sensitive=False),
    default="short",
    show_default=True,
    help="Layout preset used to render messages",
)
@click.option("--template", default=None, help="Custom str.format layout template (overrides --preset)")
def cli_logdemo(target: str | None, preset: str, template: str | None) -> None:
    """Emit one event per severity and show the resulting platform status."""

    layout = TemplateLayout(template) if template is not None else TemplateLayout.from_preset(preset)
    appender = PlatformLogAppender(RichConsolePlatform(), name="logdemo", layout=layout, target_name=target)
    appender.start()
    for entry in appender.diagnostics.infos:
        click.echo(entry.message)
    if not appender.is_started:
        raise click.ClickException("; ".join(entry.message for entry in appender.diagnostics.errors))

    emitted = 0
    for level in LogLevel:
        appender.append(
            LogEvent(
                logger_name="lib_log_platform.logdemo",
                level=level,
                message=f"{level.name} maps to {status_for(level).name}",
                timestamp=datetime.now(timezone.utc),
            )
        )
        if level is not LogLevel.OFF:
            emitted += 1
    click.echo(f"emitted {emitted} records to {appender.target_name}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code, restoring traceback preferences."""

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
