"""splitctl command-line entry points.

The verbs parse their own tokens, so Typer passes everything after the verb
name through untouched via `ctx.args`.
"""

from __future__ import annotations

import sys

import typer

from splitctl.commands import run_new_split, run_send_to_split
from splitctl.config import get_settings
from splitctl.framework import create_plugin_manager, hook_report
from splitctl.logging_utils import configure_logging

app = typer.Typer(
    name="splitctl",
    help="Send split commands to a running terminal instance.",
    add_completion=False,
    no_args_is_help=True,
)

_PASSTHROUGH = {"allow_extra_args": True, "ignore_unknown_options": True}


@app.command("new-split", context_settings=_PASSTHROUGH, add_help_option=False)
def new_split(ctx: typer.Context) -> None:
    """Open a new split. Run `splitctl new-split --help` for flags."""

    settings = get_settings()
    configure_logging(settings.log_level, profile=settings.log_format)
    code = run_new_split(ctx.args, settings=settings)
    raise typer.Exit(code)


@app.command("send-to-split", context_settings=_PASSTHROUGH, add_help_option=False)
def send_to_split(ctx: typer.Context) -> None:
    """Send text to a split. Run `splitctl send-to-split --help` for flags."""

    settings = get_settings()
    configure_logging(settings.log_level, profile=settings.log_format)
    code = run_send_to_split(ctx.args, settings=settings)
    raise typer.Exit(code)


@app.command("transports")
def list_transports() -> None:
    """Show transport implementations in the order they are tried."""

    settings = get_settings()
    configure_logging(settings.log_level, profile=settings.log_format)
    report = hook_report(create_plugin_manager(settings))
    plugins = report.get("deliver_command", [])
    if not plugins:
        typer.echo("(no transports)")
        return
    for plugin_name in plugins:
        typer.echo(plugin_name)


def new_split_main() -> None:
    """Console script for a standalone `new-split`."""

    settings = get_settings()
    configure_logging(settings.log_level, profile=settings.log_format)
    sys.exit(run_new_split(sys.argv[1:], settings=settings))


def send_to_split_main() -> None:
    """Console script for a standalone `send-to-split`."""

    settings = get_settings()
    configure_logging(settings.log_level, profile=settings.log_format)
    sys.exit(run_send_to_split(sys.argv[1:], settings=settings))
