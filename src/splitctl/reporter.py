"""Map pipeline results to stderr diagnostics and exit codes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

import typer

from splitctl.core.args import Diagnostic
from splitctl.errors import ArgParseError, ValidationError
from splitctl.types import Delivered, DeliveryFailed, DeliveryOutcome, PlatformUnsupported, Verb

EXIT_OK = 0
EXIT_FAILURE = 1


def report_help(usage: str) -> int:
    typer.echo(usage)
    return EXIT_OK


def report_diagnostics(diagnostics: Iterable[Diagnostic]) -> None:
    for diagnostic in diagnostics:
        typer.echo(f"warning: {diagnostic.token}: {diagnostic.message}", err=True)


def report_parse_error(error: ArgParseError) -> int:
    typer.echo(f"Error parsing args: {error}", err=True)
    return EXIT_FAILURE


def report_validation_error(error: ValidationError, usage_hint: str) -> int:
    typer.echo(str(error), err=True)
    typer.echo(f"Usage: {usage_hint}", err=True)
    return EXIT_FAILURE


def report_outcome(outcome: DeliveryOutcome, verb: Verb) -> int:
    """Print at most one line for a delivery outcome and return the exit code."""

    if isinstance(outcome, Delivered):
        return EXIT_OK
    if isinstance(outcome, DeliveryFailed):
        if not outcome.already_reported:
            typer.echo(f"Sending the IPC failed: {outcome.reason}", err=True)
        return EXIT_FAILURE
    if isinstance(outcome, PlatformUnsupported):
        typer.echo(f"+{verb} is not supported on this platform.", err=True)
        return EXIT_FAILURE
    assert_never(outcome)
