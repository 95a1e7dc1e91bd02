"""Shared parse, validate, resolve, deliver, report flow for every verb."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger

from splitctl.config import Settings, get_settings
from splitctl.core.args import OptionsRecord, OptionsSchema, parse_options
from splitctl.core.target import resolve_target
from splitctl.delivery import DeliveryClient, Transport
from splitctl.errors import ArgParseError, HelpRequested, ValidationError
from splitctl.framework import build_transport
from splitctl.reporter import (
    report_diagnostics,
    report_help,
    report_outcome,
    report_parse_error,
    report_validation_error,
)
from splitctl.types import CommandPayload, Verb


@dataclass(frozen=True)
class VerbSpec:
    """Everything that differs between the verbs."""

    verb: Verb
    schema: OptionsSchema
    validate: Callable[[OptionsRecord], CommandPayload]
    usage: str
    usage_hint: str


def run_verb(
    spec: VerbSpec,
    argv: Sequence[str],
    *,
    transport: Transport | None = None,
    settings: Settings | None = None,
) -> int:
    """Run one invocation of `spec.verb` and return the process exit code."""

    settings = settings or get_settings()
    try:
        record = parse_options(spec.schema, list(argv), collect_diagnostics=settings.collect_diagnostics)
    except HelpRequested:
        return report_help(spec.usage)
    except ArgParseError as exc:
        return report_parse_error(exc)
    report_diagnostics(record.diagnostics)

    try:
        payload = spec.validate(record)
    except ValidationError as exc:
        logger.debug("command.invalid verb={} field={}", spec.verb, exc.field)
        return report_validation_error(exc, spec.usage_hint)

    target = resolve_target(record.get("class"))
    if transport is None:
        transport = build_transport(settings)
    outcome = DeliveryClient(transport).deliver(target, payload)
    return report_outcome(outcome, spec.verb)
