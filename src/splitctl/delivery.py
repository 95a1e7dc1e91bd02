"""Command delivery client.

PUBLIC API:
  - Transport: Protocol every transport satisfies
  - DeliveryClient: Single-attempt delivery with outcome classification
"""

from __future__ import annotations

from typing import Protocol

from loguru import logger

from splitctl.errors import DeliveryReportedError
from splitctl.types import (
    CommandPayload,
    Delivered,
    DeliveryFailed,
    DeliveryOutcome,
    PlatformUnsupported,
    TargetSelector,
    Verb,
)


class Transport(Protocol):
    """Reach a running instance and hand it one command.

    Returns False when no transport exists for this platform.
    """

    def deliver(self, target: TargetSelector, verb: Verb, payload: CommandPayload) -> bool: ...


class DeliveryClient:
    """Send one payload through a transport and classify what happened.

    There is exactly one transport call per `deliver`. A retry could repeat a
    side effect in the running instance, such as typing the same text twice.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def deliver(self, target: TargetSelector, payload: CommandPayload) -> DeliveryOutcome:
        verb = payload.verb
        logger.debug("delivery.attempt verb={} target={}", verb, target)
        try:
            handled = self._transport.deliver(target, verb, payload)
        except DeliveryReportedError as exc:
            logger.debug("delivery.result verb={} outcome=failed reported=true", verb)
            return DeliveryFailed(reason=str(exc) or None, already_reported=True)
        except Exception as exc:
            logger.debug("delivery.result verb={} outcome=failed error={}", verb, type(exc).__name__)
            return DeliveryFailed(reason=str(exc) or type(exc).__name__, already_reported=False)

        if not handled:
            logger.debug("delivery.result verb={} outcome=unsupported", verb)
            return PlatformUnsupported()
        logger.debug("delivery.result verb={} outcome=delivered", verb)
        return Delivered()
