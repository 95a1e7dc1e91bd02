"""Typed values passed between the pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Verb(StrEnum):
    NEW_SPLIT = "new-split"
    SEND_TO_SPLIT = "send-to-split"


class SplitDirection(StrEnum):
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    UP = "up"
    AUTO = "auto"


@dataclass(frozen=True)
class Detect:
    """Address the sole or currently active instance."""


@dataclass(frozen=True)
class Explicit:
    """Address the instance matching an explicit identity."""

    identity: str


type TargetSelector = Detect | Explicit


@dataclass(frozen=True)
class NewSplitPayload:
    """Open a split, optionally running a command instead of the default shell."""

    direction: SplitDirection
    arguments: tuple[str, ...] | None = None

    @property
    def verb(self) -> Verb:
        return Verb.NEW_SPLIT


@dataclass(frozen=True)
class SendToSplitPayload:
    """Type text into an existing split."""

    target: str
    text: str

    @property
    def verb(self) -> Verb:
        return Verb.SEND_TO_SPLIT


type CommandPayload = NewSplitPayload | SendToSplitPayload


@dataclass(frozen=True)
class Delivered:
    """The transport accepted the command."""


@dataclass(frozen=True)
class DeliveryFailed:
    """The transport was reached but the command did not go through."""

    reason: str | None
    already_reported: bool


@dataclass(frozen=True)
class PlatformUnsupported:
    """No transport can serve the current platform."""


type DeliveryOutcome = Delivered | DeliveryFailed | PlatformUnsupported
