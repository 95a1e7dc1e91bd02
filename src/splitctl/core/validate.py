"""Semantic checks that turn an options record into a command payload."""

from __future__ import annotations

from splitctl.core.args import OptionsRecord
from splitctl.errors import EmptyCommandError, EmptyTargetError, InvalidDirectionError, NoTextError
from splitctl.types import NewSplitPayload, SendToSplitPayload, SplitDirection

VALID_DIRECTIONS = tuple(direction.value for direction in SplitDirection)


def validate_new_split(record: OptionsRecord) -> NewSplitPayload:
    """Build a new-split payload, rejecting unknown directions and an empty `-e`."""

    raw_direction = record.get("direction")
    if raw_direction not in VALID_DIRECTIONS:
        raise InvalidDirectionError(str(raw_direction), VALID_DIRECTIONS)

    arguments = record.capture
    if arguments is not None:
        arguments = tuple(arguments)
        if not arguments:
            raise EmptyCommandError()

    return NewSplitPayload(direction=SplitDirection(raw_direction), arguments=arguments)


def validate_send_to_split(record: OptionsRecord) -> SendToSplitPayload:
    """Build a send-to-split payload; the text must be present and non-empty."""

    text = record.capture
    if not text:
        raise NoTextError()

    target = record.get("target")
    if not target:
        raise EmptyTargetError()

    return SendToSplitPayload(target=target, text=text)
