"""The `send-to-split` verb: type text into a split of a running instance."""

from __future__ import annotations

from collections.abc import Sequence

from splitctl.config import Settings
from splitctl.core.args import Flag, OptionsSchema, text_capture
from splitctl.core.validate import validate_send_to_split
from splitctl.delivery import Transport
from splitctl.types import Verb

from .pipeline import VerbSpec, run_verb

USAGE = """\
Usage: splitctl send-to-split [--target=<target>] [--class=<class>] <text...>

Send text or keystrokes to a split in a running terminal instance.

Flags:

  --target=<target>  Split to send to:
                       focused (default)  the currently focused split
                       a number           split by index, e.g. 1, 2
                       an id              split by unique id

  --class=<class>    Target a specific instance by class

Arguments:

  All arguments after the flags are joined with spaces and sent as text.

Examples:

  # Send text to the focused split
  splitctl send-to-split "echo hello"

  # Send to a specific split
  splitctl send-to-split --target=2 "vim file.txt"

  # Send with a trailing newline
  printf 'ls -la\\n' | xargs -0 splitctl send-to-split
"""

SEND_TO_SPLIT = VerbSpec(
    verb=Verb.SEND_TO_SPLIT,
    schema=OptionsSchema(
        verb=Verb.SEND_TO_SPLIT,
        flags=(
            Flag("target", default="focused"),
            Flag("class"),
        ),
        hook=text_capture("--"),
    ),
    validate=validate_send_to_split,
    usage=USAGE,
    usage_hint="splitctl send-to-split [--target=<target>] <text>",
)


def run_send_to_split(
    argv: Sequence[str],
    *,
    transport: Transport | None = None,
    settings: Settings | None = None,
) -> int:
    return run_verb(SEND_TO_SPLIT, argv, transport=transport, settings=settings)
