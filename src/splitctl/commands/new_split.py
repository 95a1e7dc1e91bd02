"""The `new-split` verb: open a split in a running instance."""

from __future__ import annotations

from collections.abc import Sequence

from splitctl.config import Settings
from splitctl.core.args import Flag, OptionsSchema, exec_capture
from splitctl.core.validate import validate_new_split
from splitctl.delivery import Transport
from splitctl.types import SplitDirection, Verb

from .pipeline import VerbSpec, run_verb

USAGE = """\
Usage: splitctl new-split [--direction=<dir>] [--class=<class>] [-e <command...>]

Open a new split in a running terminal instance.

Flags:

  --direction=<dir>  Split direction: right, down, left, up, or auto
                     (default: auto)

  --class=<class>    Target a specific instance by class

  -e                 Everything after this is run inside the new split
                     instead of the default shell

Examples:

  # Create a split to the right with the default shell
  splitctl new-split --direction=right

  # Create a split and run vim
  splitctl new-split --direction=right -e vim file.txt
"""

NEW_SPLIT = VerbSpec(
    verb=Verb.NEW_SPLIT,
    schema=OptionsSchema(
        verb=Verb.NEW_SPLIT,
        flags=(
            Flag("direction", default=SplitDirection.AUTO.value),
            Flag("class"),
        ),
        hook=exec_capture("-e"),
    ),
    validate=validate_new_split,
    usage=USAGE,
    usage_hint="splitctl new-split [--direction=<dir>] [--class=<class>] [-e <command...>]",
)


def run_new_split(
    argv: Sequence[str],
    *,
    transport: Transport | None = None,
    settings: Settings | None = None,
) -> int:
    return run_verb(NEW_SPLIT, argv, transport=transport, settings=settings)
