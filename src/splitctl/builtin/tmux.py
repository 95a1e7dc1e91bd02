"""Builtin transport that drives a running tmux server.

`--class` selects the tmux server socket (`tmux -L <class>`). Without it the
default server is used, which is the one the caller runs inside when `$TMUX`
is set.
"""

from __future__ import annotations

import shutil
import subprocess

import typer
from loguru import logger

from splitctl.errors import DeliveryReportedError
from splitctl.hookspecs import hookimpl
from splitctl.types import (
    CommandPayload,
    Explicit,
    NewSplitPayload,
    SendToSplitPayload,
    SplitDirection,
    TargetSelector,
    Verb,
)

_SPLIT_FLAGS: dict[SplitDirection, list[str]] = {
    SplitDirection.RIGHT: ["-h"],
    SplitDirection.LEFT: ["-h", "-b"],
    SplitDirection.DOWN: ["-v"],
    SplitDirection.UP: ["-v", "-b"],
}


class TmuxTransport:
    """Deliver split commands with the tmux CLI."""

    def __init__(self, binary: str = "tmux") -> None:
        self.binary = binary

    @hookimpl
    def deliver_command(self, target: TargetSelector, verb: Verb, payload: CommandPayload) -> bool | None:
        executable = shutil.which(self.binary)
        if executable is None:
            logger.debug("tmux.unavailable binary={}", self.binary)
            return None

        base = [executable]
        if isinstance(target, Explicit):
            base += ["-L", target.identity]

        if isinstance(payload, NewSplitPayload):
            args = self._split_window_args(base, payload)
        elif isinstance(payload, SendToSplitPayload):
            args = ["send-keys", "-l", *_pane_target(payload.target), "--", payload.text]
        else:
            logger.debug("tmux.unsupported_verb verb={}", verb)
            return None

        self._run(base, args)
        return True

    def _split_window_args(self, base: list[str], payload: NewSplitPayload) -> list[str]:
        if payload.direction is SplitDirection.AUTO:
            flags = _SPLIT_FLAGS[self._auto_direction(base)]
        else:
            flags = _SPLIT_FLAGS[payload.direction]
        args = ["split-window", *flags]
        if payload.arguments:
            args += ["--", *payload.arguments]
        return args

    def _auto_direction(self, base: list[str]) -> SplitDirection:
        """Split along the longer side of the current pane.

        Cells are roughly twice as tall as they are wide, so a pane is wider
        than tall when its width exceeds twice its height.
        """

        code, stdout, _ = run_tmux(base, ["display-message", "-p", "#{pane_width} #{pane_height}"])
        if code != 0:
            return SplitDirection.DOWN
        try:
            width, height = (int(part) for part in stdout.split())
        except ValueError:
            return SplitDirection.DOWN
        return SplitDirection.RIGHT if width > height * 2 else SplitDirection.DOWN

    def _run(self, base: list[str], args: list[str]) -> None:
        code, _, stderr = run_tmux(base, args)
        if code == 0:
            return
        detail = stderr.strip() or f"exit status {code}"
        typer.echo(f"tmux: {detail}", err=True)
        raise DeliveryReportedError(detail)


def run_tmux(base: list[str], args: list[str]) -> tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr)."""
    logger.debug("tmux.run args={}", args)
    result = subprocess.run([*base, *args], capture_output=True, text=True)  # noqa: S603
    return result.returncode, result.stdout, result.stderr


def _pane_target(target: str) -> list[str]:
    if target == "focused":
        return []
    if target.isdigit():
        return ["-t", f":.{target}"]
    return ["-t", target]
