"""Pluggy hook namespace and transport hook specifications."""

from __future__ import annotations

import pluggy

from splitctl.types import CommandPayload, TargetSelector, Verb

SPLITCTL_HOOK_NAMESPACE = "splitctl"
hookspec = pluggy.HookspecMarker(SPLITCTL_HOOK_NAMESPACE)
hookimpl = pluggy.HookimplMarker(SPLITCTL_HOOK_NAMESPACE)


class SplitctlHookSpecs:
    """Hook contract for splitctl transports."""

    @hookspec(firstresult=True)
    def deliver_command(self, target: TargetSelector, verb: Verb, payload: CommandPayload) -> bool | None:
        """Deliver one command to a running instance.

        Return None to decline (this transport cannot serve the current
        platform), True once the command was delivered. Raise
        `DeliveryReportedError` after printing your own diagnostic; any other
        exception is reported by splitctl.
        """
