"""Target resolution - turn an optional identity into a target selector."""

from __future__ import annotations

from splitctl.types import Detect, Explicit, TargetSelector

__all__ = ["resolve_target"]


def resolve_target(identity: str | None) -> TargetSelector:
    """Resolve `--class` to a target selector.

    The identity is used verbatim. Whether an instance with that identity
    exists is only known once the transport tries to reach it.
    """

    if not identity:
        return Detect()
    return Explicit(identity)
