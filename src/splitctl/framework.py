"""Transport plugin manager."""

from __future__ import annotations

import pluggy
from loguru import logger

from splitctl.builtin.tmux import TmuxTransport
from splitctl.config import Settings
from splitctl.hookspecs import SPLITCTL_HOOK_NAMESPACE, SplitctlHookSpecs
from splitctl.types import CommandPayload, TargetSelector, Verb

BUILTIN_TMUX_PLUGIN = "builtin:tmux"


def create_plugin_manager(settings: Settings, *, load_entrypoints: bool = True) -> pluggy.PluginManager:
    """Register the builtin transport and any installed transport plugins.

    Plugins are called last-registered first, so entry-point transports take
    precedence over the builtin one.
    """

    plugin_manager = pluggy.PluginManager(SPLITCTL_HOOK_NAMESPACE)
    plugin_manager.add_hookspecs(SplitctlHookSpecs)
    if settings.builtin_transport:
        plugin_manager.register(TmuxTransport(settings.tmux_binary), name=BUILTIN_TMUX_PLUGIN)
    if load_entrypoints:
        loaded = plugin_manager.load_setuptools_entrypoints(SPLITCTL_HOOK_NAMESPACE)
        logger.debug("transport.entrypoints_loaded count={}", loaded)
    return plugin_manager


def hook_report(plugin_manager: pluggy.PluginManager) -> dict[str, list[str]]:
    """Build a hook->plugins mapping for diagnostics."""

    report: dict[str, list[str]] = {}
    for hook_name, hook_caller in sorted(plugin_manager.hook.__dict__.items()):
        if hook_name.startswith("_") or not hasattr(hook_caller, "get_hookimpls"):
            continue
        plugin_names = [impl.plugin_name for impl in reversed(hook_caller.get_hookimpls())]
        if plugin_names:
            report[hook_name] = plugin_names
    return report


class PluginTransport:
    """Transport backed by the `deliver_command` hook."""

    def __init__(self, plugin_manager: pluggy.PluginManager) -> None:
        self._plugin_manager = plugin_manager

    def deliver(self, target: TargetSelector, verb: Verb, payload: CommandPayload) -> bool:
        handled = self._plugin_manager.hook.deliver_command(target=target, verb=verb, payload=payload)
        return bool(handled)


def build_transport(settings: Settings) -> PluginTransport:
    return PluginTransport(create_plugin_manager(settings))
