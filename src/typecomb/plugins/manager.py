"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
group ``typecomb.plugins``.
Capabilities: extra update commands and irreducible types.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable

import pluggy

from typecomb.plugins.hookspecs import TypecombHookSpec

PROJECT_NAME = "typecomb"
ENTRY_POINT_GROUP = "typecomb.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and registry contributions."""

    def __init__(self, *, disabled: Iterable[str] = ()) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(TypecombHookSpec)
        for name in disabled:
            self._pm.set_blocked(name)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and apply their registry contributions.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        for plugin in self._pm.get_plugins():
            self._apply_contributions(plugin, self._plugin_name(plugin))
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly.

        Contributions are applied immediately once discovery has run.
        """
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._apply_contributions(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._plugin_name(p) for p in self._pm.get_plugins()]

    def _plugin_name(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning("Failed to instantiate entry-point plugin %s", plugin_name, exc_info=True)
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    def _apply_contributions(self, plugin: object, plugin_name: str) -> None:
        self._register_plugin_commands(plugin, plugin_name)
        self._register_plugin_irreducibles(plugin, plugin_name)

    @staticmethod
    def _register_plugin_commands(plugin: object, plugin_name: str) -> None:
        """Register update commands exposed by a single plugin instance."""
        from typecomb.errors import TypeCombError
        from typecomb.update.commands import register_command

        hook = getattr(plugin, "register_update_commands", None)
        if hook is None:
            return

        try:
            command_map = hook()
        except Exception:
            logger.warning("Failed to collect update commands from plugin %s", plugin_name, exc_info=True)
            return

        if command_map is None:
            return
        if not isinstance(command_map, dict):
            logger.warning("Plugin %s returned non-dict update command registrations", plugin_name)
            return

        for command_name, handler in command_map.items():
            try:
                register_command(command_name, handler)
            except (TypeError, ValueError, TypeCombError):
                logger.warning(
                    "Skipping update command %r from plugin %s",
                    command_name,
                    plugin_name,
                    exc_info=True,
                )

    @staticmethod
    def _register_plugin_irreducibles(plugin: object, plugin_name: str) -> None:
        """Register irreducible types exposed by a single plugin instance."""
        from typecomb.combinators.irreducible import register_irreducible

        hook = getattr(plugin, "register_irreducibles", None)
        if hook is None:
            return

        try:
            types = hook()
        except Exception:
            logger.warning("Failed to collect irreducibles from plugin %s", plugin_name, exc_info=True)
            return

        if types is None:
            return
        if not isinstance(types, (list, tuple)):
            logger.warning("Plugin %s returned non-list irreducible registrations", plugin_name)
            return

        for type_ in types:
            try:
                register_irreducible(type_)
            except (TypeError, ValueError):
                logger.warning(
                    "Skipping irreducible %r from plugin %s",
                    type_,
                    plugin_name,
                    exc_info=True,
                )

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("typecomb")`` sets a ``typecomb_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "typecomb_impl", None):
                return True
        return False
