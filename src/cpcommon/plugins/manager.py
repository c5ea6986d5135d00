"""Plugin discovery and factory contribution.

Plugins are found through the ``cpcommon.plugins`` entry-point group or
registered directly. Each may implement ``register_enum_factories`` to add
short factory names to :data:`cpcommon.enums.resolution.FACTORY_REGISTRY`.
A misbehaving plugin is logged and skipped, never fatal.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterator

import pluggy

from cpcommon.plugins.hookspecs import PROJECT_NAME, CommonHookSpec

ENTRY_POINT_GROUP = "cpcommon.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Thin wrapper around :class:`pluggy.PluginManager` for cp-common hooks."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(CommonHookSpec)
        self._loaded = False

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    @property
    def is_loaded(self) -> bool:
        """True once discover_and_load() has run."""
        return self._loaded

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and collect every plugin's factories.

        Returns the names of all registered plugins.
        """
        found = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Loaded %d entry-point plugin(s) from %s", found, ENTRY_POINT_GROUP)
        self._instantiate_class_plugins()
        for name, plugin in self._named_plugins():
            _collect_factories(name, plugin)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register *plugin*; after discovery its factories are collected at once."""
        plugin_name = name or type(plugin).__name__
        self._pm.register(plugin, name=plugin_name)
        logger.debug("Registered plugin: %s", plugin_name)
        if self._loaded:
            _collect_factories(plugin_name, plugin)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [name for name, _ in self._named_plugins()]

    def _named_plugins(self) -> Iterator[tuple[str, object]]:
        for plugin in list(self._pm.get_plugins()):
            yield self._pm.get_name(plugin) or type(plugin).__name__, plugin

    def _instantiate_class_plugins(self) -> None:
        """Swap plugin classes (as entry points may name them) for instances."""
        for name, plugin in self._named_plugins():
            if not inspect.isclass(plugin):
                continue
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Could not instantiate plugin class %s", name, exc_info=True)
                continue
            self._pm.register(instance, name=name)


def _collect_factories(plugin_name: str, plugin: object) -> None:
    """Register the factories *plugin* returns from ``register_enum_factories``."""
    from cpcommon.enums.resolution import register_factory

    hook = getattr(plugin, "register_enum_factories", None)
    if hook is None:
        return

    try:
        contributed = hook()
    except Exception:
        logger.warning(
            "Failed to collect enum factories from plugin %s", plugin_name, exc_info=True
        )
        return

    if contributed is None:
        return
    if not isinstance(contributed, dict):
        logger.warning("Plugin %s returned non-dict factory registrations", plugin_name)
        return

    for factory_name, factory_cls in contributed.items():
        try:
            register_factory(factory_name, factory_cls)
        except (TypeError, ValueError):
            logger.warning(
                "Skipping factory registration %r from plugin %s",
                factory_name,
                plugin_name,
                exc_info=True,
            )
        else:
            logger.debug("Plugin %s registered factory %r", plugin_name, factory_name)
