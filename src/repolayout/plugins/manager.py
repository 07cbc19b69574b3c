"""Plugin discovery and layout factory collection.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
in the ``repolayout.plugins`` group, plus plugins registered directly
(the built-in Maven 2 layout).
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from repolayout.domain.layout import RepositoryLayoutFactory, factory_name
from repolayout.plugins.hookspecs import PROJECT_NAME, LayoutHookSpec

ENTRY_POINT_GROUP = "repolayout.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and factory collection."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(LayoutHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load plugins published under the ``repolayout.plugins`` entry point group.

        Returns a list of registered plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins, in registration order."""
        return [name for name, _plugin in self._pm.list_name_plugin()]

    def collect_factories(self) -> list[RepositoryLayoutFactory]:
        """Gather layout factories from every plugin, in registration order.

        A plugin whose hook raises or returns something other than a list
        is skipped with a warning; the remaining plugins still contribute.
        """
        factories: list[RepositoryLayoutFactory] = []
        for plugin_name, plugin in self._pm.list_name_plugin():
            hook = getattr(plugin, "register_layout_factories", None)
            if hook is None:
                continue
            try:
                contributed = hook()
            except Exception:
                logger.warning(
                    "Failed to collect layout factories from plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            if contributed is None:
                continue
            if not isinstance(contributed, (list, tuple)):
                logger.warning(
                    "Plugin %s returned non-list layout factory registrations",
                    plugin_name,
                )
                continue
            for factory in contributed:
                if not isinstance(factory, RepositoryLayoutFactory):
                    logger.warning(
                        "Skipping %r from plugin %s: not a layout factory",
                        factory,
                        plugin_name,
                    )
                    continue
                logger.debug(
                    "Collected layout factory %s from plugin %s",
                    factory_name(factory),
                    plugin_name,
                )
                factories.append(factory)
        return factories

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin_name, plugin in self._pm.list_name_plugin():
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any ``@hookimpl``-decorated methods.

        ``HookimplMarker("repolayout")`` sets a ``repolayout_impl`` attribute.
        """
        marker = f"{PROJECT_NAME}_impl"
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, marker, None):
                return True
        return False
