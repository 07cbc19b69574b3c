"""Explicit wiring: plugins -> registry -> resolver.

Replaces service location. The ``[plugins]`` section decides whether the
built-in Maven 2 layout and entry-point plugins participate; built-ins
register first, so they win priority ties.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from repolayout.plugins.manager import PluginManager
from repolayout.services.registry import LayoutFactoryRegistry
from repolayout.services.resolver import RepositoryLayoutResolver

if TYPE_CHECKING:
    from repolayout.config.settings import LayoutSettings

logger = logging.getLogger(__name__)


def build_resolver(
    settings: LayoutSettings,
    plugin_manager: PluginManager | None = None,
) -> RepositoryLayoutResolver:
    """Build a resolver whose registry holds every collected layout factory."""
    pm = plugin_manager or PluginManager()
    if settings.plugins.builtins and "maven2" not in pm.list_plugin_names():
        from repolayout.plugins.builtins.maven2 import Maven2LayoutPlugin

        pm.register_plugin(Maven2LayoutPlugin(), name="maven2")
    if settings.plugins.entry_points:
        pm.discover_and_load()
    registry = LayoutFactoryRegistry(pm.collect_factories())
    logger.debug("Layout factory registry built with %d factories", len(registry))
    return RepositoryLayoutResolver(registry)
