"""AppContext — shared Click context for all commands.

Created once by the root CLI group. Builds the plugin manager, registry,
and resolver lazily so ``--help`` and ``--version`` never load plugins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from repolayout.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from repolayout.config.settings import LayoutSettings
    from repolayout.plugins.manager import PluginManager
    from repolayout.services.layout import LayoutService
    from repolayout.services.resolver import RepositoryLayoutResolver
    from repolayout.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(
        self,
        settings: LayoutSettings,
        plugin_manager: PluginManager | None = None,
    ) -> None:
        self.settings = settings
        self._plugin_manager = plugin_manager
        self._resolver: RepositoryLayoutResolver | None = None

        from repolayout.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugin_manager(self) -> PluginManager:
        if self._plugin_manager is None:
            from repolayout.plugins.manager import PluginManager

            self._plugin_manager = PluginManager()
        return self._plugin_manager

    @property
    def resolver(self) -> RepositoryLayoutResolver:
        """The resolver (built on first access from configured plugins)."""
        if self._resolver is None:
            from repolayout.services.wiring import build_resolver

            self._resolver = build_resolver(self.settings, self.plugin_manager)
        return self._resolver

    def layout_service(self) -> LayoutService:
        from repolayout.services.layout import LayoutService

        return LayoutService(self.resolver, self.settings.session())

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr (human mode).
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(result.exit_code)
