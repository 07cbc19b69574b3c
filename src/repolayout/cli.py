"""Root CLI group for repolayout with global flags and command registration."""

from __future__ import annotations

import click

from repolayout import __version__
from repolayout.commands import register_commands
from repolayout.commands._context import AppContext
from repolayout.config.settings import LayoutSettings
from repolayout.plugins.manager import PluginManager


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="repolayout")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """repolayout — repository layout selection."""
    settings = LayoutSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    # Embedders (and tests) may pass a preconfigured PluginManager as obj.
    plugin_manager = ctx.obj if isinstance(ctx.obj, PluginManager) else None
    ctx.obj = AppContext(settings, plugin_manager=plugin_manager)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
