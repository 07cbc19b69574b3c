"""Subcommand modules for repolayout.

register_commands() uses deferred imports to keep ``repolayout --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from repolayout.commands.factories import factories
    from repolayout.commands.resolve import resolve

    cli.add_command(resolve)
    cli.add_command(factories)
