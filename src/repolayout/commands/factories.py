"""Command: list layout factories in the order they would be tried."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from repolayout.commands._base import LayoutCommand

if TYPE_CHECKING:
    from repolayout.commands._context import AppContext


@click.command(
    cls=LayoutCommand,
    examples="""\
  repolayout factories
  repolayout --json factories
  REPOLAYOUT_PRIORITY__IMPLICIT=true repolayout factories""",
)
@click.pass_obj
def factories(app: AppContext) -> None:
    """List registered layout factories with their effective priority."""
    app.emit(app.layout_service().list_factories())
