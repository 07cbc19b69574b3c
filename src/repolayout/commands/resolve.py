"""Command: pick a repository layout for a remote repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from repolayout.commands._base import LayoutCommand
from repolayout.domain.repository import DEFAULT_CONTENT_TYPE

if TYPE_CHECKING:
    from repolayout.commands._context import AppContext


@click.command(
    cls=LayoutCommand,
    examples="""\
  repolayout resolve https://repo.maven.apache.org/maven2
  repolayout resolve https://example.com/p2 --type p2
  repolayout resolve https://repo.example.com/releases --artifact org.example:demo:1.0
  repolayout --json resolve https://repo.example.com/releases --id central""",
)
@click.argument("url")
@click.option(
    "--type",
    "content_type",
    default=DEFAULT_CONTENT_TYPE,
    show_default=True,
    help="Repository content type.",
)
@click.option("--id", "repo_id", default="", help="Repository identifier.")
@click.option(
    "--artifact",
    default=None,
    help="Artifact coordinates <groupId>:<artifactId>[:<ext>[:<classifier>]]:<version>.",
)
@click.pass_obj
def resolve(
    app: AppContext,
    url: str,
    content_type: str,
    repo_id: str,
    artifact: str | None,
) -> None:
    """Select the layout used to access URL."""
    app.emit(
        app.layout_service().resolve(
            url,
            content_type=content_type,
            repo_id=repo_id,
            artifact=artifact,
        )
    )
