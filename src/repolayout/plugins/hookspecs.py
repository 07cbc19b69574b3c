"""Pluggy hook specifications for repolayout.

A single setup-time hook lets plugins contribute layout factories.
Results from every plugin are concatenated in registration order, which
is the tie-break order for equal priorities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from repolayout.domain.layout import RepositoryLayoutFactory

PROJECT_NAME = "repolayout"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class LayoutHookSpec:
    """Hook specifications for the repolayout plugin system."""

    @hookspec
    def register_layout_factories(self) -> list[RepositoryLayoutFactory] | None:
        """Return layout factories to add to the registry."""
