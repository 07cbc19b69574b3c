"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, repolayout.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from repolayout.domain.repository import PriorityConfig

__all__ = ["PluginsConfig", "PriorityConfig"]


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    builtins: bool = True
    entry_points: bool = True
