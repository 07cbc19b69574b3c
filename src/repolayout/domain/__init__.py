"""Domain layer — repository types, factory protocol, candidate ordering.

This layer depends only on stdlib and pydantic (plus the NoDecode marker
from pydantic-settings).
It must never import from services, plugins, commands, or config.
"""
