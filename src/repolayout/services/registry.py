"""Layout factory registry — a plain container with no priority logic.

No internal locking: register factories at startup, before resolution
calls run concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from repolayout.domain.errors import InvalidArgumentError
from repolayout.domain.layout import RepositoryLayoutFactory, factory_name

logger = logging.getLogger(__name__)


class LayoutFactoryRegistry:
    """Holds the registered layout factories in registration order."""

    def __init__(self, factories: Iterable[RepositoryLayoutFactory] | None = None) -> None:
        self._factories: list[RepositoryLayoutFactory] = []
        self.set_factories(factories)

    def add_factory(self, factory: RepositoryLayoutFactory | None) -> LayoutFactoryRegistry:
        """Append *factory*. Raises InvalidArgumentError when it is None."""
        if factory is None:
            msg = "layout factory has not been specified"
            raise InvalidArgumentError(msg)
        self._factories.append(factory)
        logger.debug("Registered layout factory: %s", factory_name(factory))
        return self

    def set_factories(
        self, factories: Iterable[RepositoryLayoutFactory] | None
    ) -> LayoutFactoryRegistry:
        """Replace the whole set. ``None`` resets to empty."""
        self._factories = list(factories) if factories is not None else []
        return self

    @property
    def factories(self) -> tuple[RepositoryLayoutFactory, ...]:
        """Snapshot of the registered factories."""
        return tuple(self._factories)

    def __len__(self) -> int:
        return len(self._factories)
