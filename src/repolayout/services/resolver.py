"""RepositoryLayoutResolver — tries candidates in priority order.

Each call snapshots the registry, orders the factories against the
session's PriorityConfig, and returns the first layout produced.
ProviderRejectedError moves on to the next candidate; any other exception
propagates immediately.

INVARIANT: At most one factory produces a layout per call.
INVARIANT: NoLayoutAvailableError carries a direct cause only when exactly
one candidate was attempted.

Log records emitted during a call carry ``repository`` and ``content_type``
through structlog context variables.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import structlog

from repolayout.domain.errors import (
    InvalidArgumentError,
    NoLayoutAvailableError,
    ProviderRejectedError,
)
from repolayout.domain.layout import RepositoryLayout, RepositoryLayoutFactory
from repolayout.domain.ordering import PrioritizedComponents
from repolayout.domain.repository import RemoteRepository, RepositorySession
from repolayout.services.registry import LayoutFactoryRegistry

NO_PROVIDERS_MESSAGE = "no providers registered"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutResolution:
    """The selected layout together with the factory that produced it."""

    layout: RepositoryLayout
    factory: RepositoryLayoutFactory
    name: str
    rejected: list[ProviderRejectedError] = field(default_factory=list)


class RepositoryLayoutResolver:
    """Selects a layout for a remote repository from the registered factories."""

    def __init__(self, registry: LayoutFactoryRegistry | None = None) -> None:
        self._registry = registry if registry is not None else LayoutFactoryRegistry()

    @property
    def registry(self) -> LayoutFactoryRegistry:
        return self._registry

    def candidates(
        self, session: RepositorySession | None = None
    ) -> PrioritizedComponents[RepositoryLayoutFactory]:
        """Build the ordered candidate list for *session*."""
        session = session or RepositorySession()
        components: PrioritizedComponents[RepositoryLayoutFactory] = PrioritizedComponents(
            session.priorities
        )
        for factory in self._registry.factories:
            components.add(factory, factory.priority)
        return components

    def resolve_layout(
        self,
        session: RepositorySession | None,
        repository: RemoteRepository | None,
    ) -> RepositoryLayout:
        """Return the layout of the first candidate that accepts *repository*.

        Raises:
            InvalidArgumentError: *repository* is None.
            NoLayoutAvailableError: every candidate rejected the repository,
                or none was available.
        """
        return self.resolve(session, repository).layout

    def resolve(
        self,
        session: RepositorySession | None,
        repository: RemoteRepository | None,
    ) -> LayoutResolution:
        """Like :meth:`resolve_layout` but also reports the winning factory."""
        if repository is None:
            msg = "remote repository has not been specified"
            raise InvalidArgumentError(msg)
        session = session or RepositorySession()
        with structlog.contextvars.bound_contextvars(
            repository=repository.url, content_type=repository.content_type
        ):
            return self._attempt(session, repository)

    def _attempt(
        self, session: RepositorySession, repository: RemoteRepository
    ) -> LayoutResolution:
        components = self.candidates(session)
        errors: list[ProviderRejectedError] = []
        for candidate in components.enabled:
            try:
                layout = candidate.component.create_layout(session, repository)
            except ProviderRejectedError as exc:
                logger.debug("Layout factory %s rejected %s: %s", candidate.name, repository, exc)
                errors.append(exc)
                continue
            logger.debug("Layout factory %s selected for %s", candidate.name, repository)
            return LayoutResolution(
                layout=layout,
                factory=candidate.component,
                name=candidate.name,
                rejected=errors,
            )

        if len(errors) > 1:
            for error in errors:
                logger.debug(
                    "Could not obtain layout factory for %s", repository, exc_info=error
                )

        if components.is_empty():
            message = NO_PROVIDERS_MESSAGE
        else:
            message = (
                f"Cannot access {repository.url} with type {repository.content_type}"
                f" using the available layout factories: {components.describe()}"
            )

        if len(errors) == 1:
            cause = errors[0]
            raise NoLayoutAvailableError(repository, message, cause=cause, errors=errors) from cause
        raise NoLayoutAvailableError(repository, message, errors=errors) from None
