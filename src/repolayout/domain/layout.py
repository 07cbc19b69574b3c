"""Layout and layout factory contracts.

Factories are structural: anything with a ``priority`` and a
``create_layout(session, repository)`` method qualifies. A factory that
cannot handle a repository raises
:class:`~repolayout.domain.errors.ProviderRejectedError`; any other
exception is treated as a fault and aborts resolution.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from repolayout.domain.repository import Artifact, RemoteRepository, RepositorySession


@runtime_checkable
class RepositoryLayout(Protocol):
    """Maps logical artifact coordinates to repository-relative paths."""

    def get_location(self, artifact: Artifact, upload: bool = False) -> str: ...


@runtime_checkable
class RepositoryLayoutFactory(Protocol):
    """Produces a :class:`RepositoryLayout` for the repositories it supports."""

    @property
    def priority(self) -> float: ...

    def create_layout(
        self,
        session: RepositorySession,
        repository: RemoteRepository,
    ) -> RepositoryLayout: ...


def factory_name(factory: object) -> str:
    """Display identity of *factory*: its ``name`` attribute or class name."""
    name = getattr(factory, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(factory).__name__


def factory_identities(factory: object) -> list[str]:
    """Keys under which session configuration may address *factory*.

    Checked in order: ``name`` attribute, dotted class path, class name.
    Keys are casefolded; environment variables arrive lowercased.
    """
    cls = type(factory)
    keys = [factory_name(factory), f"{cls.__module__}.{cls.__qualname__}", cls.__name__]
    return list(dict.fromkeys(key.casefold() for key in keys))
