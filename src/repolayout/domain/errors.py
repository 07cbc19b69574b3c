"""Exception taxonomy for layout resolution.

- :class:`InvalidArgumentError` — programmer misuse; never aggregated.
- :class:`ProviderRejectedError` — a factory cannot lay out a repository;
  the resolver absorbs it and moves on to the next candidate.
- :class:`NoLayoutAvailableError` — terminal outcome when every candidate
  was rejected (or none was available).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from repolayout.domain.repository import RemoteRepository


class LayoutError(Exception):
    """Base class for all repolayout errors."""


class InvalidArgumentError(LayoutError, ValueError):
    """Raised when a caller passes a missing or malformed argument."""


class ProviderRejectedError(LayoutError):
    """Raised by a layout factory that cannot service *repository*."""

    def __init__(self, repository: RemoteRepository | None, message: str | None = None) -> None:
        if message is None:
            message = f"Unsupported repository layout {_content_type(repository)}"
        super().__init__(message)
        self.repository = repository
        self.message = message


class NoLayoutAvailableError(LayoutError):
    """Raised when no layout factory produced a layout for *repository*.

    ``cause`` is only populated when exactly one candidate was attempted.
    ``errors`` always holds every rejection, in attempt order.
    """

    def __init__(
        self,
        repository: RemoteRepository | None,
        message: str,
        cause: BaseException | None = None,
        errors: Sequence[ProviderRejectedError] = (),
    ) -> None:
        super().__init__(message)
        self.repository = repository
        self.message = message
        self.cause = cause
        self.errors: tuple[ProviderRejectedError, ...] = tuple(errors)


def _content_type(repository: RemoteRepository | None) -> str | None:
    return repository.content_type if repository is not None else None
