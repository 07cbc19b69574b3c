"""LayoutService — resolver operations wrapped in ServiceResult for the CLI."""

from __future__ import annotations

from typing import Any

from repolayout.domain.errors import InvalidArgumentError, NoLayoutAvailableError
from repolayout.domain.repository import (
    DEFAULT_CONTENT_TYPE,
    Artifact,
    RemoteRepository,
    RepositorySession,
)
from repolayout.services.resolver import RepositoryLayoutResolver
from repolayout.services.result import INVALID_ARGUMENT, NO_LAYOUT, ServiceResult


class LayoutService:
    """Resolve layouts and inspect the candidate ordering for one session."""

    def __init__(
        self,
        resolver: RepositoryLayoutResolver,
        session: RepositorySession | None = None,
    ) -> None:
        self._resolver = resolver
        self._session = session or RepositorySession()

    def resolve(
        self,
        url: str,
        *,
        content_type: str = DEFAULT_CONTENT_TYPE,
        repo_id: str = "",
        artifact: str | None = None,
    ) -> ServiceResult:
        """Pick a layout for the repository at *url*.

        When *artifact* coordinates are given, the resolved layout's
        location for that artifact is included as ``path``.
        """
        op = "resolve"
        repository = RemoteRepository(id=repo_id, url=url, content_type=content_type)
        try:
            coords = Artifact.parse(artifact) if artifact else None
            resolution = self._resolver.resolve(self._session, repository)
        except InvalidArgumentError as exc:
            return ServiceResult.failure(op, INVALID_ARGUMENT, str(exc))
        except NoLayoutAvailableError as exc:
            detail: dict[str, Any] = {
                "repository": repository.model_dump(),
                "attempts": len(exc.errors),
            }
            if exc.cause is not None:
                detail["cause"] = str(exc.cause)
            return ServiceResult.failure(op, NO_LAYOUT, exc.message, detail)

        data: dict[str, Any] = {
            "repository": repository.model_dump(),
            "factory": resolution.name,
            "layout": type(resolution.layout).__name__,
            "rejected": [str(exc) for exc in resolution.rejected],
        }
        if coords is not None:
            data["artifact"] = str(coords)
            data["path"] = resolution.layout.get_location(coords)
        return ServiceResult.success(op, data)

    def list_factories(self) -> ServiceResult:
        """Report every registered factory in attempt order."""
        components = self._resolver.candidates(self._session)
        items = [
            {
                "name": candidate.name,
                "priority": candidate.priority,
                "enabled": not candidate.disabled,
            }
            for candidate in components.all
        ]
        warnings: list[str] = []
        if components.is_empty():
            warnings.append("No layout factories registered")
        elif not components.enabled:
            warnings.append("All layout factories are disabled")
        return ServiceResult.success(
            "list_factories", {"count": len(items), "items": items}, warnings
        )
