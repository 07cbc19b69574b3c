"""Built-in Maven 2 layout plugin.

Contributes a single factory for repositories of content type ``default``:
``org/example/demo/1.0/demo-1.0-sources.jar`` for
``org.example:demo:jar:sources:1.0``. Every other content type is rejected
so that other factories get a chance.
"""

from __future__ import annotations

from repolayout.domain.errors import ProviderRejectedError
from repolayout.domain.repository import (
    DEFAULT_CONTENT_TYPE,
    Artifact,
    RemoteRepository,
    RepositorySession,
)
from repolayout.plugins.hookspecs import hookimpl


class Maven2RepositoryLayout:
    """``groupId/as/path/artifactId/version/artifactId-version[-classifier].ext``"""

    def get_location(self, artifact: Artifact, upload: bool = False) -> str:
        parts = [*artifact.group_id.split("."), artifact.artifact_id, artifact.version]
        filename = f"{artifact.artifact_id}-{artifact.version}"
        if artifact.classifier:
            filename += f"-{artifact.classifier}"
        if artifact.extension:
            filename += f".{artifact.extension}"
        return "/".join([*parts, filename])


class Maven2LayoutFactory:
    """Layout factory for the standard Maven 2 repository layout."""

    name = "maven2"

    def __init__(self, priority: float = 1.0) -> None:
        self._priority = priority

    @property
    def priority(self) -> float:
        return self._priority

    def create_layout(
        self,
        session: RepositorySession,
        repository: RemoteRepository,
    ) -> Maven2RepositoryLayout:
        if repository.content_type != DEFAULT_CONTENT_TYPE:
            raise ProviderRejectedError(repository)
        return Maven2RepositoryLayout()


class Maven2LayoutPlugin:
    """Registers :class:`Maven2LayoutFactory`."""

    @hookimpl
    def register_layout_factories(self) -> list[Maven2LayoutFactory]:
        return [Maven2LayoutFactory()]
