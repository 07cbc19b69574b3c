"""Repository descriptors and the per-call session.

A :class:`RepositorySession` carries the read-only :class:`PriorityConfig`
consulted when candidates are ordered. Sessions are plain frozen values;
nothing here performs I/O.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import NoDecode

from repolayout.domain.errors import InvalidArgumentError

DEFAULT_CONTENT_TYPE = "default"


class RemoteRepository(BaseModel):
    """A remote artifact repository as seen by layout factories."""

    model_config = {"frozen": True}

    id: str = ""
    url: str
    content_type: str = DEFAULT_CONTENT_TYPE

    def __str__(self) -> str:
        return f"{self.id} ({self.url}, {self.content_type})"


class PriorityConfig(BaseModel):
    """[priority] section — session overrides for candidate ordering.

    Attributes:
        overrides: Factory identity -> priority. Supersedes the declared value.
        disabled: Factory identities excluded from the enabled candidates.
        implicit: Rank by registration order instead of declared priority.
    """

    model_config = {"frozen": True}

    overrides: dict[str, float] = Field(default_factory=dict)
    # NoDecode: env values reach the validator raw, as CSV or a JSON list.
    disabled: Annotated[frozenset[str], NoDecode] = Field(default_factory=frozenset)
    implicit: bool = False

    @field_validator("overrides", mode="before")
    @classmethod
    def _casefold_overrides(cls, value: object) -> object:
        if isinstance(value, dict):
            return {str(key).casefold(): priority for key, priority in value.items()}
        return value

    @field_validator("disabled", mode="before")
    @classmethod
    def _coerce_disabled(cls, value: object) -> object:
        if isinstance(value, str):
            if value.lstrip().startswith("["):
                value = json.loads(value)
            else:
                value = value.split(",")
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(part).strip().casefold() for part in value if str(part).strip())
        return value


class RepositorySession(BaseModel):
    """Session-scoped, read-only inputs to a resolution call."""

    model_config = {"frozen": True}

    priorities: PriorityConfig = Field(default_factory=PriorityConfig)


@dataclass(frozen=True)
class Artifact:
    """Logical artifact coordinates."""

    group_id: str
    artifact_id: str
    version: str
    extension: str = "jar"
    classifier: str = ""

    @classmethod
    def parse(cls, coords: str) -> Artifact:
        """Parse ``group:artifact[:extension[:classifier]]:version``."""
        parts = coords.strip().split(":")
        if len(parts) < 3 or len(parts) > 5 or not all(parts):
            msg = (
                f"Bad artifact coordinates {coords!r}, expected "
                "<groupId>:<artifactId>[:<extension>[:<classifier>]]:<version>"
            )
            raise InvalidArgumentError(msg)
        group_id, artifact_id = parts[0], parts[1]
        version = parts[-1]
        extension = parts[2] if len(parts) >= 4 else "jar"
        classifier = parts[3] if len(parts) == 5 else ""
        return cls(group_id, artifact_id, version, extension, classifier)

    def __str__(self) -> str:
        middle = f":{self.extension}"
        if self.classifier:
            middle += f":{self.classifier}"
        return f"{self.group_id}:{self.artifact_id}{middle}:{self.version}"
