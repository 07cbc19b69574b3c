"""Shared pytest fixtures and test helpers for repolayout tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from repolayout.domain.errors import ProviderRejectedError
from repolayout.domain.repository import Artifact, RemoteRepository, RepositorySession


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def repository() -> RemoteRepository:
    return RemoteRepository(id="central", url="https://repo.example.com/maven2")


@pytest.fixture
def session() -> RepositorySession:
    return RepositorySession()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no config or env overrides.

    Entry-point discovery is switched off so only the built-in plugin
    (and whatever a test registers) contributes factories.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("REPOLAYOUT_CONFIG", raising=False)
    monkeypatch.setenv("REPOLAYOUT_PLUGINS__ENTRY_POINTS", "false")


# ---------------------------------------------------------------------------
# Fake factories
# ---------------------------------------------------------------------------


class StubLayout:
    """Layout that remembers which factory made it."""

    def __init__(self, owner: str) -> None:
        self.owner = owner

    def get_location(self, artifact: Artifact, upload: bool = False) -> str:
        return f"{self.owner}/{artifact.artifact_id}"


class StubFactory:
    """Configurable layout factory that records every call.

    ``outcome`` is ``"accept"``, ``"reject"``, or an exception instance to raise.
    """

    def __init__(self, name: str, priority: float = 0.0, outcome: object = "accept") -> None:
        self.name = name
        self._priority = priority
        self.outcome = outcome
        self.calls: list[RemoteRepository] = []

    @property
    def priority(self) -> float:
        return self._priority

    def create_layout(self, session: RepositorySession, repository: RemoteRepository) -> StubLayout:
        self.calls.append(repository)
        if self.outcome == "reject":
            raise ProviderRejectedError(repository, f"{self.name} cannot handle {repository.url}")
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return StubLayout(self.name)

    def __repr__(self) -> str:
        return f"StubFactory({self.name!r}, {self._priority})"
