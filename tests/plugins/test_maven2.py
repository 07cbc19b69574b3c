"""Tests for the built-in Maven 2 layout plugin."""

from __future__ import annotations

import pytest

from repolayout.domain.errors import ProviderRejectedError
from repolayout.domain.layout import RepositoryLayout, RepositoryLayoutFactory
from repolayout.domain.repository import Artifact, RemoteRepository, RepositorySession
from repolayout.plugins.builtins.maven2 import (
    Maven2LayoutFactory,
    Maven2LayoutPlugin,
    Maven2RepositoryLayout,
)


class TestMaven2LayoutFactory:
    def test_satisfies_protocol(self) -> None:
        factory = Maven2LayoutFactory()
        assert isinstance(factory, RepositoryLayoutFactory)
        assert factory.priority == 1.0

    def test_accepts_default_content_type(self) -> None:
        layout = Maven2LayoutFactory().create_layout(
            RepositorySession(), RemoteRepository(url="https://x")
        )
        assert isinstance(layout, Maven2RepositoryLayout)
        assert isinstance(layout, RepositoryLayout)

    def test_rejects_other_content_types(self) -> None:
        repo = RemoteRepository(url="https://x", content_type="legacy")
        with pytest.raises(ProviderRejectedError) as info:
            Maven2LayoutFactory().create_layout(RepositorySession(), repo)
        assert info.value.repository is repo

    def test_plugin_contributes_factory(self) -> None:
        (factory,) = Maven2LayoutPlugin().register_layout_factories()
        assert isinstance(factory, Maven2LayoutFactory)


class TestMaven2RepositoryLayout:
    @pytest.mark.parametrize(
        ("coords", "expected"),
        [
            ("org.example:demo:1.0", "org/example/demo/1.0/demo-1.0.jar"),
            ("org.example:demo:pom:1.0", "org/example/demo/1.0/demo-1.0.pom"),
            (
                "com.acme.tools:cli:tar.gz:linux:2.3.1",
                "com/acme/tools/cli/2.3.1/cli-2.3.1-linux.tar.gz",
            ),
        ],
    )
    def test_location(self, coords: str, expected: str) -> None:
        assert Maven2RepositoryLayout().get_location(Artifact.parse(coords)) == expected
