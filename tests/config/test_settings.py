"""Tests for LayoutSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from repolayout.config.discovery import find_config
from repolayout.config.settings import LayoutSettings
from repolayout.domain.ordering import PrioritizedComponents
from repolayout.plugins.builtins.maven2 import Maven2LayoutFactory


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REPOLAYOUT_CONFIG", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.priority.overrides == {}
        assert settings.priority.disabled == frozenset()
        assert settings.plugins.builtins is True
        assert settings.plugins.entry_points is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_priority_section(self, tmp_path: Path) -> None:
        (tmp_path / "repolayout.toml").write_text(
            '[priority]\ndisabled = ["maven2"]\nimplicit = true\n'
            "[priority.overrides]\ncustom = 7.5\n"
        )
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        assert settings.priority.disabled == frozenset({"maven2"})
        assert settings.priority.implicit is True
        assert settings.priority.overrides == {"custom": 7.5}
        assert settings.plugins.builtins is True

    def test_session_carries_priorities(self, tmp_path: Path) -> None:
        (tmp_path / "repolayout.toml").write_text("[priority.overrides]\nmaven2 = 3\n")
        session = LayoutSettings.from_cli(project_root=tmp_path).session()
        assert session.priorities.overrides == {"maven2": 3.0}

    def test_walk_up_discovery(self, tmp_path: Path) -> None:
        (tmp_path / "repolayout.toml").write_text("[plugins]\nentry_points = false\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / "repolayout.toml").resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "layouts.toml"
        custom.parent.mkdir()
        custom.write_text("[plugins]\nbuiltins = false\n")
        settings = LayoutSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.plugins.builtins is False
        assert settings.config_path == custom

    def test_env_var_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "env.toml"
        custom.write_text("[plugins]\nbuiltins = false\n")
        monkeypatch.setenv("REPOLAYOUT_CONFIG", str(custom))
        assert find_config(tmp_path / "elsewhere") == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "repolayout.toml").write_text("[priority\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            LayoutSettings.from_cli(project_root=tmp_path)


class TestPrecedence:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "repolayout.toml").write_text("[plugins]\nbuiltins = false\n")
        monkeypatch.setenv("REPOLAYOUT_PLUGINS__BUILTINS", "true")
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        assert settings.plugins.builtins is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "repolayout.toml").write_text("verbose = true\n")
        settings = LayoutSettings.from_cli(project_root=tmp_path, verbose=False)
        assert settings.verbose is False


class TestPriorityEnv:
    def test_disabled_comma_separated(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REPOLAYOUT_PRIORITY__DISABLED", "maven2, other")
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        assert settings.priority.disabled == frozenset({"maven2", "other"})

    def test_disabled_json_list(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REPOLAYOUT_PRIORITY__DISABLED", '["maven2"]')
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        assert settings.priority.disabled == frozenset({"maven2"})

    def test_override_by_class_name(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REPOLAYOUT_PRIORITY__OVERRIDES__Maven2LayoutFactory", "9")
        settings = LayoutSettings.from_cli(project_root=tmp_path)
        assert settings.priority.overrides == {"maven2layoutfactory": 9.0}

        components = PrioritizedComponents(settings.priority)
        factory = Maven2LayoutFactory()
        components.add(factory, factory.priority)
        assert components.enabled[0].priority == 9.0

    def test_invalid_override_is_a_click_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("REPOLAYOUT_PRIORITY__OVERRIDES__MAVEN2", "high")
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            LayoutSettings.from_cli(project_root=tmp_path)

    def test_malformed_disabled_list_is_a_click_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("REPOLAYOUT_PRIORITY__DISABLED", "[maven2")
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            LayoutSettings.from_cli(project_root=tmp_path)
