"""Tests for SocialGraphSettings — priority chain and graph file resolution."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from socialgraph.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from socialgraph.config.settings import SocialGraphSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv("SOCIALGRAPH_GRAPH__FILE", raising=False)
    monkeypatch.delenv("SOCIALGRAPH_CONNECTION__TRACE", raising=False)


def _write_config(root: Path, body: str) -> Path:
    path = root / CONFIG_FILENAME
    path.write_text(body, encoding="utf-8")
    return path


class TestDefaults:
    def test_no_config(self, tmp_path: Path) -> None:
        settings = SocialGraphSettings.from_cli(start=tmp_path)
        assert settings.graph.file is None
        assert settings.graph.encoding == "utf-8"
        assert settings.connection.trace is False
        assert settings.json_output is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = SocialGraphSettings.from_cli(start=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestToml:
    def test_sections_loaded(self, tmp_path: Path) -> None:
        cfg = _write_config(tmp_path, '[graph]\nfile = "data.txt"\n\n[connection]\ntrace = true\n')
        settings = SocialGraphSettings.from_cli(start=tmp_path)
        assert settings.config_path == cfg
        assert settings.config_root == tmp_path
        assert settings.graph.file == Path("data.txt")
        assert settings.connection.trace is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[connection]\ntrace = true\n", encoding="utf-8")
        settings = SocialGraphSettings.from_cli(config_path=str(cfg), start=tmp_path)
        assert settings.connection.trace is True

    def test_explicit_config_missing(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            SocialGraphSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[graph\nfile = \n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            SocialGraphSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_config(tmp_path, "[connection]\ntrace = false\n")
        monkeypatch.setenv("SOCIALGRAPH_CONNECTION__TRACE", "true")
        settings = SocialGraphSettings.from_cli(start=tmp_path)
        assert settings.connection.trace is True

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = SocialGraphSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True


class TestResolveGraphFile:
    def test_explicit_wins(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[graph]\nfile = "data.txt"\n')
        settings = SocialGraphSettings.from_cli(start=tmp_path)
        assert settings.resolve_graph_file("other.txt") == Path("other.txt")

    def test_relative_to_config(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[graph]\nfile = "data/friends.txt"\n')
        nested = tmp_path / "sub"
        nested.mkdir()
        settings = SocialGraphSettings.from_cli(start=nested)
        assert settings.resolve_graph_file() == tmp_path / "data" / "friends.txt"

    def test_absolute_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "abs.txt"
        _write_config(tmp_path, f'[graph]\nfile = "{target.as_posix()}"\n')
        settings = SocialGraphSettings.from_cli(start=tmp_path)
        assert settings.resolve_graph_file() == target

    def test_nothing_configured(self, tmp_path: Path) -> None:
        settings = SocialGraphSettings.from_cli(start=tmp_path)
        assert settings.resolve_graph_file() is None
