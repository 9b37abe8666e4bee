"""Tests for the root CLI group."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from socialgraph import __version__
from socialgraph.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestRootGroup:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_command_shows_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        for command in ("load", "friends", "connect", "shell"):
            assert command in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--examples"])
        assert result.exit_code == 0
        assert "socialgraph shell friends.txt" in result.output

    def test_missing_config_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-c", "nope.toml", "load", "x.txt"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output
