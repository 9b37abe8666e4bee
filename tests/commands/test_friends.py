"""Tests for the friends command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from socialgraph.cli import cli
from tests.conftest import WriteGraph


@pytest.mark.usefixtures("_isolated_cwd")
class TestFriendsCommand:
    def test_friend_list(self, cli_runner: CliRunner, sample_file: Path) -> None:
        result = cli_runner.invoke(cli, ["friends", "2", "-f", str(sample_file)])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Person 2 has 2 friends!", "List of friends: 1 3"]

    def test_quiet(self, cli_runner: CliRunner, sample_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "friends", "2", "--file", str(sample_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "1 3"

    def test_json(self, cli_runner: CliRunner, sample_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "friends", "1", "-f", str(sample_file)])
        data = json.loads(result.output)
        assert data["data"] == {"person_id": 1, "count": 1, "friends": [2]}

    def test_unknown_person(self, cli_runner: CliRunner, sample_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "friends", "99", "-f", str(sample_file)])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "NOT_FOUND"
        assert data["error"]["message"] == "Person 99 does not exist."

    def test_empty_graph(self, cli_runner: CliRunner, write_graph: WriteGraph) -> None:
        path = write_graph("0\n")
        result = cli_runner.invoke(cli, ["friends", "0", "-f", str(path)])
        assert result.exit_code == 1
        assert "Person 0 does not exist." in result.output

    @pytest.mark.parametrize("bad", ["abc", "-1", "1.5"])
    def test_invalid_person_id(self, cli_runner: CliRunner, sample_file: Path, bad: str) -> None:
        result = cli_runner.invoke(cli, ["friends", "-f", str(sample_file), "--", bad])
        assert result.exit_code == 2
        assert "Invalid value for 'PERSON_ID'" in result.output

    def test_load_failure_stops(self, cli_runner: CliRunner, write_graph: WriteGraph) -> None:
        path = write_graph("3\n1 2\n")
        result = cli_runner.invoke(cli, ["--json", "friends", "1", "-f", str(path)])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["op"] == "load"
        assert data["error"]["code"] == "MALFORMED_DATA"
