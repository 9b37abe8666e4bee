"""Shared pytest fixtures and test helpers for socialgraph tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest
from click.testing import CliRunner

from socialgraph.infrastructure.graph.store import GraphStore

SAMPLE_GRAPH = "3\n1 2\n2 3\n4 5\n"

WriteGraph: TypeAlias = Callable[..., Path]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_graph(tmp_path: Path) -> WriteGraph:
    """Factory writing edge-list text to a file under ``tmp_path``."""

    def _write(text: str = SAMPLE_GRAPH, name: str = "friends.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_file(write_graph: WriteGraph) -> Path:
    """The three-friendship sample graph: 1-2, 2-3, 4-5."""
    return write_graph()


@pytest.fixture
def store(sample_file: Path) -> GraphStore:
    """GraphStore loaded with the sample graph."""
    s = GraphStore()
    s.load(sample_file)
    return s


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in ``tmp_path`` with no inherited config discovery."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SOCIALGRAPH_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def chain_text(length: int) -> str:
    """Edge list for a path graph 0-1-2-...-length."""
    lines = [str(length)] + [f"{i} {i + 1}" for i in range(length)]
    return "\n".join(lines) + "\n"
