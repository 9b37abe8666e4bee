"""GraphStore — owns the friendship graph and answers membership queries.

The graph is rebuilt from scratch on every ``load()`` and frozen once
built, so nothing can add or remove friendships afterwards. A failed load
never replaces the graph that was in place before it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO, TypeAlias

import networkx as nx

from socialgraph.domain.edges import parse_edge_list
from socialgraph.domain.errors import LoadIOError

logger = logging.getLogger(__name__)

GraphSource: TypeAlias = str | Path | TextIO


@dataclass(frozen=True)
class LoadSummary:
    """What a successful ``load()`` produced."""

    source: str
    persons: int
    friendships: int
    declared_edges: int
    ignored_tokens: int = 0


def _read_source(source: GraphSource, encoding: str) -> tuple[str, str]:
    """Return ``(label, text)`` for a path or an open text stream."""
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            return str(path), path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Cannot read graph file {path}: {exc}"
            raise LoadIOError(msg) from exc

    label = getattr(source, "name", "<stream>")
    try:
        return str(label), source.read()
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read graph source {label}: {exc}"
        raise LoadIOError(msg) from exc


class GraphStore:
    """Undirected person-ID graph loaded from an edge-list file."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding
        self._graph: nx.Graph[int] = nx.freeze(nx.Graph())
        self._loaded = False

    @property
    def graph(self) -> nx.Graph[int]:
        """The frozen graph; read-only for every consumer."""
        return self._graph

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def person_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def friendship_count(self) -> int:
        return self._graph.number_of_edges()

    def load(self, source: GraphSource) -> LoadSummary:
        """Replace the graph with the friendships read from *source*.

        Each pair ``(a, b)`` makes a and b friends of each other. Persons
        appear in the graph only through the edges that name them.

        Raises:
            LoadIOError: If the source cannot be opened or read.
            MalformedDataError: If the contents are not a valid edge list.
        """
        label, text = _read_source(source, self._encoding)
        edge_list = parse_edge_list(text)

        g: nx.Graph[int] = nx.Graph()
        g.add_edges_from(edge_list.pairs)
        self._graph = nx.freeze(g)
        self._loaded = True

        summary = LoadSummary(
            source=label,
            persons=g.number_of_nodes(),
            friendships=g.number_of_edges(),
            declared_edges=edge_list.declared,
            ignored_tokens=edge_list.ignored_tokens,
        )
        logger.debug(
            "Loaded graph from %s: %d persons, %d friendships",
            label,
            summary.persons,
            summary.friendships,
        )
        return summary

    def exists(self, person_id: int) -> bool:
        """True iff *person_id* appears in at least one friendship."""
        return person_id in self._graph

    def neighbors(self, person_id: int) -> list[int]:
        """Direct friends of *person_id* in ascending order.

        Unknown IDs yield an empty list; check :meth:`exists` first to tell
        "no such person" apart from "no friends".
        """
        if person_id not in self._graph:
            return []
        return sorted(self._graph.adj[person_id])
