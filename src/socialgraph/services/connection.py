"""ConnectionFinder — reachability between two persons via depth-first search.

The search keeps an explicit stack of neighbor iterators instead of
recursing, so chain length is bounded by memory rather than the
interpreter's recursion limit. A person is marked visited when it is
entered, before any of its friends are explored, so nobody is entered
twice and the search terminates on cyclic graphs in O(V + E).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    import networkx as nx

# Called as sink(a, b) for each friendship on the chain found.
TraceSink: TypeAlias = Callable[[int, int], None]


def format_trace(a: int, b: int) -> str:
    """Render one traced friendship the way the shell prints it."""
    return f"{a} is friends with {b}"


class ConnectionFinder:
    """Depth-first reachability search over a read-only friendship graph.

    Args:
        trace: Optional sink receiving each friendship of the discovered
            chain, deepest first (the friendship that reaches the target
            comes first, the one leaving the source comes last).
    """

    def __init__(self, trace: TraceSink | None = None) -> None:
        self._trace = trace

    def find(self, graph: nx.Graph[int], source: int, target: int) -> list[int] | None:
        """Return the chain DFS followed from *source* to *target*, or None.

        The chain is not necessarily the shortest one; neighbor order is
        whatever the adjacency yields.

        Raises:
            ValueError: If *source* or *target* is not in *graph*.
        """
        for person in (source, target):
            if person not in graph:
                msg = f"Person {person} not found in graph."
                raise ValueError(msg)

        if source == target:
            return [source]

        adj = graph.adj
        visited: set[int] = {source}
        chain: list[int] = [source]
        stack: list[Iterator[int]] = [iter(adj[source])]

        while stack:
            friend = next((n for n in stack[-1] if n not in visited), None)
            if friend is None:
                stack.pop()
                chain.pop()
                continue
            chain.append(friend)
            if friend == target:
                self._emit_trace(chain)
                return chain
            visited.add(friend)
            stack.append(iter(adj[friend]))

        return None

    def is_connected(self, graph: nx.Graph[int], source: int, target: int) -> bool:
        """True iff some chain of friendships links *source* and *target*."""
        return self.find(graph, source, target) is not None

    def _emit_trace(self, chain: list[int]) -> None:
        if self._trace is None:
            return
        for i in range(len(chain) - 1, 0, -1):
            self._trace(chain[i - 1], chain[i])


def is_connected(graph: nx.Graph[int], source: int, target: int) -> bool:
    """Module-level shortcut for an untraced :meth:`ConnectionFinder.is_connected`."""
    return ConnectionFinder().is_connected(graph, source, target)
