"""NetworkService — load a friendship graph and query it.

Wraps :class:`GraphStore` and :class:`ConnectionFinder` behind the
ServiceResult contract: load errors become ``IO_FAILURE`` /
``MALFORMED_DATA`` results, unknown persons become ``NOT_FOUND``.
"""

from __future__ import annotations

from typing import Any

import structlog

from socialgraph.domain.errors import LoadError
from socialgraph.infrastructure.graph.store import GraphSource
from socialgraph.services.base import BaseService
from socialgraph.services.connection import ConnectionFinder, format_trace
from socialgraph.services.result import ServiceResult

log = structlog.get_logger(__name__)


class NetworkService(BaseService):
    """Handles loading and querying the friendship graph."""

    def _require_loaded(self, op: str) -> ServiceResult | None:
        if self._store.is_loaded:
            return None
        return ServiceResult.failure(op, "NOT_LOADED", "No graph file has been loaded.")

    # ------------------------------------------------------------------
    # load
    # ------------------------------------------------------------------

    def load(self, source: GraphSource) -> ServiceResult:
        """Load the graph from *source*, replacing any previous graph.

        On failure the previous graph (if any) is kept, but callers should
        not query it as if the new file had loaded.
        """
        try:
            summary = self._store.load(source)
        except LoadError as exc:
            log.debug("graph_load_failed", source=str(source), code=exc.code, reason=str(exc))
            return ServiceResult.failure("load", exc.code, str(exc), source=str(source))

        warnings: list[str] = []
        if summary.ignored_tokens:
            warnings.append(
                f"Ignored {summary.ignored_tokens} token(s) after the "
                f"{summary.declared_edges} declared friendship(s)"
            )

        log.debug(
            "graph_loaded",
            source=summary.source,
            persons=summary.persons,
            friendships=summary.friendships,
        )
        return ServiceResult(
            ok=True,
            op="load",
            data={
                "source": summary.source,
                "persons": summary.persons,
                "friendships": summary.friendships,
                "declared_edges": summary.declared_edges,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # summary
    # ------------------------------------------------------------------

    def summary(self) -> ServiceResult:
        """Report the size of the loaded graph."""
        if (not_loaded := self._require_loaded("summary")) is not None:
            return not_loaded
        return ServiceResult(
            ok=True,
            op="summary",
            data={
                "persons": self._store.person_count,
                "friendships": self._store.friendship_count,
            },
        )

    # ------------------------------------------------------------------
    # friends
    # ------------------------------------------------------------------

    def friends(self, person_id: int) -> ServiceResult:
        """List the direct friends of *person_id* in ascending order."""
        if (not_loaded := self._require_loaded("friends")) is not None:
            return not_loaded

        if not self._store.exists(person_id):
            return ServiceResult.failure(
                "friends",
                "NOT_FOUND",
                f"Person {person_id} does not exist.",
                person_id=person_id,
            )

        friends = self._store.neighbors(person_id)
        return ServiceResult(
            ok=True,
            op="friends",
            data={"person_id": person_id, "count": len(friends), "friends": friends},
        )

    # ------------------------------------------------------------------
    # connection — depth-first reachability
    # ------------------------------------------------------------------

    def connection(self, first: int, second: int, *, trace: bool = False) -> ServiceResult:
        """Decide whether a chain of friendships links *first* and *second*.

        Args:
            first: Person the search starts from.
            second: Person the search looks for.
            trace: Include the traced friendships (deepest first) in the result.
        """
        if (not_loaded := self._require_loaded("connection")) is not None:
            return not_loaded

        missing = [p for p in (first, second) if not self._store.exists(p)]
        if missing:
            return ServiceResult.failure(
                "connection",
                "NOT_FOUND",
                "One or both persons do not exist in the dataset.",
                missing=missing,
            )

        lines: list[str] = []

        def sink(a: int, b: int) -> None:
            log.debug("friendship_traced", source=a, target=b)
            lines.append(format_trace(a, b))

        chain = ConnectionFinder(trace=sink).find(self._store.graph, first, second)

        data: dict[str, Any] = {
            "source_id": first,
            "target_id": second,
            "connected": chain is not None,
        }
        if chain is not None:
            data["path"] = chain
        if trace:
            data["trace"] = lines
        return ServiceResult(ok=True, op="connection", data=data)
