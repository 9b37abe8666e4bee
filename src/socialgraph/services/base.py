"""BaseService — shared foundation for socialgraph services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from socialgraph.infrastructure.graph.store import GraphStore


class BaseService:
    """Base for service-layer classes.

    Every service receives the :class:`GraphStore` it operates on at
    construction time. Services never print; they return ServiceResult.
    """

    def __init__(self, store: GraphStore) -> None:
        self._store = store
