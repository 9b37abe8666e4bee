"""In-memory friendship graph backed by NetworkX."""

from socialgraph.infrastructure.graph.store import GraphStore, LoadSummary

__all__ = ["GraphStore", "LoadSummary"]
