"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, socialgraph.toml only holds
overrides. An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    file: Path | None = None
    encoding: str = "utf-8"


class ConnectionConfig(BaseModel):
    """[connection] section."""

    model_config = {"frozen": True}

    trace: bool = False
