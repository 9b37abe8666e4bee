"""Command: load a graph file and report its size."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from socialgraph.commands._base import SgCommand

if TYPE_CHECKING:
    from socialgraph.commands._context import AppContext

_LOAD_EXAMPLES = """\
  socialgraph load friends.txt
  socialgraph --json load friends.txt
  socialgraph -v load data/network.txt"""


@click.command("load", cls=SgCommand, examples=_LOAD_EXAMPLES)
@click.argument("file", required=False)
@click.pass_obj
def load(app: AppContext, file: str | None) -> None:
    """Load a graph file and check that it is well formed."""
    path = app.graph_file(file)
    app.emit(app.network.load(path))
