"""Command: check whether two persons are connected."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from socialgraph.commands._base import PERSON_ID, SgCommand

if TYPE_CHECKING:
    from socialgraph.commands._context import AppContext

_CONNECT_EXAMPLES = """\
  socialgraph connect 1 3 --file friends.txt
  socialgraph connect 1 3 -f friends.txt --trace
  socialgraph --json connect 1 4 -f friends.txt"""


@click.command("connect", cls=SgCommand, examples=_CONNECT_EXAMPLES)
@click.argument("first", type=PERSON_ID)
@click.argument("second", type=PERSON_ID)
@click.option("-f", "--file", "file", default=None, help="Graph file (default: [graph] file).")
@click.option(
    "--trace/--no-trace",
    default=None,
    help="Print the friendships along the chain found (default: [connection] trace).",
)
@click.pass_obj
def connect(
    app: AppContext,
    first: int,
    second: int,
    file: str | None,
    trace: bool | None,
) -> None:
    """Find whether a chain of friendships links FIRST and SECOND."""
    if trace is None:
        trace = app.settings.connection.trace
    app.load_graph(app.graph_file(file))
    app.emit(app.network.connection(first, second, trace=trace))
