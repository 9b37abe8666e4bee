"""Command: list a person's direct friends."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from socialgraph.commands._base import PERSON_ID, SgCommand

if TYPE_CHECKING:
    from socialgraph.commands._context import AppContext

_FRIENDS_EXAMPLES = """\
  socialgraph friends 2 --file friends.txt
  socialgraph --quiet friends 2 -f friends.txt
  socialgraph --json friends 99 -f friends.txt"""


@click.command("friends", cls=SgCommand, examples=_FRIENDS_EXAMPLES)
@click.argument("person_id", type=PERSON_ID)
@click.option("-f", "--file", "file", default=None, help="Graph file (default: [graph] file).")
@click.pass_obj
def friends(app: AppContext, person_id: int, file: str | None) -> None:
    """Show the sorted friend list of PERSON_ID."""
    app.load_graph(app.graph_file(file))
    app.emit(app.network.friends(person_id))
