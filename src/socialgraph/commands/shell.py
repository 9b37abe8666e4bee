"""Command: interactive menu over a loaded graph.

Prompts for the graph file when none is configured, then loops on a
three-option menu until the user exits. Unknown persons are reported
and the loop goes on; a graph that fails to load ends the session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from socialgraph.commands._base import PERSON_ID, SgCommand

if TYPE_CHECKING:
    from socialgraph.commands._context import AppContext

_SHELL_EXAMPLES = """\
  socialgraph shell
  socialgraph shell friends.txt
  printf '1\\n2\\n3\\n' | socialgraph shell friends.txt"""

_MENU = """\
MAIN MENU
[1] Get Friend List
[2] Get Connection
[3] Exit
"""

_FRIEND_LIST = 1
_CONNECTION = 2
_EXIT = 3


@click.command("shell", cls=SgCommand, examples=_SHELL_EXAMPLES)
@click.argument("file", required=False)
@click.pass_obj
def shell(app: AppContext, file: str | None) -> None:
    """Interactive friend-list and connection menu."""
    path = app.settings.resolve_graph_file(file)
    if path is None:
        path = click.prompt("Input file path")
    app.show(app.load_graph(path))

    trace = app.settings.connection.trace
    while True:
        click.echo(_MENU)
        choice = click.prompt("Enter your choice", type=int)

        if choice == _FRIEND_LIST:
            person_id = click.prompt("Enter ID of person", type=PERSON_ID)
            app.show(app.network.friends(person_id))
        elif choice == _CONNECTION:
            first = click.prompt("Enter ID of first person", type=PERSON_ID)
            second = click.prompt("Enter ID of second person", type=PERSON_ID)
            app.show(app.network.connection(first, second, trace=trace))
        elif choice == _EXIT:
            click.echo("Exiting the program. Goodbye!")
            return
        else:
            click.echo("Invalid choice. Please enter valid option.")
