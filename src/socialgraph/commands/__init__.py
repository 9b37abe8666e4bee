"""Subcommand modules for socialgraph.

Provides register_commands() which uses deferred imports to keep
``socialgraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from socialgraph.commands.connect import connect
    from socialgraph.commands.friends import friends
    from socialgraph.commands.load import load
    from socialgraph.commands.shell import shell

    cli.add_command(load)
    cli.add_command(friends)
    cli.add_command(connect)
    cli.add_command(shell)
