"""Root CLI group for socialgraph with global flags and command registration."""

from __future__ import annotations

import click

from socialgraph import __version__
from socialgraph.commands import register_commands
from socialgraph.commands._base import SgGroup
from socialgraph.commands._context import AppContext
from socialgraph.config.settings import SocialGraphSettings

_ROOT_EXAMPLES = """\
  socialgraph shell friends.txt
  socialgraph friends 2 -f friends.txt
  socialgraph connect 1 3 -f friends.txt --trace
  socialgraph --json connect 1 4 -f friends.txt"""


@click.group(cls=SgGroup, invoke_without_command=True, examples=_ROOT_EXAMPLES)
@click.version_option(version=__version__, prog_name="socialgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """socialgraph — friend lists and connections in a friendship graph."""
    ctx.ensure_object(dict)
    settings = SocialGraphSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
