"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy GraphStore construction, graph file
loading, and centralized result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from socialgraph.output.formatters import OutputSettings, format_result
from socialgraph.output.renderers import render_message

if TYPE_CHECKING:
    from socialgraph.config.settings import SocialGraphSettings
    from socialgraph.infrastructure.graph.store import GraphStore
    from socialgraph.services.network import NetworkService
    from socialgraph.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The graph store is created on first use so ``--help`` and
    ``--version`` never touch the graph file.
    """

    def __init__(self, settings: SocialGraphSettings) -> None:
        self.settings = settings
        self._store: GraphStore | None = None

        from socialgraph.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> GraphStore:
        """The graph store (created lazily on first access)."""
        if self._store is None:
            from socialgraph.infrastructure.graph.store import GraphStore

            self._store = GraphStore(encoding=self.settings.graph.encoding)
        return self._store

    @property
    def network(self) -> NetworkService:
        from socialgraph.services.network import NetworkService

        return NetworkService(self.store)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def graph_file(self, explicit: str | Path | None) -> Path:
        """Resolve the graph file or fail with a usage error."""
        path = self.settings.resolve_graph_file(explicit)
        if path is None:
            msg = "No graph file given. Pass --file or set [graph] file in socialgraph.toml."
            raise click.UsageError(msg)
        return path

    def load_graph(self, path: str | Path) -> ServiceResult:
        """Load *path* into the store; a failed load exits with code 1.

        Load warnings go to stderr so they never mix into query output.
        """
        result = self.network.load(path)
        if not result.ok:
            self.emit(result)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        return result

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def show(self, result: ServiceResult) -> None:
        """Output a ServiceResult without ending the process.

        Used by the interactive shell: failures such as unknown persons
        print their bare message to stdout and the menu loop continues.
        """
        if result.ok or self.settings.json_output:
            click.echo(format_result(result, settings=self.output_settings))
        else:
            click.echo(render_message(result))
