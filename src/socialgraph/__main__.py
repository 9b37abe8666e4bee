"""Allow ``python -m socialgraph``."""

from socialgraph.cli import cli

cli()
