"""codeintel CLI - cintel command."""

import click

from codeintel.cli.symbols import languages_command, symbols_command
from codeintel.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="cintel")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """codeintel - file-local symbol tables from tree-sitter locals queries."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(symbols_command, name="symbols")
cli.add_command(languages_command, name="languages")


if __name__ == "__main__":
    cli()
