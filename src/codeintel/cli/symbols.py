"""cintel symbols / cintel languages commands."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from codeintel.config.loader import load_config
from codeintel.core.errors import CodeIntelError
from codeintel.core.logging import configure_logging
from codeintel.index._internal.parsing import all_packs
from codeintel.index.models import Range, Symbol
from codeintel.index.ops import analyze_file


def _loc(r: Range) -> str:
    return f"{r.start_point[0] + 1}:{r.start_point[1] + 1}"


def _sorted(symbols: list[Symbol]) -> list[Symbol]:
    return sorted(symbols, key=lambda s: (s.def_.start_byte, s.def_.end_byte))


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-l", "--language", default=None, help="Language id (default: from extension)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def symbols_command(ctx: click.Context, path: Path, language: str | None, as_json: bool) -> None:
    """Show every symbol defined in PATH with its references.

    Analysis and logging settings come from .codeintel/config.yaml next to
    PATH (then the global config and CODEINTEL__ env vars). -v forces DEBUG
    on every configured log output.
    """
    try:
        config = load_config(path.resolve().parent)
        logging_config = config.logging
        if ctx.obj and ctx.obj.get("verbose"):
            outputs = [o.model_copy(update={"level": None}) for o in logging_config.outputs]
            logging_config = logging_config.model_copy(
                update={"level": "DEBUG", "outputs": outputs}
            )
        configure_logging(config=logging_config)
        symbols = _sorted(analyze_file(path, language, config=config))
    except CodeIntelError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps([s.to_dict() for s in symbols], indent=2))
        return

    if not symbols:
        click.echo("No symbols found.")
        return

    table = Table(show_header=True, box=None, padding=(0, 1), pad_edge=False)
    table.add_column("Name", style="bold")
    table.add_column("Defined")
    table.add_column("Refs", justify="right")
    table.add_column("Referenced at")
    for symbol in symbols:
        table.add_row(
            symbol.name,
            _loc(symbol.def_),
            str(len(symbol.refs)),
            ", ".join(_loc(r) for r in symbol.refs),
        )
    Console().print(table)


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def languages_command(as_json: bool) -> None:
    """List supported language ids and their file extensions."""
    packs = all_packs()
    if as_json:
        click.echo(
            json.dumps({pack.name: sorted(pack.extensions) for pack in packs}, indent=2)
        )
        return
    for pack in packs:
        exts = " ".join(f".{ext}" for ext in sorted(pack.extensions))
        click.echo(f"{pack.name:<12} {exts}")
