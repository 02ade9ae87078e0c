"""Main CLI entry point and application setup."""

import logging
from dataclasses import dataclass
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from esanalysis import __version__
from esanalysis.analyzers import AnalyzerDefinition
from esanalysis.config import load_analysis
from esanalysis.exceptions import AnalysisError


@dataclass
class Context:
    """CLI context that holds shared resources."""

    console: Console
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_console(no_color: bool = False) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        width=120,
        highlight=not no_color,
        color_system=None if no_color else "auto",
    )


class AnalysisGroup(click.Group):
    """Command group that reports analysis errors without a traceback."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except AnalysisError as e:
            if ctx.obj.debug:
                raise
            ctx.obj.console.print(f"[red]Error:[/red] {escape(str(e))}")
            ctx.exit(1)


@click.group(cls=AnalysisGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.version_option(
    version=__version__,
    prog_name="esanalysis",
    message="esanalysis version %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
) -> None:
    """Index analysis settings builder.

    Turns analyzer definitions from a YAML file into the JSON analysis
    block of a search index settings request.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)
    ctx.obj = Context(console=create_console(no_color=no_color), debug=debug)


@cli.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--compact", is_flag=True, help="Print JSON on a single line")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write JSON to a file instead of stdout",
)
@click.pass_context
def render(
    ctx: click.Context, config: Path, compact: bool, output: Path | None
) -> None:
    """Render the analysis settings JSON for CONFIG."""
    analysis = load_analysis(config)
    document = analysis.build()
    text = document.string() if compact else document.pretty()

    if output:
        output.write_text(text + "\n")
        ctx.obj.console.print(
            f"[green]✓[/green] Wrote {len(analysis)} analyzer(s) to {output}"
        )
    else:
        click.echo(text)


def _details(analyzer: AnalyzerDefinition) -> str:
    """One-line summary of an analyzer's settings."""
    fields = analyzer.build().value()
    fields.pop("type")
    parts = []
    for key, value in fields.items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        parts.append(f"{key}={value}")
    return "; ".join(parts)


@cli.command(name="list")
@click.argument("config", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def list_analyzers(ctx: click.Context, config: Path) -> None:
    """List the analyzers defined in CONFIG."""
    console = ctx.obj.console
    analysis = load_analysis(config)

    if not analysis.analyzers:
        console.print("[yellow]No analyzers defined[/yellow]")
        return

    table = Table(title="Analyzers")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Details")

    for analyzer in analysis.analyzers:
        table.add_row(escape(analyzer.name), analyzer.kind, escape(_details(analyzer)))

    console.print(table)

    duplicates = analysis.duplicate_names()
    if duplicates:
        console.print(
            f"[yellow]Duplicate analyzer names:[/yellow] {', '.join(duplicates)}"
        )


def main() -> None:
    """Console script entry point."""
    cli()

