"""Typer-powered command-line demo for the matrixlab engine."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.table import Table

from matrixlab import MatrixError, is_magic, magic, magic_constant, to_frame

from .config import DEFAULT_LOG_LEVEL, DEFAULT_MAGIC_ORDER, DEFAULT_PRECISION, DemoSettings
from .demo import regression_cases, results_frame, run_cases

app = typer.Typer(help="Exercise the matrixlab engine with literal fixture matrices.")
console = Console()
LOGGER = logging.getLogger(__name__)


@app.callback()
def configure(
    ctx: typer.Context,
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        help="Python logging level (DEBUG shows pivot swaps and scheduling).",
    ),
) -> None:
    """Configure logging before any command runs."""

    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO))
    ctx.obj = log_level.upper()


@app.command("regression")
def regression(
    ctx: typer.Context,
    precision: int = typer.Option(
        DEFAULT_PRECISION,
        "--precision",
        help="Decimals shown for computed values.",
    ),
) -> None:
    """Run the cost, gradient descent, normalisation and normal equation fixtures."""

    if precision < 0:
        console.print("[bold red]precision must be >= 0[/bold red]")
        raise typer.Exit(code=1)
    settings = DemoSettings(precision=precision, log_level=ctx.obj or DEFAULT_LOG_LEVEL)
    LOGGER.debug("Running regression fixtures with %s", settings.describe())
    try:
        results = run_cases(regression_cases())
    except MatrixError as exc:
        console.print(f"[bold red]Fixture failed:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    table = Table(title="Regression fixtures", show_lines=True)
    table.add_column("Section")
    table.add_column("Case")
    table.add_column("Target", style="cyan")
    table.add_column("Actual", style="green")
    frame = results_frame(results, settings.precision)
    for row in frame.itertuples(index=False):
        table.add_row(row.section, row.case, row.target, row.actual)
    console.print(table)


@app.command("magic")
def magic_square(
    order: int = typer.Option(
        DEFAULT_MAGIC_ORDER,
        "--order",
        help="Side length of the square (any positive order except 2).",
    ),
) -> None:
    """Print a magic square with its magic constant."""

    try:
        square = magic(order)
    except MatrixError as exc:
        console.print(f"[bold red]Cannot build magic square:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"Magic square of order {order}", show_header=False, show_lines=True)
    for _ in range(square.columns):
        table.add_column(justify="right")
    for row in to_frame(square).itertuples(index=False):
        table.add_row(*(f"{value:g}" for value in row))
    console.print(table)
    console.print(f"Magic constant: [cyan]{magic_constant(order)}[/cyan]")
    verdict = "[bold green]yes[/bold green]" if is_magic(square) else "[bold red]no[/bold red]"
    console.print(f"Valid magic square: {verdict}")


def main() -> None:
    """Entry point for the ``matrixlab`` console script."""

    app()


if __name__ == "__main__":
    main()
