#!/usr/bin/env python3
"""Командная строка: тонкий адаптер над каталогом функций и анализатором цифр.

    forge compute factorial 20
    forge compute rising 3 4 --precision bounded
    forge compute falling -- -5 3          # отрицательный x после "--"
    forge compute super 30 --digits --json
    forge digits "1210"

Коды выхода: 0 успех, 1 ошибка входа (домен, потолок, арность), 2 таймаут.
"""

import sys
from functools import partial
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from src.analysis.digit_stats import analyze_digits, format_histogram
from src.app.catalog import CATALOG, evaluate
from src.app.config import ForgeConfig
from src.app.logging_setup import configure_logging
from src.app.worker import ComputationTimeout, run_in_worker
from src.core.contracts import export_computation_result
from src.core.domain.computation import CombinatorialFunction
from src.core.domain.precision import PrecisionMode

EXIT_INPUT_ERROR = 1
EXIT_TIMEOUT = 2

app = typer.Typer(add_completion=False, help="Exact factorial-like functions and digit statistics.")


def _load_config() -> ForgeConfig:
    try:
        config = ForgeConfig.from_env()
    except ValueError as exc:
        Console(stderr=True).print(f"error: {exc}", style="red", markup=False, highlight=False)
        raise typer.Exit(EXIT_INPUT_ERROR)
    configure_logging(config.log_level)
    return config


@app.command()
def compute(
    function: Annotated[CombinatorialFunction, typer.Argument(help="Function to evaluate")],
    args: Annotated[list[int], typer.Argument(help="Arguments: n, or x n for rising/falling/multi")],
    precision: Annotated[
        Optional[PrecisionMode],
        typer.Option("--precision", "-p", case_sensitive=False, help="bounded (Int64) or arbitrary"),
    ] = None,
    digits: Annotated[bool, typer.Option("--digits", "-d", help="Print the digit histogram")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    timeout: Annotated[
        Optional[float], typer.Option("--timeout", "-t", min=0.001, help="Give up after SECONDS")
    ] = None,
) -> None:
    """Compute one function and print its exact value."""
    config = _load_config()
    err = Console(stderr=True)
    mode = precision or config.default_precision
    wait = timeout if timeout is not None else config.timeout_seconds

    try:
        result = run_in_worker(
            partial(evaluate, function, args, mode, with_histogram=digits, config=config),
            timeout=wait,
        )
    except ComputationTimeout as exc:
        err.print(f"error: {exc}", style="red", markup=False, highlight=False)
        raise typer.Exit(EXIT_TIMEOUT)
    except (TypeError, ValueError) as exc:
        err.print(f"error: {exc}", style="red", markup=False, highlight=False)
        raise typer.Exit(EXIT_INPUT_ERROR)

    if as_json:
        typer.echo(export_computation_result(result))
        return

    title = CATALOG[result.function].title
    call = ", ".join(str(v) for v in result.arguments.values())
    typer.echo(f"{title}({call}) = {result.value}")
    if digits and result.histogram is not None:
        typer.echo(format_histogram(result.histogram))


@app.command("digits")
def digits_command(
    text: Annotated[str, typer.Argument(help="Text to analyze; '-' reads standard input")],
) -> None:
    """Count digit occurrences in arbitrary text."""
    _load_config()
    if text == "-":
        text = sys.stdin.read()
    typer.echo(format_histogram(analyze_digits(text)))


@app.command("list")
def list_functions() -> None:
    """List the available functions."""
    table = Table("name", "arguments", "title")
    for entry in CATALOG.values():
        table.add_row(entry.function.value, " ".join(entry.parameters), entry.title)
    Console().print(table)


# Allow the script to be run standalone (useful during development).
if __name__ == "__main__":
    app()
