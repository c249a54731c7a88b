"""Main Typer application, entry point for the ``termhisto`` CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from termhisto import __version__
from termhisto._internal.config import load_config
from termhisto._internal.errors import TermHistoError
from termhisto._internal.logging import get_logger, setup_logging
from termhisto.core.histogram import Histogram
from termhisto.io.loader import read_column
from termhisto.render.terminal import render_histogram

app = typer.Typer(
    name="termhisto",
    help="Draw a histogram of one numeric column of a delimited file.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(highlight=False)
err_console = Console(stderr=True)

logger = get_logger("cli")


def _version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: True if --version was passed.
    """
    if value:
        typer.echo(f"termhisto {__version__}")
        raise typer.Exit


@app.command()
def histo_cmd(
    ctx: typer.Context,
    data_file: Path | None = typer.Argument(
        None,
        help="Delimited text file to read values from.",
        show_default=False,
    ),
    title: str | None = typer.Option(
        None,
        "--title",
        "-t",
        help="Title printed above the histogram. Defaults to 'Title'.",
    ),
    bins: int | None = typer.Option(
        None,
        "--bins",
        "-b",
        help="Number of equal-width bins. Defaults to 10.",
        min=1,
    ),
    low: float | None = typer.Option(
        None,
        "--low",
        help="Inclusive low edge of the binned range. Defaults to 0.5.",
    ),
    high: float | None = typer.Option(
        None,
        "--high",
        help="Exclusive high edge of the binned range. Defaults to 10.5.",
    ),
    column: int | None = typer.Option(
        None,
        "--column",
        "-c",
        help="Zero-based index of the value field. Defaults to 1.",
        min=0,
    ),
    delimiter: str | None = typer.Option(
        None,
        "--delimiter",
        "-d",
        help="Single-character field separator. Defaults to a comma.",
    ),
    width: int | None = typer.Option(
        None,
        "--width",
        "-w",
        help="Bar width in cells. Defaults to 40.",
        min=1,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging on stderr.",
    ),
    log_json: bool = typer.Option(
        False,
        "--log-json",
        help="Emit stderr logs as one JSON object per line.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Read column values from DATA_FILE and print their histogram."""
    if data_file is None:
        # Missing data file is not an error: show usage and stop.
        typer.echo(ctx.get_usage())
        raise typer.Exit(code=0)

    setup_logging(
        logging.DEBUG if verbose else logging.WARNING,
        json_format=log_json,
        console=err_console,
    )

    try:
        config = load_config().replace(
            title=title,
            bin_count=bins,
            low_edge=low,
            high_edge=high,
            column=column,
            delimiter=delimiter,
            bar_width=width,
        )
        values = read_column(data_file, config.column, config.delimiter)
        histogram = Histogram.from_config(config)
    except TermHistoError as exc:
        logger.debug("Aborting: %s", exc)
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    histogram.fill(*values)
    logger.debug(
        "Filled %d value(s): %d in range, %d underflow, %d overflow",
        histogram.sample_count,
        histogram.total_entries(),
        histogram.underflow,
        histogram.overflow,
    )
    render_histogram(histogram.summary(), console, bar_width=config.bar_width)
