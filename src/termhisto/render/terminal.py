"""Terminal rendering of a :class:`~termhisto.core.models.HistogramSummary`.

Output goes through a Rich ``Console`` so bold and colour are only emitted
when the target stream supports them. Every line is printed with soft
wrapping so long percentile lines are never folded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from termhisto.core.models import HistogramSummary

BAR_GLYPH = "█"
BAR_STYLE = "bold red"
DEFAULT_BAR_WIDTH = 40


def format_bar(count: int, label: float, width: int = DEFAULT_BAR_WIDTH) -> Text:
    """Build one bar row: the bin label followed by *width* cells.

    The first ``min(count, width)`` cells are filled; a count of zero
    leaves the bar empty.

    Args:
        count: Bin count.
        label: Bin center, shown in scientific notation.
        width: Total number of cells.
    """
    filled = max(0, min(count, width))
    row = Text(f"{label:.1e}|")
    row.append(BAR_GLYPH * filled, style=BAR_STYLE)
    row.append(" " * (width - filled))
    return row


def format_percentiles(percentiles: Sequence[float]) -> str:
    """Format deciles as ``Percentiles: 10th 1.00 | 20th 2.00 | ...``."""
    if not percentiles:
        return "Percentiles: n/a"
    parts = [f"{10 * (i + 1)}th {value:.2f}" for i, value in enumerate(percentiles)]
    return "Percentiles: " + " | ".join(parts)


def render_title(summary: HistogramSummary, console: Console) -> None:
    console.print(Text(summary.title, style="bold"), soft_wrap=True)


def render_bars(summary: HistogramSummary, console: Console, width: int = DEFAULT_BAR_WIDTH) -> None:
    for center, count in zip(summary.bin_centers, summary.bin_counts, strict=True):
        console.print(format_bar(count, center, width), soft_wrap=True)
    console.print(Text("-" * width), soft_wrap=True)


def render_stats(summary: HistogramSummary, console: Console) -> None:
    console.print(Text(f"entries: {summary.entries}"), soft_wrap=True)
    console.print(
        Text(f"underflow: {summary.underflow} | overflow: {summary.overflow}"),
        soft_wrap=True,
    )
    console.print(Text(format_percentiles(summary.percentiles)), soft_wrap=True)


def render_histogram(
    summary: HistogramSummary,
    console: Console | None = None,
    *,
    bar_width: int = DEFAULT_BAR_WIDTH,
) -> None:
    """Print the title, bar rows, separator and statistics of *summary*.

    Args:
        summary: Histogram snapshot to draw.
        console: Destination console. Defaults to a new stdout console.
        bar_width: Number of cells per bar and dashes in the separator.
    """
    if console is None:
        console = Console(highlight=False)
    render_title(summary, console)
    render_bars(summary, console, bar_width)
    render_stats(summary, console)
