"""Summary dataclass handed from the histogram engine to the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HistogramSummary:
    """Point-in-time view of a histogram, ready for display.

    Attributes:
        title: Display label of the histogram.
        entries: Number of in-range fills (sum of all bin counts).
        underflow: Number of fills below the low edge.
        overflow: Number of fills at or above the high edge.
        bin_centers: Midpoint value of each bin, in bin order.
        bin_counts: Count of each bin, in bin order.
        percentiles: 10th through 100th nearest-rank percentiles over every
            filled value. Empty when nothing has been filled.
    """

    title: str
    entries: int
    underflow: int
    overflow: int
    bin_centers: tuple[float, ...] = field(default_factory=tuple)
    bin_counts: tuple[int, ...] = field(default_factory=tuple)
    percentiles: tuple[float, ...] = field(default_factory=tuple)

    @property
    def total_samples(self) -> int:
        """Number of values filled, including underflow and overflow."""
        return self.entries + self.underflow + self.overflow
