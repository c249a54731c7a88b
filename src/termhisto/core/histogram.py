"""Fixed-range, equal-width histogram with under/overflow and deciles.

Values are binned as they are filled and also retained, so that the decile
percentiles can be computed exactly over everything that was submitted,
including values that fell outside the binned range.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from termhisto._internal.errors import (
    InsufficientSamplesError,
    InvalidBinCountError,
    InvalidRangeError,
)
from termhisto._internal.logging import get_logger
from termhisto.core.models import HistogramSummary

if TYPE_CHECKING:
    from termhisto._internal.config import HistogramConfig

logger = get_logger("core.histogram")

_DECILE_COUNT = 10


class Histogram:
    """Equal-width histogram over the half-open range ``[low_edge, high_edge)``.

    Not safe for concurrent :meth:`fill` calls; callers that ingest from
    several threads must serialize them.

    Example::

        hist = Histogram("Latency", 10, 0.5, 10.5)
        hist.fill(1.0, 1.0, 5.5, 11.0, -3.0)
        hist.bins        # [2, 0, 0, 0, 0, 1, 0, 0, 0, 0]
        hist.underflow   # 1
        hist.overflow    # 1

    Attributes:
        title: Display label.
        bin_count: Number of bins.
        low_edge: Inclusive lower bound of bin 0.
        high_edge: Exclusive upper bound of the last bin.
    """

    def __init__(self, title: str, bin_count: int, low_edge: float, high_edge: float) -> None:
        """Create an empty histogram.

        Args:
            title: Display label.
            bin_count: Number of equal-width bins, must be >= 1.
            low_edge: Lower bound of the binned range.
            high_edge: Upper bound of the binned range, must exceed *low_edge*.

        Raises:
            InvalidBinCountError: If *bin_count* is not a positive integer.
            InvalidRangeError: If the edges or their difference are not finite,
                or the edges are not ordered.
        """
        if isinstance(bin_count, bool) or not isinstance(bin_count, int) or bin_count < 1:
            msg = f"bin count must be a positive integer, got {bin_count!r}"
            raise InvalidBinCountError(msg)
        if not (math.isfinite(low_edge) and math.isfinite(high_edge)):
            msg = f"range edges must be finite, got [{low_edge}, {high_edge})"
            raise InvalidRangeError(msg)
        if low_edge >= high_edge:
            msg = f"low edge must be below high edge, got [{low_edge}, {high_edge})"
            raise InvalidRangeError(msg)
        if not math.isfinite(high_edge - low_edge):
            msg = f"range width overflows, got [{low_edge}, {high_edge})"
            raise InvalidRangeError(msg)

        self._title = title
        self._bin_count = bin_count
        self._low_edge = float(low_edge)
        self._high_edge = float(high_edge)
        self._span = self._high_edge - self._low_edge
        self._bins = [0] * bin_count
        self._underflow = 0
        self._overflow = 0
        self._samples: list[float] = []

        logger.debug(
            "Created histogram %r with %d bins over [%s, %s)",
            title,
            bin_count,
            self._low_edge,
            self._high_edge,
        )

    @classmethod
    def from_config(cls, config: HistogramConfig) -> Histogram:
        """Build an empty histogram from the title, bins and range of *config*."""
        return cls(config.title, config.bin_count, config.low_edge, config.high_edge)

    @property
    def title(self) -> str:
        return self._title

    @property
    def bin_count(self) -> int:
        return self._bin_count

    @property
    def low_edge(self) -> float:
        return self._low_edge

    @property
    def high_edge(self) -> float:
        return self._high_edge

    @property
    def bin_width(self) -> float:
        """Width shared by every bin."""
        return self._span / self._bin_count

    @property
    def bins(self) -> list[int]:
        """Copy of the per-bin counts, in bin order."""
        return list(self._bins)

    @property
    def underflow(self) -> int:
        return self._underflow

    @property
    def overflow(self) -> int:
        return self._overflow

    @property
    def samples(self) -> list[float]:
        """Copy of every filled value, in submission order."""
        return list(self._samples)

    @property
    def sample_count(self) -> int:
        """Number of values filled so far, in range or not."""
        return len(self._samples)

    def _bin_index(self, value: float) -> int:
        """Map *value* to a bin index; out-of-range indices mean under/overflow.

        The scaled position is truncated toward zero, so a value less than
        one bin width below the low edge still maps to bin 0.
        """
        offset = value - self._low_edge
        scaled = self._bin_count * offset / self._span
        if math.isinf(scaled) and math.isfinite(offset):
            # bin_count * offset overflowed before the division.
            scaled = offset / self._span * self._bin_count
        if math.isnan(scaled):
            return -1
        if math.isinf(scaled):
            return self._bin_count if scaled > 0 else -1
        return int(scaled)

    def fill(self, *values: float) -> None:
        """Add each value to its bin, or to the underflow/overflow counter.

        Args:
            *values: Values to accumulate, processed in order. Every value is
                also kept for percentile computation.
        """
        for value in values:
            self._samples.append(value)
            index = self._bin_index(value)
            if index < 0:
                self._underflow += 1
            elif index >= self._bin_count:
                self._overflow += 1
            else:
                self._bins[index] += 1

    def total_entries(self) -> int:
        """Return the number of in-range fills; under/overflow are excluded."""
        return sum(self._bins)

    def bin_center(self, index: int) -> float:
        """Return the midpoint of bin *index*.

        Valid for ``0 <= index < bin_count``; other indices are not checked
        and yield points outside the binned range.
        """
        return self._low_edge + (index + 0.5) * self._span / self._bin_count

    def bin_edges(self) -> list[float]:
        """Return the ``bin_count + 1`` bin boundaries, low to high."""
        return [
            self._low_edge + i * self._span / self._bin_count for i in range(self._bin_count + 1)
        ]

    def percentiles(self) -> list[float]:
        """Return the 10th, 20th, ..., 100th nearest-rank percentiles.

        The percentile ``p`` is the sample at zero-based rank
        ``n * p // 100 - 1`` of the sorted samples, where ``n`` counts every
        filled value. With fewer than ten samples the low ranks go negative
        and are clamped to the smallest sample.
        Sorting works on a copy; :attr:`samples` keeps submission order.

        Raises:
            InsufficientSamplesError: If nothing has been filled.
        """
        n = len(self._samples)
        if n == 0:
            msg = f"cannot compute percentiles of histogram {self._title!r}: no samples"
            raise InsufficientSamplesError(msg)

        ordered = np.sort(np.asarray(self._samples, dtype=np.float64))
        ranks = np.maximum(n * np.arange(1, _DECILE_COUNT + 1) // _DECILE_COUNT - 1, 0)
        return [float(value) for value in ordered[ranks]]

    def summary(self) -> HistogramSummary:
        """Snapshot the histogram for rendering.

        Percentiles are left empty when nothing has been filled, so an empty
        data file still renders.
        """
        percentiles = self.percentiles() if self._samples else []
        return HistogramSummary(
            title=self._title,
            entries=self.total_entries(),
            underflow=self._underflow,
            overflow=self._overflow,
            bin_centers=tuple(self.bin_center(i) for i in range(self._bin_count)),
            bin_counts=tuple(self._bins),
            percentiles=tuple(percentiles),
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(title={self._title!r}, bin_count={self._bin_count}, "
            f"low_edge={self._low_edge}, high_edge={self._high_edge})"
        )
