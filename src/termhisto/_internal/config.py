"""Configuration loading for termhisto."""

from __future__ import annotations

import dataclasses
import math
import os
from dataclasses import dataclass
from typing import Any

from termhisto._internal.errors import ConfigError


@dataclass(frozen=True)
class HistogramConfig:
    """Settings for one histogram run.

    Attributes:
        title: Label printed above the bars.
        bin_count: Number of equal-width bins.
        low_edge: Inclusive lower bound of the binned range.
        high_edge: Exclusive upper bound of the binned range.
        column: Zero-based index of the field holding the values.
        delimiter: Single-character field separator.
        bar_width: Number of cells in each rendered bar.
    """

    title: str = "Title"
    bin_count: int = 10
    low_edge: float = 0.5
    high_edge: float = 10.5
    column: int = 1
    delimiter: str = ","
    bar_width: int = 40

    def replace(self, **overrides: Any) -> HistogramConfig:
        """Return a validated copy with every non-None override applied.

        Args:
            **overrides: Field values to change. ``None`` means "keep".

        Raises:
            ConfigError: If the resulting configuration is invalid.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        config = dataclasses.replace(self, **changes)
        validate_config(config)
        return config


def validate_config(config: HistogramConfig) -> None:
    """Check the cross-field and range constraints of *config*.

    Raises:
        ConfigError: On the first violated constraint.
    """
    if config.bin_count < 1:
        msg = f"bin count must be >= 1, got: {config.bin_count}"
        raise ConfigError(msg)
    if not (math.isfinite(config.low_edge) and math.isfinite(config.high_edge)):
        msg = f"range edges must be finite, got: [{config.low_edge}, {config.high_edge})"
        raise ConfigError(msg)
    if config.low_edge >= config.high_edge:
        msg = f"low edge must be below high edge, got: [{config.low_edge}, {config.high_edge})"
        raise ConfigError(msg)
    if not math.isfinite(config.high_edge - config.low_edge):
        msg = f"range width overflows, got: [{config.low_edge}, {config.high_edge})"
        raise ConfigError(msg)
    if config.column < 0:
        msg = f"column must be >= 0, got: {config.column}"
        raise ConfigError(msg)
    if len(config.delimiter) != 1:
        msg = f"delimiter must be a single character, got: {config.delimiter!r}"
        raise ConfigError(msg)
    if config.bar_width < 1:
        msg = f"bar width must be >= 1, got: {config.bar_width}"
        raise ConfigError(msg)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got: {raw!r}"
        raise ConfigError(msg) from None


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        msg = f"{name} must be a number, got: {raw!r}"
        raise ConfigError(msg) from None


def load_config() -> HistogramConfig:
    """Load configuration from environment variables with defaults.

    Environment variables:
        TERMHISTO_TITLE: Histogram title (default: "Title").
        TERMHISTO_BINS: Number of bins (default: 10).
        TERMHISTO_LOW: Low edge of the range (default: 0.5).
        TERMHISTO_HIGH: High edge of the range (default: 10.5).
        TERMHISTO_COLUMN: Zero-based value column (default: 1).
        TERMHISTO_DELIMITER: Field delimiter (default: ",").
        TERMHISTO_BAR_WIDTH: Bar width in cells (default: 40).

    Returns:
        Populated HistogramConfig instance.

    Raises:
        ConfigError: If an environment variable has an invalid value.
    """
    defaults = HistogramConfig()
    config = HistogramConfig(
        title=os.environ.get("TERMHISTO_TITLE", defaults.title),
        bin_count=_env_int("TERMHISTO_BINS", defaults.bin_count),
        low_edge=_env_float("TERMHISTO_LOW", defaults.low_edge),
        high_edge=_env_float("TERMHISTO_HIGH", defaults.high_edge),
        column=_env_int("TERMHISTO_COLUMN", defaults.column),
        delimiter=os.environ.get("TERMHISTO_DELIMITER", defaults.delimiter),
        bar_width=_env_int("TERMHISTO_BAR_WIDTH", defaults.bar_width),
    )
    validate_config(config)
    return config
