"""termhisto — draw terminal histograms of a numeric data column."""

from __future__ import annotations

from termhisto._internal.config import HistogramConfig, load_config
from termhisto._internal.errors import (
    ConfigError,
    DataFileError,
    HistogramError,
    InsufficientSamplesError,
    InvalidBinCountError,
    InvalidRangeError,
    TermHistoError,
)
from termhisto.core.histogram import Histogram
from termhisto.core.models import HistogramSummary
from termhisto.io.loader import read_column
from termhisto.render.terminal import render_histogram

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DataFileError",
    "Histogram",
    "HistogramConfig",
    "HistogramError",
    "HistogramSummary",
    "InsufficientSamplesError",
    "InvalidBinCountError",
    "InvalidRangeError",
    "TermHistoError",
    "load_config",
    "read_column",
    "render_histogram",
]
