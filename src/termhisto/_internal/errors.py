"""Custom exception hierarchy for termhisto."""

from __future__ import annotations


class TermHistoError(Exception):
    """Base exception for all termhisto errors.

    The CLI catches this class to turn any expected failure into an error
    message and a non-zero exit status.
    """


class ConfigError(TermHistoError):
    """Raised when configuration is invalid.

    Examples:
        - ``TERMHISTO_BINS`` is not an integer.
        - The configured low edge is not below the high edge.
    """


class DataFileError(TermHistoError):
    """Raised when a data file cannot be opened or decoded as a whole.

    Individual rows whose value field fails to parse are not errors; they
    are skipped by the loader.
    """


class HistogramError(TermHistoError):
    """Base class for errors raised by :class:`~termhisto.core.histogram.Histogram`."""


class InvalidBinCountError(HistogramError):
    """Raised when a histogram is constructed with a non-positive bin count."""


class InvalidRangeError(HistogramError):
    """Raised when a histogram's low edge is not strictly below its high edge."""


class InsufficientSamplesError(HistogramError):
    """Raised when percentiles are requested from a histogram with no samples."""
