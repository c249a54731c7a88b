"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from termhisto._internal.config import HistogramConfig, load_config
from termhisto._internal.errors import ConfigError


class TestHistogramConfig:
    """Tests for the HistogramConfig dataclass."""

    def test_defaults(self):
        """HistogramConfig matches the default invocation."""
        config = HistogramConfig()
        assert config.title == "Title"
        assert config.bin_count == 10
        assert config.low_edge == 0.5
        assert config.high_edge == 10.5
        assert config.column == 1
        assert config.delimiter == ","
        assert config.bar_width == 40

    def test_frozen(self):
        """HistogramConfig is immutable."""
        config = HistogramConfig()
        with pytest.raises(AttributeError):
            config.title = "changed"  # type: ignore[misc]

    def test_replace_skips_none(self):
        """replace() keeps fields whose override is None."""
        config = HistogramConfig().replace(title="New", bin_count=None, high_edge=20.0)
        assert config.title == "New"
        assert config.bin_count == 10
        assert config.high_edge == 20.0

    def test_replace_validates(self):
        """replace() rejects an inverted range."""
        with pytest.raises(ConfigError, match="low edge must be below high edge"):
            HistogramConfig().replace(low_edge=50.0)

    def test_replace_rejects_long_delimiter(self):
        with pytest.raises(ConfigError, match="single character"):
            HistogramConfig().replace(delimiter=";;")


class TestLoadConfig:
    """Tests for the load_config function."""

    def test_defaults_from_env(self):
        """load_config returns defaults when no env vars are set."""
        assert load_config() == HistogramConfig()

    def test_values_from_env(self, monkeypatch: pytest.MonkeyPatch):
        """TERMHISTO_* variables are read from the environment."""
        monkeypatch.setenv("TERMHISTO_TITLE", "Response size")
        monkeypatch.setenv("TERMHISTO_BINS", "20")
        monkeypatch.setenv("TERMHISTO_LOW", "-1.5")
        monkeypatch.setenv("TERMHISTO_HIGH", "1.5")
        monkeypatch.setenv("TERMHISTO_COLUMN", "0")
        monkeypatch.setenv("TERMHISTO_DELIMITER", ";")
        monkeypatch.setenv("TERMHISTO_BAR_WIDTH", "60")

        config = load_config()
        assert config.title == "Response size"
        assert config.bin_count == 20
        assert config.low_edge == -1.5
        assert config.high_edge == 1.5
        assert config.column == 0
        assert config.delimiter == ";"
        assert config.bar_width == 60

    def test_invalid_bins_raises_error(self, monkeypatch: pytest.MonkeyPatch):
        """Non-integer TERMHISTO_BINS raises ConfigError."""
        monkeypatch.setenv("TERMHISTO_BINS", "ten")
        with pytest.raises(ConfigError, match="must be an integer"):
            load_config()

    def test_zero_bins_raises_error(self, monkeypatch: pytest.MonkeyPatch):
        """TERMHISTO_BINS of 0 raises ConfigError."""
        monkeypatch.setenv("TERMHISTO_BINS", "0")
        with pytest.raises(ConfigError, match="must be >= 1"):
            load_config()

    def test_invalid_low_raises_error(self, monkeypatch: pytest.MonkeyPatch):
        """Non-numeric TERMHISTO_LOW raises ConfigError."""
        monkeypatch.setenv("TERMHISTO_LOW", "abc")
        with pytest.raises(ConfigError, match="must be a number"):
            load_config()

    def test_infinite_high_raises_error(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TERMHISTO_HIGH", "inf")
        with pytest.raises(ConfigError, match="finite"):
            load_config()

    def test_overflowing_range_raises_error(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TERMHISTO_LOW", "-1e308")
        monkeypatch.setenv("TERMHISTO_HIGH", "1e308")
        with pytest.raises(ConfigError, match="width overflows"):
            load_config()

    def test_negative_column_raises_error(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TERMHISTO_COLUMN", "-1")
        with pytest.raises(ConfigError, match="column must be >= 0"):
            load_config()

    def test_zero_bar_width_raises_error(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TERMHISTO_BAR_WIDTH", "0")
        with pytest.raises(ConfigError, match="bar width"):
            load_config()
