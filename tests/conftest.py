"""Shared test fixtures for the termhisto test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


# =============================================================================
# Pytest configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-apply markers based on test directory structure."""
    for item in items:
        test_path = str(item.fspath)
        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/e2e/" in test_path:
            item.add_marker(pytest.mark.e2e)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TERMHISTO_* variables from the host out of every test."""
    for name in (
        "TERMHISTO_TITLE",
        "TERMHISTO_BINS",
        "TERMHISTO_LOW",
        "TERMHISTO_HIGH",
        "TERMHISTO_COLUMN",
        "TERMHISTO_DELIMITER",
        "TERMHISTO_BAR_WIDTH",
    ):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Data files
# =============================================================================


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """CSV whose second column holds 1.0, 1.0, 5.5, 11.0, -3.0 and one bad row."""
    path = tmp_path / "sample.csv"
    path.write_text(
        "a,1.0\n"
        "b,1.0\n"
        "c,5.5\n"
        "d,not-a-number\n"
        "e,11.0\n"
        "f,-3.0\n"
    )
    return path


@pytest.fixture
def hundred_csv(tmp_path: Path) -> Path:
    """CSV with the values 1..100 in its second column."""
    path = tmp_path / "hundred.csv"
    path.write_text("".join(f"row{i},{i}\n" for i in range(1, 101)))
    return path
