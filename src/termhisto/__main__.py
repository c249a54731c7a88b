"""Allow ``python -m termhisto``."""

from __future__ import annotations

from termhisto.cli.app import app

app(prog_name="termhisto")
