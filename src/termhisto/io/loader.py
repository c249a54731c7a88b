"""Delimited-text loading: one numeric column out of a CSV-like file."""

from __future__ import annotations

import csv
import math
from pathlib import Path
from typing import TYPE_CHECKING

from termhisto._internal.errors import DataFileError
from termhisto._internal.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = get_logger("io.loader")


def _parse_value(field: str) -> float | None:
    """Parse *field* as a finite float, or return None."""
    try:
        value = float(field.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_column(rows: Iterable[list[str]], column: int) -> list[float]:
    """Extract *column* from each row as a float.

    Rows whose field does not parse as a finite number are dropped.

    Args:
        rows: Decoded records, all wide enough to contain *column*.
        column: Zero-based field index.

    Returns:
        Parsed values in row order.
    """
    values: list[float] = []
    skipped = 0
    for row in rows:
        value = _parse_value(row[column])
        if value is None:
            skipped += 1
            continue
        values.append(value)
    if skipped:
        logger.debug("Skipped %d row(s) with a non-numeric value in column %d", skipped, column)
    return values


def _reject_bare_quotes(lines: Iterable[str], delimiter: str) -> Iterator[str]:
    """Pass *lines* through, failing on a quote inside an unquoted field.

    The stdlib reader keeps such quotes as literal text; a quote is only
    accepted here as the first character of a field.

    Raises:
        csv.Error: On the first bare quote.
    """
    in_quotes = False
    for line_number, line in enumerate(lines, start=1):
        field_start = not in_quotes
        i = 0
        while i < len(line):
            char = line[i]
            if in_quotes:
                if char == '"':
                    if line[i + 1 : i + 2] == '"':
                        i += 1
                    else:
                        in_quotes = False
            elif char == delimiter or char in "\r\n":
                field_start = True
            elif char == '"':
                if not field_start:
                    msg = f"bare '\"' in non-quoted field on line {line_number}"
                    raise csv.Error(msg)
                in_quotes = True
                field_start = False
            else:
                field_start = False
            i += 1
        yield line


def read_rows(path: str | Path, delimiter: str = ",") -> list[list[str]]:
    """Decode every non-empty record of a delimited file.

    All records must have the same number of fields as the first one.

    Args:
        path: File to read.
        delimiter: Single-character field separator.

    Returns:
        The records, each a list of raw field strings.

    Raises:
        DataFileError: If the file cannot be opened or decoded, or if a
            record's field count differs from the first record's.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            lines = _reject_bare_quotes(handle, delimiter)
            rows = [row for row in csv.reader(lines, delimiter=delimiter, strict=True) if row]
    except OSError as exc:
        msg = f"Cannot open data file {path}: {exc.strerror or exc}"
        raise DataFileError(msg) from exc
    except (csv.Error, UnicodeDecodeError) as exc:
        msg = f"Cannot decode data file {path}: {exc}"
        raise DataFileError(msg) from exc

    if rows:
        width = len(rows[0])
        for line_number, row in enumerate(rows[1:], start=2):
            if len(row) != width:
                msg = (
                    f"Cannot decode data file {path}: record {line_number} has "
                    f"{len(row)} field(s), expected {width}"
                )
                raise DataFileError(msg)

    logger.debug("Read %d record(s) from %s", len(rows), path)
    return rows


def read_column(path: str | Path, column: int = 1, delimiter: str = ",") -> list[float]:
    """Read one numeric column from a delimited file.

    Args:
        path: File to read.
        column: Zero-based index of the value field. Defaults to the second field.
        delimiter: Single-character field separator.

    Returns:
        Every parsable value of *column*, in file order.

    Raises:
        DataFileError: If the file as a whole cannot be read, or its records
            are too narrow to contain *column*.
    """
    rows = read_rows(path, delimiter)
    if rows and len(rows[0]) <= column:
        msg = f"Data file {path} has {len(rows[0])} field(s) per record, no column {column}"
        raise DataFileError(msg)

    values = parse_column(rows, column)
    logger.info("Loaded %d value(s) from %s", len(values), path)
    return values
