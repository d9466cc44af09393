"""Reading and writing the yearly internet-usage CSV files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Union

HEADER = "Year,Percentage_Internet_User,Population"
MAX_ROWS = 100

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|infinity|inf|nan)",
    re.IGNORECASE,
)

PathType = Union[str, "PathLike[str]"]


@dataclass
class DataRow:
    """One year of data: internet users in percent and total population."""

    year: int
    percentage: float = 0.0
    population: float = 0.0


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _leading_float(text: str) -> float:
    """Parse the number at the start of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _parse_line(line: str) -> DataRow:
    # Empty fields are skipped, so consecutive commas count as one separator.
    fields = [field for field in line.split(",") if field]
    year = _leading_int(fields[0]) if fields else 0
    percentage = _leading_float(fields[1]) if len(fields) > 1 else 0.0
    population = _leading_float(fields[2]) if len(fields) > 2 else 0.0
    return DataRow(year, percentage, population)


def read_csv(path: PathType) -> list[DataRow]:
    """Read up to ``MAX_ROWS`` data rows, skipping the header line.

    Raises ``OSError`` when the file cannot be opened.
    """
    rows: list[DataRow] = []
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            if len(rows) >= MAX_ROWS:
                break
            if not line.strip():
                continue
            rows.append(_parse_line(line))
    return rows


def write_csv(path: PathType, rows: Iterable[DataRow]) -> None:
    """Write rows with the standard header, six decimals for percentages."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(HEADER + "\n")
        for row in rows:
            handle.write(f"{row.year:d},{row.percentage:.6f},{row.population:.0f}\n")