"""Parsing utilities for employee data lines."""

import re
from collections.abc import Iterable, Iterator

from employee_splitter.errors import KeyParseError
from employee_splitter.records.types import (
    CATEGORY_COLUMN,
    EXPECTED_COLUMNS,
    FIELD_SEPARATOR,
    SORT_KEY_COLUMN,
    EmployeeRecord,
)
from employee_splitter.split.types import SplitStats

# Optional sign followed by digits; int() alone would also accept "1_000".
_INTEGER_RE = re.compile(r"[+-]?\d+")

# Column padding is ASCII control characters and space only; U+3000 and
# other Unicode spaces are part of the value.
_PADDING = "".join(map(chr, range(33)))


def trim_column(text: str) -> str:
    return text.strip(_PADDING)


def split_columns(line: str) -> list[str]:
    """Split a line into columns, dropping trailing empty columns."""
    parts = line.split(FIELD_SEPARATOR)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_sort_key(text: str, line_number: int = 0) -> int:
    """Parse a trimmed sort key column, raising KeyParseError if it is not an integer."""
    value = trim_column(text)
    if not _INTEGER_RE.fullmatch(value):
        raise KeyParseError(value, line_number)
    return int(value)


def parse_record_line(
    raw_line: str,
    line_number: int = 0,
    expected_columns: int = EXPECTED_COLUMNS,
) -> EmployeeRecord | None:
    """
    Parse one raw data line into a record.

    Returns None for lines that do not have exactly `expected_columns`
    columns (trailing empty columns are not counted) or whose category
    is blank. Raises KeyParseError when the sort key column is not an
    integer.
    """
    line = raw_line.rstrip("\n\r")
    parts = split_columns(line)
    if len(parts) != expected_columns:
        return None

    category = trim_column(parts[CATEGORY_COLUMN])
    if not category:
        return None

    sort_key = parse_sort_key(parts[SORT_KEY_COLUMN], line_number)
    return EmployeeRecord(category, sort_key, line, line_number)


def iter_records(
    lines: Iterable[str],
    stats: SplitStats | None = None,
    first_line_number: int = 2,
) -> Iterator[EmployeeRecord]:
    """Yield parsed records from raw lines in input order, skipping invalid lines."""
    for line_number, raw_line in enumerate(lines, start=first_line_number):
        if stats is not None:
            stats.lines_read += 1

        if not raw_line.strip():
            if stats is not None:
                stats.empty_lines += 1
            continue

        record = parse_record_line(raw_line, line_number)
        if record is None:
            if stats is not None:
                stats.malformed_lines += 1
            continue

        if stats is not None:
            stats.records_read += 1
        yield record
