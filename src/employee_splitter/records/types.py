"""Shared record definitions."""

from dataclasses import dataclass

# Field separator and fixed column layout: category, sort key, two extra columns.
FIELD_SEPARATOR = ","
EXPECTED_COLUMNS = 4
CATEGORY_COLUMN = 0
SORT_KEY_COLUMN = 1


@dataclass(frozen=True, slots=True)
class EmployeeRecord:
    """One accepted data line, keeping the original text for output."""

    category: str
    sort_key: int
    raw_line: str
    line_number: int = 0
