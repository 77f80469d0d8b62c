"""Parsing of raw employee lines into records."""

from employee_splitter.records.parse import iter_records, parse_record_line
from employee_splitter.records.types import EXPECTED_COLUMNS, EmployeeRecord

__all__ = ["EXPECTED_COLUMNS", "EmployeeRecord", "iter_records", "parse_record_line"]
