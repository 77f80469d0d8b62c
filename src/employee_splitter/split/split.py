"""Read, sort and partition employee records into per-category files."""

import logging
from collections.abc import Iterable
from operator import attrgetter
from pathlib import Path
from typing import TextIO

from employee_splitter.errors import (
    InputOpenError,
    OutputOpenError,
    OutputWriteError,
    SplitError,
)
from employee_splitter.records.parse import iter_records
from employee_splitter.records.types import EmployeeRecord
from employee_splitter.split.destinations import DestinationRegistry
from employee_splitter.split.types import (
    DEFAULT_ENCODING,
    CloseFailure,
    DestinationFailed,
    RunState,
    SplitResult,
    SplitStats,
)

logger = logging.getLogger(__name__)


def _advance(current: RunState, new: RunState) -> RunState:
    logger.debug("Run state: %s -> %s", current.value, new.value)
    return new


def read_header(handle: TextIO) -> str | None:
    """Read the header line, returning None for an empty input."""
    line = handle.readline()
    if not line:
        return None
    return line.rstrip("\n\r")


def read_records(lines: Iterable[str], stats: SplitStats) -> list[EmployeeRecord]:
    """Collect every accepted data line, in input order."""
    return list(iter_records(lines, stats))


def sort_records(records: list[EmployeeRecord]) -> None:
    """Sort records in place by sort key; equal keys keep their input order."""
    records.sort(key=attrgetter("sort_key"))


def write_sorted_records(
    records: Iterable[EmployeeRecord],
    registry: DestinationRegistry,
    stats: SplitStats,
) -> None:
    """
    Append each record to its category's destination.

    Destinations are opened on first use. Any open or write failure aborts
    the loop; closing is left to the owner of the registry.
    """
    for record in records:
        result = registry.get_or_open(record.category)
        if isinstance(result, DestinationFailed):
            raise OutputOpenError(
                f"cannot open destination for category {result.category!r}: {result.cause}",
                path=result.path,
                phase=RunState.WRITING.value,
            ) from result.cause

        destination = result.destination
        try:
            destination.write_line(record.raw_line)
        except OSError as exc:
            raise OutputWriteError(
                f"cannot write line {record.line_number}: {exc}",
                path=destination.path,
                phase=RunState.WRITING.value,
            ) from exc

        destination.records_written += 1
        stats.records_written += 1


def split_by_category(
    input_path: str | Path,
    output_dir: str | Path,
    encoding: str = DEFAULT_ENCODING,
) -> SplitResult:
    """
    Split the input file into one sorted file per category.

    The whole input is loaded and sorted before any output is written.
    Each destination gets the input header followed by its records in
    ascending sort key order. The output directory must already exist.

    Raises:
        SplitError: on any fatal failure; `phase` names the run state
            the failure happened in. Destinations opened before the
            failure are closed before the error propagates.
    """
    input_file = Path(input_path)
    output_path = Path(output_dir)
    stats = SplitStats()
    state = RunState.IDLE
    registry: DestinationRegistry | None = None
    paths: dict[str, Path] = {}
    counts: dict[str, int] = {}
    close_failures: list[CloseFailure] = []

    try:
        state = _advance(state, RunState.READING_HEADER)
        try:
            handle = open(input_file, encoding=encoding, newline="")  # noqa: SIM115
        except (OSError, LookupError) as exc:
            raise InputOpenError(f"cannot open input: {exc}", path=input_file) from exc

        try:
            with handle:
                header = read_header(handle)
                if header is None:
                    logger.info("Input %s is empty, nothing to split", input_file.name)
                    state = _advance(state, RunState.COMPLETED)
                    return SplitResult(state, None, stats)

                state = _advance(state, RunState.READING)
                records = read_records(handle, stats)
        except (OSError, UnicodeDecodeError) as exc:
            raise InputOpenError(f"cannot read input: {exc}", path=input_file) from exc

        state = _advance(state, RunState.SORTING)
        sort_records(records)

        state = _advance(state, RunState.WRITING)
        registry = DestinationRegistry(output_path, header, encoding)
        try:
            write_sorted_records(records, registry, stats)
        finally:
            paths = registry.paths()
            counts = registry.record_counts()
            state = _advance(state, RunState.CLOSING)
            close_failures = registry.close_all()

    except SplitError as exc:
        if exc.path is None:
            exc.path = str(input_file)
        if exc.phase is None:
            exc.phase = state.value
        _advance(state, RunState.FAILED)
        raise

    state = _advance(state, RunState.COMPLETED)
    return SplitResult(state, header, stats, paths, counts, close_failures)
