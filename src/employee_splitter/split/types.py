"""Shared constants and metadata structures for splitting."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TextIO, TypeAlias

# Output destinations are named "<category>.csv".
OUTPUT_SUFFIX = ".csv"

# Every output line, header included, ends with this terminator.
LINE_TERMINATOR = "\n"

DEFAULT_ENCODING = "utf-8"


class RunState(Enum):
    """Phases of a split run."""

    IDLE = "idle"
    READING_HEADER = "reading_header"
    READING = "reading"
    SORTING = "sorting"
    WRITING = "writing"
    CLOSING = "closing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class SplitStats:
    """Statistics from a split_by_category run."""

    lines_read: int = 0
    empty_lines: int = 0
    malformed_lines: int = 0
    records_read: int = 0
    records_written: int = 0


@dataclass
class OutputDestination:
    """An open output file bound to one category."""

    category: str
    path: Path
    handle: TextIO
    records_written: int = 0

    def write_line(self, line: str) -> None:
        """Append one line and flush it to the file."""
        self.handle.write(line + LINE_TERMINATOR)
        self.handle.flush()


@dataclass(frozen=True, slots=True)
class DestinationOpened:
    """Lookup-or-create succeeded."""

    destination: OutputDestination
    created: bool = False


@dataclass(frozen=True, slots=True)
class DestinationFailed:
    """Lookup-or-create failed; `cause` holds the underlying error."""

    category: str
    path: Path
    cause: Exception


OpenResult: TypeAlias = DestinationOpened | DestinationFailed


@dataclass(frozen=True, slots=True)
class CloseFailure:
    """A destination whose close() raised."""

    category: str
    path: Path
    cause: Exception


@dataclass
class SplitResult:
    """Outcome of a completed split run."""

    state: RunState
    header: str | None
    stats: SplitStats
    destinations: dict[str, Path] = field(default_factory=dict)
    record_counts: dict[str, int] = field(default_factory=dict)
    close_failures: list[CloseFailure] = field(default_factory=list)
