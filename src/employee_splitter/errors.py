"""Error types raised by the splitting pipeline."""

from pathlib import Path


class SplitError(Exception):
    """Base class for fatal splitter errors.

    Carries the file involved and the run phase the failure happened in.
    """

    def __init__(self, message: str, path: str | Path | None = None, phase: str | None = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None
        self.phase = phase

    def __str__(self) -> str:
        message = super().__str__()
        context = []
        if self.path is not None:
            context.append(f"file={self.path}")
        if self.phase is not None:
            context.append(f"phase={self.phase}")
        if not context:
            return message
        return f"{message} ({', '.join(context)})"


class KeyParseError(SplitError, ValueError):
    """The sort key column of a data line is not an integer."""

    def __init__(self, value: str, line_number: int, path: str | Path | None = None, phase: str | None = None):
        super().__init__(
            f"invalid sort key {value!r} on line {line_number}",
            path=path,
            phase=phase,
        )
        self.value = value
        self.line_number = line_number


class InputOpenError(SplitError):
    """The input file could not be opened or read."""


class OutputDirectoryError(SplitError):
    """The output directory could not be created and does not exist."""


class OutputOpenError(SplitError):
    """A destination file could not be opened."""


class OutputWriteError(SplitError):
    """Writing or flushing a destination file failed."""
