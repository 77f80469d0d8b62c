"""Registry of per-category output files."""

import logging
import os
from pathlib import Path

from employee_splitter.split.types import (
    DEFAULT_ENCODING,
    OUTPUT_SUFFIX,
    CloseFailure,
    DestinationFailed,
    DestinationOpened,
    OpenResult,
    OutputDestination,
)

logger = logging.getLogger(__name__)


def destination_path(output_dir: Path, category: str) -> Path:
    """Return the output file path for a category."""
    return output_dir / f"{category}{OUTPUT_SUFFIX}"


def is_safe_category(category: str) -> bool:
    """Check that a category can be used as a plain file name."""
    if category in ("", ".", ".."):
        return False
    if "/" in category or os.sep in category:
        return False
    if os.altsep and os.altsep in category:
        return False
    return "\0" not in category


class DestinationRegistry:
    """
    Category to open output file mapping.

    Files are opened on first lookup and receive the header line before
    anything else. Every opened file is closed by close_all().
    """

    def __init__(self, output_dir: Path, header: str, encoding: str = DEFAULT_ENCODING):
        self._output_dir = output_dir
        self._header = header
        self._encoding = encoding
        self._destinations: dict[str, OutputDestination] = {}

    def __len__(self) -> int:
        return len(self._destinations)

    def __contains__(self, category: object) -> bool:
        return category in self._destinations

    def paths(self) -> dict[str, Path]:
        """Map each opened category to its file path, in creation order."""
        return {category: dest.path for category, dest in self._destinations.items()}

    def record_counts(self) -> dict[str, int]:
        """Map each opened category to the number of records written to it."""
        return {category: dest.records_written for category, dest in self._destinations.items()}

    def destinations(self) -> list[OutputDestination]:
        return list(self._destinations.values())

    def get_or_open(self, category: str) -> OpenResult:
        """Return the destination for a category, opening it if needed."""
        existing = self._destinations.get(category)
        if existing is not None:
            return DestinationOpened(existing)

        path = destination_path(self._output_dir, category)
        if not is_safe_category(category):
            return DestinationFailed(
                category,
                path,
                ValueError(f"category {category!r} is not a valid file name"),
            )

        try:
            handle = open(path, "w", encoding=self._encoding, newline="")  # noqa: SIM115
        except OSError as exc:
            return DestinationFailed(category, path, exc)

        destination = OutputDestination(category, path, handle)
        # Register before writing the header so a failed header write is still closed.
        self._destinations[category] = destination
        try:
            destination.write_line(self._header)
        except OSError as exc:
            return DestinationFailed(category, path, exc)

        logger.debug("Opened destination %s for category %r", path, category)
        return DestinationOpened(destination, created=True)

    def close_all(self) -> list[CloseFailure]:
        """Close every open destination, continuing past individual failures."""
        failures: list[CloseFailure] = []
        for destination in self._destinations.values():
            try:
                destination.handle.close()
            except OSError as exc:
                logger.error("Failed to close %s: %s", destination.path, exc)
                failures.append(CloseFailure(destination.category, destination.path, exc))
        self._destinations.clear()
        return failures
