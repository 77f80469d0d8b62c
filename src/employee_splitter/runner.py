import logging
import time
from pathlib import Path

from employee_splitter.errors import OutputDirectoryError
from employee_splitter.split.split import split_by_category
from employee_splitter.split.types import DEFAULT_ENCODING, SplitResult

logger = logging.getLogger(__name__)


def prepare_output_dir(output_dir: str | Path) -> Path:
    """
    Create the output directory if it does not exist.

    A creation failure is logged; the run only continues if the directory
    exists anyway.
    """
    output_path = Path(output_dir)
    try:
        output_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Could not create output directory %s: %s", output_path, exc)
        if not output_path.is_dir():
            raise OutputDirectoryError(
                f"output directory is not available: {exc}",
                path=output_path,
            ) from exc
    return output_path


def run(
    input_path: str,
    output_dir: str,
    encoding: str = DEFAULT_ENCODING,
) -> SplitResult:
    """
    Split an employee file into per-department files.

    1. Prepare the output directory
    2. Read, sort and partition the input
    3. Log a summary of what was written
    """
    total_start = time.perf_counter()
    input_file = Path(input_path)

    logger.info(
        "Starting: file=%s, output=%s, encoding=%s",
        input_file.name,
        output_dir,
        encoding,
    )

    output_path = prepare_output_dir(output_dir)
    result = split_by_category(input_file, output_path, encoding=encoding)
    stats = result.stats

    if stats.malformed_lines > 0:
        logger.warning(
            "%d malformed lines skipped (read=%d, accepted=%d)",
            stats.malformed_lines,
            stats.lines_read,
            stats.records_read,
        )

    for category, path in result.destinations.items():
        logger.debug(
            "Wrote %s for category %r: %d records",
            path,
            category,
            result.record_counts.get(category, 0),
        )

    if result.close_failures:
        logger.warning("%d destinations failed to close cleanly", len(result.close_failures))

    total_time = time.perf_counter() - total_start
    logger.info(
        "Done: %d records into %d files (total %.2fs)",
        stats.records_written,
        len(result.destinations),
        total_time,
    )
    return result


def main_split(input_path: str, output_dir: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Main entry point that prints the written files to stdout."""
    result = run(input_path, output_dir, encoding=encoding)
    for path in result.destinations.values():
        print(path)
