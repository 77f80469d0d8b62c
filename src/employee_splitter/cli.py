"""Command-line interface for the employee file splitter."""

import argparse
import codecs
import logging
import sys

from employee_splitter.errors import SplitError
from employee_splitter.runner import main_split
from employee_splitter.split.types import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

DEFAULT_INPUT_PATH = "./employee.csv"
DEFAULT_OUTPUT_DIR = "./post"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="employee-splitter",
        description="Split employee data into one file per department, sorted by employee number.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=DEFAULT_INPUT_PATH,
        help=f"Path to the input file (comma-separated: Department,EmployeeNo,Position,Name; default: {DEFAULT_INPUT_PATH})",
    )

    parser.add_argument(
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory for per-department files (default: {DEFAULT_OUTPUT_DIR})",
    )

    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Text encoding of the input and output files (default: {DEFAULT_ENCODING})",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    # Validate encoding is known
    try:
        codecs.lookup(args.encoding)
    except LookupError:
        parser.error(f"--encoding must be a known text encoding, got {args.encoding!r}")

    try:
        main_split(
            input_path=args.input_file,
            output_dir=args.output_dir,
            encoding=args.encoding,
        )
    except SplitError as exc:
        logger.error("Split failed: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
