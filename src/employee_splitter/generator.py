"""
Sample employee dataset generator.

Writes a header and N random employee rows (department, employee number,
position, name) in the format the splitter reads. Employee numbers are
sequential and zero-padded to four digits; departments, positions and names
are drawn at random, so output files are not pre-sorted by department.
"""

import argparse
import random
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

# Sample files use CRLF line endings.
LINE_TERMINATOR = "\r\n"

HEADER = "Department,EmployeeNo,Position,Name"

DEPARTMENTS = ["Sales", "HumanResources", "Accounting", "Development"]

POSITIONS = ["Manager", "SectionChief", "Staff"]

SURNAMES = [
    "Tokugawa", "Oda", "Toyotomi", "Takeda", "Date", "Sanada", "Uesugi", "Akechi", "Ishida", "Maeda",
    "Sakamoto", "Takasugi", "Yoshida", "Saigo", "Okubo", "Katsu", "Fukuzawa", "Sakuma", "Kondo", "Okita",
    "Shibusawa", "Ii", "Mori", "Shimazu", "Ito", "Takahashi", "Goto", "Okakura", "Inukai", "Iwakura",
    "Matsumoto", "Omura", "Yoshimura", "Oshio", "Shinsengumi", "Yamamoto", "Tojo", "Komatsu", "Yokoi", "Tanaka",
    "Suzuki", "Sato", "Kobayashi", "Kato", "Yamada", "Nakamura", "Hayashi", "Hasegawa", "Ishii", "Kimura",
]

GIVEN_NAMES = [
    "Ieyasu", "Nobunaga", "Hideyoshi", "Shingen", "Masamune", "Yukimura", "Kenshin", "Mitsuhide",
    "Mitsunari", "Toshiie", "Ryoma", "Shinsaku", "Shoin", "Takamori", "Toshimichi", "Kaishu", "Yukichi",
    "Shozan", "Isami", "Soji", "Eiichi", "Naosuke", "Motonari", "Yoshihiro", "Kinetaro", "Korekiyo",
    "Shinpei", "Tenshin", "Tsuyoshi", "Tomomi", "Ryojun", "Masujiro", "Toratarou", "Heihachiro",
    "Toshizo", "Isoroku", "Hideki", "Saneatsu", "Shonan", "Shozo", "Ichiro", "Taro", "Jiro", "Kiyoshi",
    "Kenichi", "Hiroshi", "Osamu", "Yusaku", "Shunsuke", "Kohei",
]


def make_row(employee_no: int, rng: random.Random) -> str:
    """Build one comma-separated employee row."""
    department = rng.choice(DEPARTMENTS)
    position = rng.choice(POSITIONS)
    name = f"{rng.choice(SURNAMES)} {rng.choice(GIVEN_NAMES)}"
    return ",".join((department, f"{employee_no:04d}", position, name))


def generate_sample_dataset(output_path: str, count: int, seed: int | None = None) -> int:
    """
    Generate a sample employee file.

    Streams output line-by-line to avoid memory issues.

    Args:
        output_path: Path to output file.
        count: Number of employee rows (excluding the header).
        seed: Random seed for reproducibility; None for a random run.

    Returns:
        Total number of data lines written.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    rng = random.Random(seed)
    total_lines = 0

    with open(output_path, "w", encoding="utf-8", newline="", buffering=BUFFER_SIZE) as f:
        f.write(HEADER + LINE_TERMINATOR)
        for employee_no in range(1, count + 1):
            f.write(make_row(employee_no, rng) + LINE_TERMINATOR)
            total_lines += 1

            # Progress indicator every 1M rows
            if employee_no % 1_000_000 == 0:
                print(f"  Generated {employee_no:,}/{count:,} rows...", file=sys.stderr)

    return total_lines


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="employee-sample",
        description="Generate a sample employee dataset.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 10,000 rows into ./employee.csv
  employee-sample --count 10000

  # Reproducible 5M-row file
  employee-sample --out data/employee_5m.csv --count 5000000 --seed 42
""",
    )

    parser.add_argument(
        "--out",
        default="./employee.csv",
        help="Output file path (default: ./employee.csv)",
    )
    parser.add_argument(
        "--count",
        type=int,
        required=True,
        help="Number of employee rows to generate",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: random)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.count < 0:
        parser.error("--count must be at least 0")

    total_lines = generate_sample_dataset(args.out, args.count, seed=args.seed)
    print(f"Wrote {total_lines:,} rows to {args.out}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
