"""Tests for the sample data generator."""

import random
from pathlib import Path

import pytest

from employee_splitter import generator
from employee_splitter.records.parse import parse_record_line
from employee_splitter.split.split import split_by_category


def test_generates_header_and_rows_with_crlf(tmp_path: Path) -> None:
    out = tmp_path / "employee.csv"

    total = generator.generate_sample_dataset(str(out), 25, seed=1)

    assert total == 25
    raw = out.read_bytes().decode("utf-8")
    lines = raw.split("\r\n")
    assert lines[0] == generator.HEADER
    assert lines[-1] == ""
    rows = lines[1:-1]
    assert len(rows) == 25

    for expected_no, row in enumerate(rows, start=1):
        record = parse_record_line(row)
        assert record is not None
        assert record.sort_key == expected_no
        assert record.category in generator.DEPARTMENTS
        department, employee_no, position, name = row.split(",")
        assert employee_no == f"{expected_no:04d}"
        assert position in generator.POSITIONS
        surname, given_name = name.split(" ")
        assert surname in generator.SURNAMES
        assert given_name in generator.GIVEN_NAMES


def test_same_seed_same_output(tmp_path: Path) -> None:
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"

    generator.generate_sample_dataset(str(first), 50, seed=7)
    generator.generate_sample_dataset(str(second), 50, seed=7)

    assert first.read_bytes() == second.read_bytes()


def test_make_row_format() -> None:
    row = generator.make_row(12, random.Random(3))

    assert row.split(",")[1] == "0012"
    assert len(row.split(",")) == 4


def test_zero_rows_writes_header_only(tmp_path: Path) -> None:
    out = tmp_path / "employee.csv"

    assert generator.generate_sample_dataset(str(out), 0) == 0
    assert out.read_bytes() == (generator.HEADER + "\r\n").encode("utf-8")


def test_negative_count_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        generator.generate_sample_dataset(str(tmp_path / "x.csv"), -1)


def test_generated_file_splits_cleanly(tmp_path: Path) -> None:
    """Test that generated data feeds straight into the splitter."""
    data = tmp_path / "employee.csv"
    out_dir = tmp_path / "post"
    out_dir.mkdir()
    generator.generate_sample_dataset(str(data), 300, seed=11)

    result = split_by_category(data, out_dir)

    assert result.stats.records_written == 300
    assert set(result.destinations) <= set(generator.DEPARTMENTS)
    for path in result.destinations.values():
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == generator.HEADER
        numbers = [int(line.split(",")[1]) for line in lines[1:]]
        assert numbers == sorted(numbers)


def test_main_writes_file(tmp_path: Path) -> None:
    out = tmp_path / "employee.csv"

    assert generator.main(["--out", str(out), "--count", "5", "--seed", "2"]) == 0
    assert len(out.read_bytes().split(b"\r\n")) == 7


def test_name_pools_have_fifty_entries() -> None:
    assert len(generator.SURNAMES) == 50
    assert len(set(generator.SURNAMES)) == 50
    assert len(generator.GIVEN_NAMES) == 50
