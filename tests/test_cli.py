"""Tests for the command-line interface."""

from pathlib import Path

import pytest

from employee_splitter import cli


def test_parser_defaults() -> None:
    args = cli.create_parser().parse_args([])

    assert args.input_file == cli.DEFAULT_INPUT_PATH
    assert args.output_dir == cli.DEFAULT_OUTPUT_DIR
    assert args.encoding == "utf-8"
    assert args.log_level == "INFO"


def test_main_splits_file(tmp_path: Path) -> None:
    input_path = tmp_path / "employee.csv"
    input_path.write_text("dept,id,role,name\nA,2,x,n1\nB,1,x,n2\n", encoding="utf-8")
    out_dir = tmp_path / "post"

    exit_code = cli.main([str(input_path), "--output-dir", str(out_dir), "--log-level", "DEBUG"])

    assert exit_code == 0
    assert sorted(p.name for p in out_dir.iterdir()) == ["A.csv", "B.csv"]


def test_main_returns_error_code_on_failure(tmp_path: Path) -> None:
    exit_code = cli.main([str(tmp_path / "missing.csv"), "--output-dir", str(tmp_path / "post")])

    assert exit_code == 1


def test_main_returns_error_code_on_bad_key(tmp_path: Path) -> None:
    input_path = tmp_path / "employee.csv"
    input_path.write_text("dept,id,role,name\nA,x1,x,n1\n", encoding="utf-8")

    exit_code = cli.main([str(input_path), "--output-dir", str(tmp_path / "post")])

    assert exit_code == 1
    assert list((tmp_path / "post").iterdir()) == []


def test_main_rejects_unknown_encoding(tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "employee.csv"
    input_path.write_text("dept,id,role,name\nA,1,x,n1\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(input_path), "--output-dir", str(tmp_path / "post"), "--encoding", "nope"])

    assert excinfo.value.code == 2
    assert "--encoding must be a known text encoding" in capsys.readouterr().err
    assert not (tmp_path / "post").exists()
