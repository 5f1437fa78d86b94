"""Tests for the command-line entry point."""

import csv

import pytest

from latency_sweep.cli import build_parser, main


def test_main_writes_reports(tmp_path, capsys):
    exit_code = main(["--sizes", "10,100,5000", "--seed", "1", "--output-dir", str(tmp_path)])

    assert exit_code == 0
    assert (tmp_path / "latency_table.txt").exists()
    assert (tmp_path / "latency_chart.png").exists()

    with open(tmp_path / "latency_results.csv", newline="") as f:
        rows = list(csv.DictReader(f))
    assert [(r["size"], r["strategy"]) for r in rows] == [
        ("10", "recursive"),
        ("10", "iterative"),
        ("100", "recursive"),
        ("100", "iterative"),
        ("5000", "recursive"),
        ("5000", "iterative"),
    ]
    assert rows[-2]["failure_reason"] == "stack-exhausted"

    out = capsys.readouterr().out
    assert "Running capital-count latency sweep:" in out
    assert "Sizes: 10, 100, 5000" in out
    assert "=== LATENCY SWEEP RESULTS ===" in out


def test_main_quiet_without_chart(tmp_path, capsys):
    exit_code = main(["--sizes", "20", "--output-dir", str(tmp_path), "--no-chart", "--quiet"])

    assert exit_code == 0
    assert not (tmp_path / "latency_chart.png").exists()
    assert "✓" not in capsys.readouterr().out


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.sizes == [3000, 8000, 31000, 49000, 56000, 131000]
    assert args.timeout is None
    assert args.no_chart is False


def test_parser_rejects_bad_sizes():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--sizes", "ten,20"])


def test_main_rejects_non_positive_sizes(tmp_path):
    with pytest.raises(ValueError, match="sizes must be positive"):
        main(["--sizes", "0", "--output-dir", str(tmp_path)])
