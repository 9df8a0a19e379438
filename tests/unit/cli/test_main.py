"""Unit tests for CLI command handling."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import write_csv

_CSV = "name.firstName,name.lastName,age,address.city\nJohn,Doe,25,NYC\nAmy,Li,70,\n"


def _database_args(tmp_path: Path) -> list[str]:
    return ["--database", str(tmp_path / "cli.db")]


def test_cli_process_prints_statistics_and_report(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Process should print counts followed by the distribution report."""
    csv_path = write_csv(tmp_path, _CSV)

    exit_code = main([*_database_args(tmp_path), "process", str(csv_path)])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "inserted=2" in output and "AGE DISTRIBUTION REPORT" in output
    assert "processing_time=" in output


def test_cli_users_prints_json_lines(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Users should print one JSON object per stored user."""
    main([*_database_args(tmp_path), "process", str(write_csv(tmp_path, _CSV))])
    capsys.readouterr()

    exit_code = main([*_database_args(tmp_path), "users"])
    rows = [json.loads(line) for line in capsys.readouterr().out.splitlines()]

    assert exit_code == 0
    assert rows[0]["address"] == {"city": "NYC"}
    assert rows[1]["address"] == {"city": ""}


def test_cli_stats_and_clear(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Stats should count users and clear should delete them."""
    main([*_database_args(tmp_path), "process", str(write_csv(tmp_path, _CSV))])
    capsys.readouterr()

    main([*_database_args(tmp_path), "stats"])
    stats_output = capsys.readouterr().out
    main([*_database_args(tmp_path), "clear"])
    clear_output = capsys.readouterr().out

    assert "total_users=2" in stats_output
    assert "deleted=2" in clear_output


def test_cli_process_returns_error_for_missing_file(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A missing source should exit non-zero with the read error."""
    exit_code = main([*_database_args(tmp_path), "process", str(tmp_path / "missing.csv")])
    error_output = capsys.readouterr().err

    assert exit_code == 1
    assert "Failed to read file" in error_output


def test_cli_distribution_on_empty_store(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Distribution should render zeros when nothing is stored."""
    exit_code = main([*_database_args(tmp_path), "distribution"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Total Users: 0" in output


def test_cli_rejects_in_memory_database(capsys: pytest.CaptureFixture[str]) -> None:
    """An in-memory database override should fail with a readable error."""
    exit_code = main(["--database", ":memory:", "stats"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "in-memory" in captured.err and captured.out == ""
