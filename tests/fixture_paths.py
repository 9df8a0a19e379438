"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures" / relative_path


def write_csv(directory: Path, content: str, name: str = "users.csv") -> Path:
    """Write CSV text byte-for-byte, keeping its line endings."""
    csv_path = directory / name
    csv_path.write_bytes(content.encode("utf-8"))
    return csv_path
