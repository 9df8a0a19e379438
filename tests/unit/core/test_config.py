"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import CsvNestConfig
from core.errors import CsvNestConfigError


def test_from_env_reads_database_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the database path from environment."""
    monkeypatch.setenv("CSVNEST_DATABASE_PATH", "./.tmp-csvnest/users.db")

    config = CsvNestConfig.from_env()

    assert config.database_path.name == "users.db"
    assert config.database_path.is_absolute()


def test_from_env_reads_csv_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should expose the default CSV source."""
    monkeypatch.setenv("CSVNEST_CSV_PATH", "data/users.csv")

    config = CsvNestConfig.from_env()

    assert config.csv_path == "data/users.csv"


def test_from_env_defaults_bulk_threshold(monkeypatch: pytest.MonkeyPatch) -> None:
    """Bulk inserts should start above 5000 records by default."""
    monkeypatch.delenv("CSVNEST_BULK_THRESHOLD", raising=False)

    config = CsvNestConfig.from_env()

    assert config.bulk_threshold == 5000


@pytest.mark.parametrize("raw_value", ["lots", "-1"])
def test_from_env_raises_for_invalid_bulk_threshold(
    monkeypatch: pytest.MonkeyPatch,
    raw_value: str,
) -> None:
    """Config should fail for a non-numeric or negative threshold."""
    monkeypatch.setenv("CSVNEST_BULK_THRESHOLD", raw_value)

    with pytest.raises(CsvNestConfigError):
        CsvNestConfig.from_env()
