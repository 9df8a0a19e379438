"""Pytest configuration for repository test runs."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from core.config import CsvNestConfig
from store.database import Database
from store.user_store import UserStore


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop handlers installed by CLI runs so they never outlive captured streams."""
    root_logger = logging.getLogger()
    existing_handlers = set(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if type(handler) is logging.StreamHandler and handler not in existing_handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CsvNestConfig:
    """Runtime config pointing at a per-test database file."""
    monkeypatch.setenv("CSVNEST_DATABASE_PATH", str(tmp_path / "db" / "users.db"))
    monkeypatch.delenv("CSVNEST_CSV_PATH", raising=False)
    monkeypatch.delenv("CSVNEST_BULK_THRESHOLD", raising=False)
    return CsvNestConfig.from_env()


@pytest.fixture
def database(config: CsvNestConfig) -> Database:
    """Database handle for the per-test database file."""
    return Database(config.database_path)


@pytest.fixture
def user_store(database: Database) -> UserStore:
    """User store with an initialized users table."""
    return UserStore(database)
