"""SQLite database handle.

This module owns connection acquisition for the users table. Callers
create one ``Database`` and pass it explicitly; every operation opens
its own connection through ``session()`` and releases it on exit.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
import sqlite3
from typing import Iterator

from core.constants import MAX_STORED_AGE, MIN_STORED_AGE, USERS_TABLE_NAME
from core.errors import CsvNestStoreError

_IN_MEMORY_PATH = ":memory:"

_CREATE_USERS_TABLE_SQL = f"""
CREATE TABLE IF NOT EXISTS {USERS_TABLE_NAME} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    age INTEGER NOT NULL CHECK (
        typeof(age) = 'integer' AND age BETWEEN {MIN_STORED_AGE} AND {MAX_STORED_AGE}
    ),
    address TEXT CHECK (address IS NULL OR json_valid(address)),
    additional_info TEXT CHECK (additional_info IS NULL OR json_valid(additional_info))
)
"""


class Database:
    """Connection factory for one SQLite database file."""

    def __init__(self, database_path: Path | str) -> None:
        """Create a database handle.

        Args:
            database_path: SQLite file path; parent directories are created.

        Raises:
            CsvNestStoreError: If the path names an in-memory database.
        """
        self._path = str(database_path)
        if self._path == _IN_MEMORY_PATH:
            raise CsvNestStoreError(
                "An in-memory database does not persist across sessions. "
                "Pass a database file path instead."
            )
        Path(self._path).parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> str:
        """Return the database file path."""
        return self._path

    @contextmanager
    def session(self) -> Iterator[sqlite3.Connection]:
        """Acquire a connection in autocommit mode for explicit transactions.

        Yields:
            Open connection, closed when the block exits.

        Raises:
            CsvNestStoreError: If the database cannot be opened.
        """
        try:
            connection = sqlite3.connect(self._path, isolation_level=None)
        except sqlite3.Error as error:
            raise CsvNestStoreError(
                f"Failed to open database at {self._path}: {error}. "
                "Check CSVNEST_DATABASE_PATH and directory permissions."
            ) from error
        try:
            yield connection
        finally:
            connection.close()

    def initialize(self) -> None:
        """Create the users table when it does not exist.

        Raises:
            CsvNestStoreError: If schema creation fails.
        """
        with self.session() as connection:
            try:
                connection.execute(_CREATE_USERS_TABLE_SQL)
            except sqlite3.Error as error:
                raise CsvNestStoreError(
                    f"Failed to initialize {USERS_TABLE_NAME} table: {error}"
                ) from error
