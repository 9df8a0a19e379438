"""Batch persistence for user records.

This module writes users into the ``users`` table with one of two
strategies whose failure semantics differ on purpose:

* ``insert_users_transactional`` inserts row by row inside a single
  transaction. A rejected row is rolled back to its savepoint, reported
  in ``BatchInsertResult.errors`` and skipped; the remaining rows commit.
* ``insert_users_bulk`` inserts fixed-size chunks with one set-based
  statement each. Any chunk failure rolls back the whole call, so either
  every row commits or none does, and no per-row errors are reported.

Callers depend on the transactional path's per-row error list, so the
two models must stay separate.
"""

from __future__ import annotations

import sqlite3
from typing import Sequence

from core.constants import BULK_INSERT_CHUNK_SIZE, ROW_SAVEPOINT_NAME, USERS_TABLE_NAME
from core.errors import CsvNestStoreError
from core.logging_config import get_logger
from core.types import BatchInsertResult, InsertError, PersistableUser, StoredUser
from store.database import Database
from store.user_payload import stored_user_from_row, user_to_row, users_to_columns

_LOGGER = get_logger(__name__)

_ROW_ERRORS = (sqlite3.Error, TypeError, ValueError, OverflowError)

_INSERT_USER_SQL = (
    f"INSERT INTO {USERS_TABLE_NAME} (name, age, address, additional_info) "
    "VALUES (?, ?, ?, ?)"
)

_INSERT_COLUMNS_SQL = f"""INSERT INTO {USERS_TABLE_NAME} (name, age, address, additional_info)
SELECT names.value, ages.value, addresses.value, infos.value
FROM json_each(?) AS names
JOIN json_each(?) AS ages ON ages.key = names.key
JOIN json_each(?) AS addresses ON addresses.key = names.key
JOIN json_each(?) AS infos ON infos.key = names.key
ORDER BY names.key
"""


class UserStore:
    """Users table persistence and queries.

    The store never owns a connection; each call acquires one from the
    database handle supplied by the caller and releases it when done.
    """

    def __init__(self, database: Database) -> None:
        """Initialize the store and ensure the schema exists.

        Args:
            database: Caller-owned database handle.
        """
        self._database = database
        database.initialize()

    def insert_users_transactional(self, users: Sequence[PersistableUser]) -> BatchInsertResult:
        """Insert users one at a time inside a single transaction.

        Args:
            users: Users to persist, in insertion order.

        Returns:
            Inserted and failed counts with per-row errors.

        Raises:
            CsvNestStoreError: If the transaction itself fails; nothing
                from this call is committed.
        """
        inserted_count = 0
        errors: list[InsertError] = []
        with self._database.session() as connection:
            try:
                connection.execute("BEGIN")
                for user in users:
                    row_error = _insert_user_in_savepoint(connection, user)
                    if row_error is None:
                        inserted_count += 1
                        continue
                    errors.append(row_error)
                    _LOGGER.error(
                        "user_insert_failed",
                        identifier=row_error.identifier,
                        error=row_error.message,
                    )
                connection.execute("COMMIT")
            except sqlite3.Error as error:
                _rollback(connection)
                raise CsvNestStoreError(f"Batch insert failed: {error}") from error
        return BatchInsertResult(
            inserted_count=inserted_count,
            failed_count=len(errors),
            errors=tuple(errors),
        )

    def insert_users_bulk(self, users: Sequence[PersistableUser]) -> BatchInsertResult:
        """Insert users in columnar chunks inside a single transaction.

        Args:
            users: Users to persist, in insertion order.

        Returns:
            Total inserted count; ``failed_count`` is always zero.

        Raises:
            CsvNestStoreError: If any chunk fails; the whole call is
                rolled back and nothing is committed.
        """
        total_inserted = 0
        with self._database.session() as connection:
            try:
                connection.execute("BEGIN")
                for chunk_index, start in enumerate(
                    range(0, len(users), BULK_INSERT_CHUNK_SIZE), 1
                ):
                    chunk = list(users[start : start + BULK_INSERT_CHUNK_SIZE])
                    cursor = connection.execute(_INSERT_COLUMNS_SQL, users_to_columns(chunk))
                    total_inserted += cursor.rowcount
                    _LOGGER.info(
                        "bulk_chunk_inserted", chunk=chunk_index, row_count=cursor.rowcount
                    )
                connection.execute("COMMIT")
            except _ROW_ERRORS as error:
                _rollback(connection)
                raise CsvNestStoreError(f"Bulk insert failed: {error}") from error
        return BatchInsertResult(inserted_count=total_inserted)

    def list_users(self) -> list[StoredUser]:
        """Return all stored users ordered by id.

        Raises:
            CsvNestStoreError: If the query fails.
        """
        rows = self._fetch_all(
            f"SELECT id, name, age, address, additional_info FROM {USERS_TABLE_NAME} "
            "ORDER BY id",
            "get users",
        )
        return [stored_user_from_row(row) for row in rows]

    def list_ages(self) -> list[int]:
        """Return the age column of every stored user.

        Raises:
            CsvNestStoreError: If the query fails.
        """
        rows = self._fetch_all(f"SELECT age FROM {USERS_TABLE_NAME}", "get ages")
        return [row[0] for row in rows]

    def count_users(self) -> int:
        """Return the number of stored users.

        Raises:
            CsvNestStoreError: If the query fails.
        """
        rows = self._fetch_all(f"SELECT COUNT(*) FROM {USERS_TABLE_NAME}", "get user count")
        return int(rows[0][0])

    def clear_users(self) -> int:
        """Delete every stored user.

        Returns:
            Number of deleted rows.

        Raises:
            CsvNestStoreError: If the delete fails.
        """
        with self._database.session() as connection:
            try:
                cursor = connection.execute(f"DELETE FROM {USERS_TABLE_NAME}")
            except sqlite3.Error as error:
                raise CsvNestStoreError(f"Failed to clear users: {error}") from error
        _LOGGER.info("users_cleared", deleted_count=cursor.rowcount)
        return cursor.rowcount

    def _fetch_all(self, query: str, action: str) -> list[tuple]:
        with self._database.session() as connection:
            try:
                return connection.execute(query).fetchall()
            except sqlite3.Error as error:
                raise CsvNestStoreError(f"Failed to {action}: {error}") from error


def _insert_user_in_savepoint(
    connection: sqlite3.Connection,
    user: PersistableUser,
) -> InsertError | None:
    """Insert one user, undoing only that row when it is rejected.

    Returns:
        ``None`` on success, else the row's error entry.

    Raises:
        sqlite3.Error: If the savepoint cannot be rolled back, which
            means the enclosing transaction is no longer usable.
    """
    connection.execute(f"SAVEPOINT {ROW_SAVEPOINT_NAME}")
    try:
        connection.execute(_INSERT_USER_SQL, user_to_row(user))
    except _ROW_ERRORS as error:
        connection.execute(f"ROLLBACK TO SAVEPOINT {ROW_SAVEPOINT_NAME}")
        connection.execute(f"RELEASE SAVEPOINT {ROW_SAVEPOINT_NAME}")
        return InsertError(identifier=user.name, message=str(error))
    connection.execute(f"RELEASE SAVEPOINT {ROW_SAVEPOINT_NAME}")
    return None


def _rollback(connection: sqlite3.Connection) -> None:
    """Roll back the open transaction, if the engine has not already."""
    if connection.in_transaction:
        connection.execute("ROLLBACK")
