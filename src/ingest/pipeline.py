"""CSV-to-store ingest orchestration.

This module runs one upload end to end: read the source, assemble flat
records, build persistable users, and persist them with the strategy
that matches the batch size.
"""

from __future__ import annotations

import time
from typing import Sequence

from core.config import CsvNestConfig
from core.constants import DEFAULT_BULK_INSERT_THRESHOLD
from core.logging_config import get_logger
from core.types import BatchInsertResult, PersistableUser, ProcessResult
from ingest.input_reader import read_csv_content
from ingest.record_assembler import parse_csv_content
from store.user_store import UserStore
from transforms.field_separation import build_persistable_users

_LOGGER = get_logger(__name__)


def ingest_csv(source_uri: str, store: UserStore, config: CsvNestConfig) -> ProcessResult:
    """Parse a CSV source and persist its users.

    Args:
        source_uri: Local path or ``s3://bucket/key`` URI.
        store: Target user store.
        config: Runtime configuration.

    Returns:
        Record, insert and failure counts with per-row errors and timing.

    Raises:
        CsvNestIngestError: If the source is unreadable or empty.
        CsvNestStoreError: If persistence fails as a whole.
    """
    started_at = time.perf_counter()
    content = read_csv_content(source_uri, config)
    assembled = parse_csv_content(content)
    _LOGGER.info(
        "csv_parsed",
        source_uri=source_uri,
        record_count=len(assembled.records),
        skipped_rows=assembled.skipped_rows,
    )
    users = build_persistable_users(assembled.records)
    insert_result = persist_users(store, users, config.bulk_threshold)
    duration_seconds = time.perf_counter() - started_at
    _LOGGER.info(
        "csv_processed",
        source_uri=source_uri,
        total_records=len(assembled.records),
        inserted=insert_result.inserted_count,
        failed=insert_result.failed_count,
        duration_seconds=round(duration_seconds, 3),
    )
    return ProcessResult(
        total_records=len(assembled.records),
        inserted=insert_result.inserted_count,
        failed=insert_result.failed_count,
        errors=insert_result.errors,
        duration_seconds=duration_seconds,
    )


def persist_users(
    store: UserStore,
    users: Sequence[PersistableUser],
    bulk_threshold: int = DEFAULT_BULK_INSERT_THRESHOLD,
) -> BatchInsertResult:
    """Persist users, switching to the bulk path above ``bulk_threshold``.

    Args:
        store: Target user store.
        users: Users to persist.
        bulk_threshold: Largest batch still inserted row by row.

    Returns:
        Insert result from the selected strategy.
    """
    if len(users) > bulk_threshold:
        _LOGGER.info("bulk_insert_selected", user_count=len(users))
        return store.insert_users_bulk(users)
    return store.insert_users_transactional(users)
