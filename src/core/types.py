"""Shared typed models.

This module defines immutable data models used by ingest, transform,
store, and report layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

Row = list[str]
FlatRecord = dict[str, str]
NestedValue = Union[str, dict[str, Any]]
NestedRecord = dict[str, NestedValue]


@dataclass(frozen=True)
class AssembledRecords:
    """Flat records assembled from one CSV document.

    Attributes:
        records: Flat records in file order.
        skipped_rows: Data rows dropped for a field-count mismatch.
    """

    records: list[FlatRecord]
    skipped_rows: int = 0


@dataclass(frozen=True)
class PersistableUser:
    """User record ready for persistence.

    Attributes:
        name: Trimmed ``firstName lastName`` concatenation.
        age: Best-effort integer age, ``0`` when unparseable.
        address: Entire ``address`` subtree, or ``None``.
        additional_info: All non-mandatory top-level fields, or ``None``.
    """

    name: str
    age: int
    address: NestedValue | None = None
    additional_info: Mapping[str, NestedValue] | None = None


@dataclass(frozen=True)
class InsertError:
    """One failed row from a transactional insert.

    Attributes:
        identifier: Name of the user whose insert failed.
        message: Storage engine error message.
    """

    identifier: str
    message: str


@dataclass(frozen=True)
class BatchInsertResult:
    """Outcome of one persistence call.

    Attributes:
        inserted_count: Rows committed by the call.
        failed_count: Rows rejected individually (transactional path only).
        errors: Ordered per-row failures (transactional path only).
    """

    inserted_count: int
    failed_count: int = 0
    errors: tuple[InsertError, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class StoredUser:
    """User row read back from the store.

    Attributes:
        id: Auto-assigned primary key.
        name: Stored full name.
        age: Stored integer age.
        address: Decoded address document, or ``None``.
        additional_info: Decoded additional info document, or ``None``.
    """

    id: int
    name: str
    age: int
    address: Any = None
    additional_info: Any = None


@dataclass(frozen=True)
class ProcessResult:
    """Summary of one CSV-to-store pipeline run.

    Attributes:
        total_records: Flat records assembled from the CSV file.
        inserted: Rows committed to the store.
        failed: Rows rejected individually.
        errors: Per-row failures from the transactional path.
        duration_seconds: Wall-clock time from read to commit.
    """

    total_records: int
    inserted: int
    failed: int
    errors: tuple[InsertError, ...] = field(default_factory=tuple)
    duration_seconds: float = 0.0


@dataclass(frozen=True)
class AgeDistribution:
    """Age bucket breakdown over persisted users.

    Attributes:
        counts: Users per age group label.
        percentages: Share per age group, formatted to two decimals.
        total: Number of ages counted (the percentage denominator).
    """

    counts: dict[str, int]
    percentages: dict[str, str]
    total: int
