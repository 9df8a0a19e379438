"""Public SDK surface for csvnest.

This module provides a stable import path for library users.
It re-exports the primary client and typed models.
"""

from __future__ import annotations

from core.config import CsvNestConfig
from core.types import (
    AgeDistribution,
    BatchInsertResult,
    InsertError,
    PersistableUser,
    ProcessResult,
    StoredUser,
)
from report.age_distribution import calculate_age_distribution, format_distribution_report
from store.client_sdk import CsvNestClient
from store.database import Database

__all__ = [
    "AgeDistribution",
    "BatchInsertResult",
    "CsvNestClient",
    "CsvNestConfig",
    "Database",
    "InsertError",
    "PersistableUser",
    "ProcessResult",
    "StoredUser",
    "calculate_age_distribution",
    "format_distribution_report",
]
