"""Python SDK for CSV upload operations.

This module exposes the pipeline entry points: process a CSV file,
read the age distribution, list, count and clear stored users.
"""

from __future__ import annotations

from core.config import CsvNestConfig
from core.errors import CsvNestConfigError
from core.types import AgeDistribution, ProcessResult, StoredUser
from ingest.pipeline import ingest_csv
from report.age_distribution import calculate_age_distribution
from store.database import Database
from store.user_store import UserStore


class CsvNestClient:
    """Primary SDK entry point."""

    def __init__(
        self,
        config: CsvNestConfig | None = None,
        database: Database | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            database: Optional database handle; built from config if omitted.
        """
        self._config = config or CsvNestConfig.from_env()
        self._database = database or Database(self._config.database_path)
        self._store = UserStore(self._database)

    def process(self, source_uri: str | None = None) -> ProcessResult:
        """Load a CSV source into the users table.

        Args:
            source_uri: CSV path or URI; the configured path when omitted.

        Returns:
            Processing statistics.

        Raises:
            CsvNestConfigError: If no source is given or configured.
            CsvNestIngestError: If the source is unreadable or empty.
            CsvNestStoreError: If persistence fails as a whole.
        """
        resolved_source = source_uri or self._config.csv_path
        if not resolved_source:
            raise CsvNestConfigError(
                "No CSV source provided. Pass a path or set CSVNEST_CSV_PATH."
            )
        return ingest_csv(resolved_source, self._store, self._config)

    def distribution(self) -> AgeDistribution:
        """Return the age distribution of stored users."""
        return calculate_age_distribution(self._store.list_ages())

    def all_records(self) -> list[StoredUser]:
        """Return all stored users ordered by id."""
        return self._store.list_users()

    def clear_all(self) -> int:
        """Delete all stored users and return the deleted count."""
        return self._store.clear_users()

    def count(self) -> int:
        """Return the number of stored users."""
        return self._store.count_users()
