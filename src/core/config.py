"""Runtime configuration model for csvnest.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_BULK_INSERT_THRESHOLD,
    DEFAULT_DATA_ROOT,
    DEFAULT_DATABASE_FILE_NAME,
)
from core.errors import CsvNestConfigError


@dataclass(frozen=True)
class CsvNestConfig:
    """Validated runtime configuration.

    Attributes:
        csv_path: Default CSV source (local path or ``s3://`` URI).
        database_path: SQLite database file holding the users table.
        s3_region: Optional default AWS region for S3 reads.
        s3_profile: Optional AWS profile for boto3 session initialization.
        bulk_threshold: Record count above which the bulk insert path is used.
    """

    csv_path: str | None
    database_path: Path
    s3_region: str | None
    s3_profile: str | None
    bulk_threshold: int = DEFAULT_BULK_INSERT_THRESHOLD

    @classmethod
    def from_env(cls) -> "CsvNestConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CsvNestConfigError: If environment values are invalid.
        """
        default_database = DEFAULT_DATA_ROOT / DEFAULT_DATABASE_FILE_NAME
        database_value = os.getenv("CSVNEST_DATABASE_PATH", str(default_database))
        threshold_value = os.getenv(
            "CSVNEST_BULK_THRESHOLD", str(DEFAULT_BULK_INSERT_THRESHOLD)
        )
        return cls(
            csv_path=os.getenv("CSVNEST_CSV_PATH") or None,
            database_path=Path(database_value).expanduser().resolve(),
            s3_region=os.getenv("CSVNEST_S3_REGION"),
            s3_profile=os.getenv("CSVNEST_S3_PROFILE"),
            bulk_threshold=_parse_bulk_threshold(threshold_value),
        )


def _parse_bulk_threshold(raw_value: str) -> int:
    """Parse the bulk threshold environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed non-negative record count.

    Raises:
        CsvNestConfigError: If value is not a non-negative integer.
    """
    try:
        threshold = int(raw_value)
    except ValueError as error:
        raise CsvNestConfigError(
            "Invalid CSVNEST_BULK_THRESHOLD value: "
            f"expected integer, got '{raw_value}'. "
            "Set CSVNEST_BULK_THRESHOLD to a record count."
        ) from error
    if threshold < 0:
        raise CsvNestConfigError(
            f"Invalid CSVNEST_BULK_THRESHOLD value: {threshold} is negative. "
            "Use 0 or a positive record count."
        )
    return threshold
