"""Core constants used across csvnest modules.

This module centralizes table names, batch sizes and report labels.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".csvnest")
DEFAULT_DATABASE_FILE_NAME = "users.db"
CSV_DELIMITER = ","
CSV_QUOTE = '"'
NESTED_KEY_SEPARATOR = "."
USERS_TABLE_NAME = "users"
DEFAULT_BULK_INSERT_THRESHOLD = 5000
BULK_INSERT_CHUNK_SIZE = 1000
ROW_SAVEPOINT_NAME = "user_row"
MIN_STORED_AGE = -2147483648
MAX_STORED_AGE = 2147483647
DEFAULT_AGE = 0
MANDATORY_FIELD_NAMES = ("name", "age", "address")
FIRST_NAME_KEY = "firstName"
LAST_NAME_KEY = "lastName"
AGE_GROUP_UNDER_20 = "<20"
AGE_GROUP_20_TO_40 = "20-40"
AGE_GROUP_40_TO_60 = "40-60"
AGE_GROUP_OVER_60 = ">60"
AGE_GROUP_LABELS = (
    AGE_GROUP_UNDER_20,
    AGE_GROUP_20_TO_40,
    AGE_GROUP_40_TO_60,
    AGE_GROUP_OVER_60,
)
REPORT_WIDTH = 50
