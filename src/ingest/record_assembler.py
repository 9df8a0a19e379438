"""Flat record assembly from tokenized CSV lines.

This module pairs header names with row values to build flat records.
Rows whose field count differs from the header are skipped and logged;
only empty input is fatal.
"""

from __future__ import annotations

from typing import Sequence

from core.errors import CsvNestIngestError
from core.logging_config import get_logger
from core.types import AssembledRecords, FlatRecord, Row
from ingest.csv_tokenizer import parse_line, split_lines

_LOGGER = get_logger(__name__)


def parse_csv_content(content: str) -> AssembledRecords:
    """Parse CSV text into flat records keyed by header name.

    Args:
        content: Raw CSV document text.

    Returns:
        Assembled flat records and the skipped row count.

    Raises:
        CsvNestIngestError: If the content has no header fields.
    """
    lines = split_lines(content)
    if not lines or not lines[0].strip():
        raise CsvNestIngestError(
            "CSV file is empty: expected a header row as the first line. "
            "Add a comma-separated header and retry."
        )
    header = parse_line(lines[0])
    return assemble_records(header, lines[1:])


def assemble_records(header: Row, lines: Sequence[str]) -> AssembledRecords:
    """Build flat records from data lines that follow the header.

    Args:
        header: Tokenized header row.
        lines: Raw data lines in file order, header excluded.

    Returns:
        Records for rows matching the header length, plus skip count.
    """
    header_names = [name.strip() for name in header]
    records: list[FlatRecord] = []
    skipped_rows = 0
    for line_number, raw_line in enumerate(lines, 2):
        line = raw_line.strip()
        if not line:
            continue
        values = parse_line(line)
        if len(values) != len(header_names):
            skipped_rows += 1
            _LOGGER.warning(
                "csv_row_skipped",
                line_number=line_number,
                value_count=len(values),
                expected_count=len(header_names),
            )
            continue
        records.append(_build_flat_record(header_names, values))
    return AssembledRecords(records=records, skipped_rows=skipped_rows)


def _build_flat_record(header_names: list[str], values: Row) -> FlatRecord:
    """Zip header names with trimmed values."""
    return {name: value.strip() for name, value in zip(header_names, values)}
