"""Comma-separated text tokenizer.

This module turns raw CSV text into rows of string fields. It handles
double-quoted fields, embedded commas, doubled ("escaped") quotes and
``\\r\\n`` / ``\\n`` / ``\\r`` line endings. Lines are split on raw newline
characters first, so a quoted field cannot span lines.

Tokenizing never fails: malformed quoting degrades into a differently
shaped field. A line that ends inside an open quote keeps the partial
text as its last field.
"""

from __future__ import annotations

import re

from core.constants import CSV_DELIMITER, CSV_QUOTE
from core.types import Row

_LINE_BREAK_PATTERN = re.compile(r"\r?\n|\r")


def tokenize(content: str) -> list[Row]:
    """Split CSV content into rows of untrimmed fields.

    Args:
        content: Raw CSV document text.

    Returns:
        One row per physical line, in file order.
    """
    return [parse_line(line) for line in split_lines(content)]


def split_lines(content: str) -> list[str]:
    """Split content on any of ``\\r\\n``, ``\\n`` or ``\\r``.

    Args:
        content: Raw CSV document text.

    Returns:
        Physical lines without their terminators.
    """
    return _LINE_BREAK_PATTERN.split(content)


def parse_line(line: str) -> Row:
    """Parse one physical line into fields.

    Args:
        line: Single line without a line terminator.

    Returns:
        Ordered field values, never empty.
    """
    fields: Row = []
    current: list[str] = []
    inside_quotes = False
    index = 0
    while index < len(line):
        char = line[index]
        if char == CSV_QUOTE:
            if inside_quotes and line[index + 1 : index + 2] == CSV_QUOTE:
                current.append(CSV_QUOTE)
                index += 1
            else:
                inside_quotes = not inside_quotes
        elif char == CSV_DELIMITER and not inside_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1
    fields.append("".join(current))
    return fields
