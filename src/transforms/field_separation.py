"""Mandatory field extraction for nested user records.

This module partitions a nested record into the typed user fields
(name, age, address) and a catch-all ``additional_info`` bag. Missing
or malformed mandatory values fall back to defaults instead of failing.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping

from core.constants import DEFAULT_AGE, FIRST_NAME_KEY, LAST_NAME_KEY, MANDATORY_FIELD_NAMES
from core.logging_config import get_logger
from core.types import NestedRecord, NestedValue, PersistableUser
from transforms.nested_builder import build_nested_record

_LOGGER = get_logger(__name__)
_INTEGER_PREFIX_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


def build_persistable_users(records: Iterable[Mapping[str, str]]) -> list[PersistableUser]:
    """Convert flat CSV records into persistable users.

    Args:
        records: Flat records in file order.

    Returns:
        One user per record, in the same order.
    """
    users: list[PersistableUser] = []
    for record in records:
        nested = build_nested_record(record)
        user = separate_mandatory_fields(nested)
        if _age_was_defaulted(nested):
            _LOGGER.warning("age_defaulted", name=user.name, raw_age=str(nested["age"]))
        users.append(user)
    return users


def separate_mandatory_fields(nested: Mapping[str, NestedValue]) -> PersistableUser:
    """Split a nested record into mandatory fields and additional info.

    Args:
        nested: Nested record produced by the nested builder.

    Returns:
        Typed user with defaults applied to missing fields.
    """
    name_value = nested.get("name")
    first_name = _name_part(name_value, FIRST_NAME_KEY)
    last_name = _name_part(name_value, LAST_NAME_KEY)
    additional_info: NestedRecord = {
        key: value for key, value in nested.items() if key not in MANDATORY_FIELD_NAMES
    }
    return PersistableUser(
        name=f"{first_name} {last_name}".strip(),
        age=parse_int_prefix(nested.get("age")) or DEFAULT_AGE,
        address=nested.get("address") or None,
        additional_info=additional_info or None,
    )


def parse_int_prefix(value: object) -> int | None:
    """Parse the leading integer of a value, ``parseInt`` style.

    Leading whitespace and a sign are accepted; trailing text after the
    digits is ignored, so ``"42 years"`` and ``"3.9"`` parse as 42 and 3.
    Only ASCII digits count, and digit runs too long to convert give
    ``None``.

    Args:
        value: Integer, string, or any other value.

    Returns:
        Parsed integer, or ``None`` when no leading digits exist.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    match = _INTEGER_PREFIX_PATTERN.match(value)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def _name_part(name_value: NestedValue | None, key: str) -> str:
    if not isinstance(name_value, dict):
        return ""
    part = name_value.get(key)
    return part if isinstance(part, str) else ""


def _age_was_defaulted(nested: Mapping[str, NestedValue]) -> bool:
    raw_age = nested.get("age")
    if raw_age is None or raw_age == "":
        return False
    return parse_int_prefix(raw_age) is None
