"""Row serialization for the users table.

This module converts between typed users and table column values.
Nested documents are stored as JSON text.
"""

from __future__ import annotations

import json
from typing import Any

from core.types import PersistableUser, StoredUser


def serialize_document(value: Any) -> str | None:
    """Encode a nested document as JSON text, keeping ``None`` as NULL."""
    if value is None:
        return None
    return json.dumps(value)


def user_to_row(user: PersistableUser) -> tuple[Any, Any, str | None, str | None]:
    """Build insert parameters for one user.

    Args:
        user: User to persist.

    Returns:
        ``(name, age, address_json, additional_info_json)`` tuple.

    Raises:
        TypeError: If a document holds values JSON cannot encode.
    """
    return (
        user.name,
        user.age,
        serialize_document(user.address),
        serialize_document(user.additional_info),
    )


def users_to_columns(users: list[PersistableUser]) -> tuple[str, str, str, str]:
    """Transpose users into four JSON-encoded parallel columns.

    Args:
        users: Chunk of users to persist.

    Returns:
        JSON arrays of names, ages, serialized addresses and serialized
        additional infos, all of equal length.

    Raises:
        TypeError: If a document holds values JSON cannot encode.
    """
    names: list[Any] = []
    ages: list[Any] = []
    addresses: list[str | None] = []
    additional_infos: list[str | None] = []
    for user in users:
        names.append(user.name)
        ages.append(user.age)
        addresses.append(serialize_document(user.address))
        additional_infos.append(serialize_document(user.additional_info))
    return (
        json.dumps(names),
        json.dumps(ages),
        json.dumps(addresses),
        json.dumps(additional_infos),
    )


def stored_user_from_row(row: tuple[Any, ...]) -> StoredUser:
    """Decode one ``(id, name, age, address, additional_info)`` row."""
    user_id, name, age, address, additional_info = row
    return StoredUser(
        id=int(user_id),
        name=str(name),
        age=int(age),
        address=_deserialize_document(address),
        additional_info=_deserialize_document(additional_info),
    )


def _deserialize_document(value: str | None) -> Any:
    if value is None:
        return None
    return json.loads(value)
