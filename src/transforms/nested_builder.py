"""Dot-path expansion of flat records.

This module turns keys such as ``address.city`` into nested mappings.
Keys apply in record order and the later key wins when two keys disagree
on whether a segment is a leaf or a mapping. Producers are expected to
keep related sub-keys adjacent; every conflict is logged as a warning.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.constants import NESTED_KEY_SEPARATOR
from core.logging_config import get_logger
from core.types import NestedRecord

_LOGGER = get_logger(__name__)


def build_nested_record(flat_record: Mapping[str, str]) -> NestedRecord:
    """Expand dot-separated keys into a nested mapping.

    Args:
        flat_record: Flat key to string value mapping.

    Returns:
        New nested mapping; the input is not modified.
    """
    result: NestedRecord = {}
    for key, value in flat_record.items():
        set_nested_value(result, key, value)
    return result


def set_nested_value(target: dict[str, Any], path: str, value: str) -> None:
    """Assign ``value`` at a dot-separated ``path`` inside ``target``.

    Intermediate mappings are created as needed. A leaf found where a
    mapping is required is replaced by an empty mapping.

    Args:
        target: Mapping to update in place.
        path: Dot-separated key path.
        value: Leaf value to assign.
    """
    segments = path.split(NESTED_KEY_SEPARATOR)
    current = target
    for segment in segments[:-1]:
        existing = current.get(segment)
        if not isinstance(existing, dict):
            if segment in current:
                _log_type_conflict(path, segment, "leaf_replaced_by_mapping")
            existing = {}
            current[segment] = existing
        current = existing
    last_segment = segments[-1]
    if isinstance(current.get(last_segment), dict):
        _log_type_conflict(path, last_segment, "mapping_replaced_by_leaf")
    current[last_segment] = value


def _log_type_conflict(path: str, segment: str, resolution: str) -> None:
    _LOGGER.warning(
        "nested_type_conflict",
        path=path,
        segment=segment,
        resolution=resolution,
    )
