"""Age distribution report.

Buckets are ``<20``, ``20-40`` (20 inclusive, 40 exclusive), ``40-60``
(both ends inclusive) and ``>60``. Ages that cannot be parsed as integers
are logged and left out of both the counts and the total.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import (
    AGE_GROUP_20_TO_40,
    AGE_GROUP_40_TO_60,
    AGE_GROUP_LABELS,
    AGE_GROUP_OVER_60,
    AGE_GROUP_UNDER_20,
    REPORT_WIDTH,
)
from core.logging_config import get_logger
from core.types import AgeDistribution
from transforms.field_separation import parse_int_prefix

_LOGGER = get_logger(__name__)


def calculate_age_distribution(ages: Iterable[object]) -> AgeDistribution:
    """Count ages per group and compute percentages.

    Args:
        ages: Stored ages, usually integers.

    Returns:
        Counts, two-decimal percentage strings and the counted total.
    """
    counts = {label: 0 for label in AGE_GROUP_LABELS}
    total = 0
    for raw_age in ages:
        age = parse_int_prefix(raw_age)
        if age is None:
            _LOGGER.warning("invalid_age_skipped", age=repr(raw_age))
            continue
        counts[age_group(age)] += 1
        total += 1
    percentages = {label: _format_percentage(count, total) for label, count in counts.items()}
    return AgeDistribution(counts=counts, percentages=percentages, total=total)


def age_group(age: int) -> str:
    """Return the bucket label for one age."""
    if age < 20:
        return AGE_GROUP_UNDER_20
    if age < 40:
        return AGE_GROUP_20_TO_40
    if age <= 60:
        return AGE_GROUP_40_TO_60
    return AGE_GROUP_OVER_60


def format_distribution_report(distribution: AgeDistribution) -> str:
    """Render the distribution as a fixed-width console table.

    Args:
        distribution: Calculated age distribution.

    Returns:
        Multi-line report text.
    """
    lines = [
        "=" * REPORT_WIDTH,
        "AGE DISTRIBUTION REPORT",
        "=" * REPORT_WIDTH,
        f"Total Users: {distribution.total}",
        "",
        "Age Group     | Count    | % Distribution",
        "-" * REPORT_WIDTH,
    ]
    for label in AGE_GROUP_LABELS:
        count = str(distribution.counts[label])
        lines.append(f"{label:<13} | {count:<8} | {distribution.percentages[label]}%")
    lines.append("=" * REPORT_WIDTH)
    return "\n".join(lines)


def _format_percentage(count: int, total: int) -> str:
    if total == 0:
        return "0.00"
    return f"{count / total * 100:.2f}"
