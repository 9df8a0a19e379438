"""Unit tests for the age distribution report."""

from __future__ import annotations

from report.age_distribution import (
    age_group,
    calculate_age_distribution,
    format_distribution_report,
)


def test_age_group_boundaries() -> None:
    """Bucket edges should be exclusive at 20/40 and inclusive at 60."""
    groups = [age_group(age) for age in [19, 20, 39, 40, 60, 61]]

    assert groups == ["<20", "20-40", "20-40", "40-60", "40-60", ">60"]


def test_calculate_counts_and_percentages() -> None:
    """Each bucket should report its count and two-decimal share."""
    distribution = calculate_age_distribution([10, 25, 45, 70])

    assert distribution.counts == {"<20": 1, "20-40": 1, "40-60": 1, ">60": 1}
    assert distribution.percentages == {
        "<20": "25.00",
        "20-40": "25.00",
        "40-60": "25.00",
        ">60": "25.00",
    }
    assert distribution.total == 4


def test_calculate_skips_unparseable_ages() -> None:
    """Unparseable ages should not count toward any bucket or the total."""
    distribution = calculate_age_distribution([10, "abc", None, "33"])

    assert distribution.total == 2
    assert distribution.percentages["<20"] == "50.00"


def test_calculate_rounds_percentages_to_two_decimals() -> None:
    """Percentages should be fixed to two decimal places."""
    distribution = calculate_age_distribution([1, 2, 30])

    assert distribution.percentages["<20"] == "66.67"
    assert distribution.percentages["20-40"] == "33.33"


def test_calculate_handles_no_ages() -> None:
    """An empty store should yield zero counts and zero percentages."""
    distribution = calculate_age_distribution([])

    assert distribution.total == 0
    assert set(distribution.percentages.values()) == {"0.00"}


def test_format_distribution_report_lists_every_group() -> None:
    """The console report should show the total and one line per group."""
    report = format_distribution_report(calculate_age_distribution([10, 25, 45, 70]))

    assert "Total Users: 4" in report
    assert report.count("25.00%") == 4


def test_calculate_skips_overlong_digit_ages() -> None:
    """Ages too long to convert should be skipped rather than raise."""
    distribution = calculate_age_distribution(["9" * 5000, 45])

    assert distribution.total == 1
    assert distribution.counts["40-60"] == 1
