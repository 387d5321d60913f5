"""Tests for DateTimePattern templates, lookups and rendering."""

from datetime import datetime, timezone

import pytest

from chronounit import DateTimePattern

NOW = datetime(2024, 3, 1, 2, 3, 4, 789_000)


def test_pattern_of():
    assert DateTimePattern.YYYY_MM_DD.pattern_of() == "%Y-%m-%d"
    assert DateTimePattern.MM_DD_YYYY.pattern_of() == "%m/%d/%Y"
    assert DateTimePattern.DD_MM_YYYY.pattern_of() == "%d-%m-%Y"
    assert DateTimePattern.YYYY_MM_DD_HH_MM.pattern_of() == "%Y-%m-%d %H:%M"
    assert DateTimePattern.YYYY_MM_DD_HH_MM_SS.pattern_of() == "%Y-%m-%d %H:%M:%S"
    assert (
        DateTimePattern.YYYY_MM_DD_HH_MM_SS_SSS.pattern_of() == "%Y-%m-%d %H:%M:%S%.3f"
    )
    assert DateTimePattern.HH_MM.pattern_of() == "%H:%M"
    assert DateTimePattern.HH_MM_SS.pattern_of() == "%H:%M:%S"
    assert DateTimePattern.MONTH_FULL.pattern_of() == "%B"
    assert DateTimePattern.MONTH_ABBR.pattern_of() == "%b"
    assert DateTimePattern.WEEKDAY_FULL.pattern_of() == "%A"
    assert DateTimePattern.WEEKDAY_ABBR.pattern_of() == "%a"
    assert DateTimePattern.AM_PM.pattern_of() == "%p"
    assert DateTimePattern.TIMESTAMP.pattern_of() == "%s"


def test_templates_are_unique():
    templates = [pattern.pattern_of() for pattern in DateTimePattern]
    assert len(templates) == len(set(templates)) == 14


@pytest.mark.parametrize("pattern", list(DateTimePattern))
def test_value_of_round_trip(pattern):
    assert DateTimePattern.value_of(pattern.pattern_of()) is pattern


@pytest.mark.parametrize("pattern", list(DateTimePattern))
def test_name_of_round_trip(pattern):
    assert DateTimePattern.name_of(pattern.name) is pattern


def test_lookups_return_none_when_missing():
    assert DateTimePattern.value_of("Invalid") is None
    assert DateTimePattern.value_of("%Y") is None
    assert DateTimePattern.name_of("Invalid") is None
    assert DateTimePattern.name_of("yyyy_mm_dd") is None
    assert DateTimePattern.value_of(None) is None  # type: ignore[arg-type]
    assert DateTimePattern.name_of(3) is None  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "pattern,expected",
    [
        (DateTimePattern.YYYY_MM_DD, "2024-03-01"),
        (DateTimePattern.MM_DD_YYYY, "03/01/2024"),
        (DateTimePattern.DD_MM_YYYY, "01-03-2024"),
        (DateTimePattern.YYYY_MM_DD_HH_MM, "2024-03-01 02:03"),
        (DateTimePattern.YYYY_MM_DD_HH_MM_SS, "2024-03-01 02:03:04"),
        (DateTimePattern.YYYY_MM_DD_HH_MM_SS_SSS, "2024-03-01 02:03:04.789"),
        (DateTimePattern.HH_MM, "02:03"),
        (DateTimePattern.HH_MM_SS, "02:03:04"),
        (DateTimePattern.MONTH_FULL, "March"),
        (DateTimePattern.MONTH_ABBR, "Mar"),
        (DateTimePattern.WEEKDAY_FULL, "Friday"),
        (DateTimePattern.WEEKDAY_ABBR, "Fri"),
        (DateTimePattern.AM_PM, "AM"),
        (DateTimePattern.TIMESTAMP, "1709258584"),
    ],
)
def test_render(pattern, expected):
    assert pattern.render(NOW) == expected


def test_render_pm_and_midnight_noon():
    assert DateTimePattern.AM_PM.render(datetime(2024, 3, 1, 14, 0)) == "PM"
    assert DateTimePattern.AM_PM.render(datetime(2024, 3, 1, 12, 0)) == "PM"
    assert DateTimePattern.AM_PM.render(datetime(2024, 3, 1, 0, 0)) == "AM"


def test_render_milliseconds_are_zero_padded():
    value = datetime(2024, 3, 1, 2, 3, 4, 7_999)
    assert DateTimePattern.YYYY_MM_DD_HH_MM_SS_SSS.render(value) == (
        "2024-03-01 02:03:04.007"
    )


def test_render_timestamp_of_aware_value():
    """Aware values keep their instant; naive ones are read as UTC."""
    aware = datetime(2024, 3, 1, 2, 3, 4, tzinfo=timezone.utc)
    assert DateTimePattern.TIMESTAMP.render(aware) == "1709258584"
    assert DateTimePattern.TIMESTAMP.render(datetime(1970, 1, 1)) == "0"


def test_render_pads_years_before_1000():
    """Years always render with four digits."""
    assert DateTimePattern.YYYY_MM_DD.render(datetime(5, 3, 1)) == "0005-03-01"
    assert DateTimePattern.MM_DD_YYYY.render(datetime(5, 3, 1)) == "03/01/0005"
    assert DateTimePattern.DD_MM_YYYY.render(datetime(5, 3, 1)) == "01-03-0005"
    value = datetime(999, 3, 1, 2, 3, 4, 5000)
    assert DateTimePattern.YYYY_MM_DD_HH_MM_SS_SSS.render(value) == (
        "0999-03-01 02:03:04.005"
    )
