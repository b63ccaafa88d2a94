"""Tests for calendar date helpers."""

from datetime import UTC, date
from zoneinfo import ZoneInfo

import pytest

from exercise_tracker.domain.dates import (
    format_calendar_date,
    parse_calendar_date,
    resolve_timezone,
)


def test_format_calendar_date() -> None:
    assert format_calendar_date(date(2023, 1, 1)) == "Sun Jan 01 2023"
    assert format_calendar_date(date(2024, 2, 29)) == "Thu Feb 29 2024"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2023-01-01", date(2023, 1, 1)),
        ("2023-01-01T10:30:00", date(2023, 1, 1)),
        ("2023-01-01T23:30:00Z", date(2023, 1, 1)),
        ("Sun Jan 01 2023", date(2023, 1, 1)),
        ("  2023-06-15 ", date(2023, 6, 15)),
        ("2023/01/15", date(2023, 1, 15)),
        ("01/15/2023", date(2023, 1, 15)),
        ("1/5/2023 14:30", date(2023, 1, 5)),
        ("Jan 15 2023", date(2023, 1, 15)),
        ("January 15, 2023", date(2023, 1, 15)),
        ("15 January 2023", date(2023, 1, 15)),
        ("Sunday, Jan. 15, 2023", date(2023, 1, 15)),
        ("Sept 3 2023", date(2023, 9, 3)),
        ("Sun, 15 Jan 2023 00:00:00 GMT", date(2023, 1, 15)),
        ("2023-07", date(2023, 7, 1)),
        ("2023", date(2023, 1, 1)),
    ],
)
def test_parse_calendar_date_accepts(raw: str, expected: date) -> None:
    assert parse_calendar_date(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "not-a-date",
        "2023-02-30",
        "Sun Foo 01 2023",
        "Mon Jan 99 2024",
        "13/45/2023",
        "Feb 30 2023",
        "Jan 15",
    ],
)
def test_parse_calendar_date_rejects(raw: str | None) -> None:
    assert parse_calendar_date(raw) is None


def test_parse_calendar_date_converts_aware_datetimes() -> None:
    tokyo = ZoneInfo("Asia/Tokyo")

    assert parse_calendar_date("2023-01-01T20:00:00+00:00", tokyo) == date(2023, 1, 2)


def test_resolve_timezone() -> None:
    assert resolve_timezone(None) is UTC
    assert resolve_timezone("Europe/Berlin") == ZoneInfo("Europe/Berlin")


def test_parse_calendar_date_converts_rfc_2822_offsets() -> None:
    raw = "Sun, 15 Jan 2023 23:30:00 -0500"

    assert parse_calendar_date(raw) == date(2023, 1, 16)
    assert parse_calendar_date(raw, ZoneInfo("America/New_York")) == date(2023, 1, 15)
