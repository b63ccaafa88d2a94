"""Calendar date parsing and formatting."""

import re
from datetime import UTC, date, datetime, tzinfo
from email.utils import parsedate_to_datetime
from zoneinfo import ZoneInfo

_WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_WEEKDAYS = tuple(name[:3] for name in _WEEKDAY_NAMES)
_MONTHS = tuple(name[:3] for name in _MONTH_NAMES)
_MONTH_ALIASES = {"Sept": 9}

_NUMERIC_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%Y-%m",
    "%Y",
)
_DAY = re.compile(r"\d{1,2}", re.ASCII)
_YEAR = re.compile(r"\d{4}", re.ASCII)


def resolve_timezone(name: str | None) -> tzinfo:
    """Return the zone for a name, defaulting to UTC."""
    if not name:
        return UTC
    return ZoneInfo(name)


def today(tz: tzinfo = UTC) -> date:
    """Return the current calendar date in the given timezone."""
    return datetime.now(tz=tz).date()


def format_calendar_date(value: date) -> str:
    """Format a date as e.g. ``Sun Jan 01 2023``.

    Names are fixed English abbreviations so the output does not depend on
    the process locale.
    """
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def parse_calendar_date(raw: str | None, tz: tzinfo = UTC) -> date | None:
    """Parse user input into a calendar date, or return None.

    Accepts ISO dates and datetimes, slash-separated numeric dates
    (``2023/01/15``, ``01/15/2023``), bare ``YYYY`` and ``YYYY-MM``, month-name
    forms (``Jan 15 2023``, ``January 15, 2023``, ``15 Jan 2023``, optionally
    led by a weekday as in ``Sun Jan 15 2023``) and RFC 2822 timestamps.
    Aware datetimes are converted into ``tz`` before the date is taken.
    """
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return _to_date(datetime.fromisoformat(value), tz)
    except ValueError:
        pass
    for pattern in _NUMERIC_FORMATS:
        try:
            return datetime.strptime(value, pattern).date()
        except ValueError:
            continue
    named = _parse_named_date(value)
    if named is not None:
        return named
    try:
        return _to_date(parsedate_to_datetime(value), tz)
    except (TypeError, ValueError):
        return None


def _to_date(value: datetime, tz: tzinfo) -> date:
    if value.tzinfo is not None:
        value = value.astimezone(tz)
    return value.date()


def _parse_named_date(value: str) -> date | None:
    tokens = value.replace(",", " ").split()
    if tokens and _is_weekday(tokens[0]):
        tokens = tokens[1:]
    if len(tokens) != 3:  # noqa: PLR2004
        return None
    first, second, year = tokens
    if _month_number(first) is not None:
        month, day = _month_number(first), second
    elif _month_number(second) is not None:
        month, day = _month_number(second), first
    else:
        return None
    if not (_DAY.fullmatch(day) and _YEAR.fullmatch(year)):
        return None
    try:
        return date(int(year), month, int(day))
    except ValueError:
        return None


def _is_weekday(token: str) -> bool:
    cleaned = token.title().rstrip(".")
    return any(cleaned in {name, name[:3]} for name in _WEEKDAY_NAMES)


def _month_number(token: str) -> int | None:
    cleaned = token.title().rstrip(".")
    for index, name in enumerate(_MONTH_NAMES, start=1):
        if cleaned in {name, name[:3]}:
            return index
    return _MONTH_ALIASES.get(cleaned)
