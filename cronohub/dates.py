"""
Calendar-date handling for reports.

A calendar date (``YYYY-MM-DD``) has no timezone of its own. Report windows
are chosen in the viewer's local timezone while GitHub timestamps are UTC, so
every boundary goes through ``TimezoneNormalizer`` before it is compared.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from cronohub.exceptions import ValidationError

MAX_RANGE_DAYS = 90

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_START_OF_DAY = time(0, 0, 0, 0)
_END_OF_DAY = time(23, 59, 59, 999000)


@dataclass
class DateRangeResult:
    """Outcome of ``validate_date_range``."""

    valid: bool
    error: str | None = None


def parse_calendar_date(value: "str | date") -> date:
    """
    Parse a ``YYYY-MM-DD`` string (or pass through a date).

    Raises:
        ValueError: If the value is not a valid calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE.match(value.strip()):
        raise ValueError(f"Not a calendar date: {value!r}")
    return date.fromisoformat(value.strip())


def validate_date_range(start: "str | date | None", end: "str | date | None") -> DateRangeResult:
    """
    Validate a report window.

    Rules are applied in order: both present, both parseable, end not before
    start, span at most 90 days (inclusive).
    """
    if not start or not end:
        return DateRangeResult(False, "Both start and end dates are required")

    try:
        start_date = parse_calendar_date(start)
        end_date = parse_calendar_date(end)
    except ValueError:
        return DateRangeResult(False, "Invalid date format")

    if end_date < start_date:
        return DateRangeResult(False, "End date cannot be before start date")

    if (end_date - start_date).days > MAX_RANGE_DAYS:
        return DateRangeResult(False, f"Date range cannot exceed {MAX_RANGE_DAYS} days")

    return DateRangeResult(True, None)


def require_date_range(start: "str | date | None", end: "str | date | None") -> tuple[date, date]:
    """
    Validate a report window and return it as dates.

    Raises:
        ValidationError: With the validator's message if the range is rejected
    """
    result = validate_date_range(start, end)
    if not result.valid:
        raise ValidationError(result.error or "Invalid date range")
    return parse_calendar_date(start), parse_calendar_date(end)  # type: ignore[arg-type]


def parse_timestamp(value: str) -> datetime:
    """Parse a GitHub ISO 8601 timestamp into an aware UTC datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_iso_z(instant: datetime) -> str:
    """Render a UTC instant the way GitHub accepts it, e.g. ``2026-01-19T05:00:00.000Z``."""
    utc = instant.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class TimezoneNormalizer:
    """
    Converts between the viewer's local calendar and UTC instants.

    Args:
        tz: The viewer's timezone. ``None`` means the host's local timezone,
            resolved per conversion so DST transitions are honoured.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz

    def _localize(self, naive: datetime) -> datetime:
        if self.tz is None:
            return naive.astimezone()
        return naive.replace(tzinfo=self.tz)

    def local_date_to_utc(self, day: "str | date", end_of_day: bool = False) -> datetime:
        """
        Interpret ``day`` in the local timezone at 00:00:00.000 (or
        23:59:59.999 when ``end_of_day``) and return the UTC instant.
        """
        local = datetime.combine(parse_calendar_date(day), _END_OF_DAY if end_of_day else _START_OF_DAY)
        return self._localize(local).astimezone(timezone.utc)

    def utc_to_local_date(self, instant: datetime) -> date:
        """Calendar date of ``instant`` as seen in the local timezone."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        if self.tz is None:
            return instant.astimezone().date()
        return instant.astimezone(self.tz).date()

    def today(self) -> date:
        return self.utc_to_local_date(datetime.now(timezone.utc))


def default_date_range(today: date | None = None, days: int = 7) -> tuple[date, date]:
    """The window shown before the user picks one: the last ``days`` days up to today.

    ``today`` defaults to the host's local calendar date.
    """
    if today is None:
        today = TimezoneNormalizer().today()
    return today - timedelta(days=days), today


def format_date(day: "str | date") -> str:
    """Human label for a report bucket, e.g. ``Thu, Jan 15, 2026``."""
    d = parse_calendar_date(day)
    return f"{d:%a}, {d:%b} {d.day}, {d.year}"
