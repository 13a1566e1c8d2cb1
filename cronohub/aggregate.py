"""Grouping and totalling of time entries."""

from collections.abc import Iterable
from datetime import date

from cronohub.types.reports import AggregatedReport, TimeEntry


def group_by_date(entries: Iterable[TimeEntry]) -> dict[date, list[TimeEntry]]:
    """Bucket entries by local date, keeping arrival order inside each bucket."""
    grouped: dict[date, list[TimeEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.date, []).append(entry)
    return grouped


def total_hours(grouped: dict[date, list[TimeEntry]]) -> float:
    return sum((entry.hours for bucket in grouped.values() for entry in bucket), 0.0)


def aggregate(entries: Iterable[TimeEntry], username: str | None = None) -> AggregatedReport:
    """Group entries with date keys sorted ascending and compute the total."""
    grouped = group_by_date(entries)
    by_date = {day: grouped[day] for day in sorted(grouped)}
    return AggregatedReport(by_date=by_date, total=total_hours(by_date), username=username)
