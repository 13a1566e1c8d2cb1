"""Report data models."""

from dataclasses import dataclass, field
from datetime import date, datetime

from cronohub.exceptions import PartialFetchError


@dataclass
class TimeEntry:
    """One decoded "Time Tracked" comment."""

    date: date  # viewer's local calendar day of created_at
    hours: float
    raw_comment: str
    url: str
    created_at: datetime  # UTC


@dataclass
class AggregatedReport:
    """Entries grouped by local calendar date, keys ascending."""

    by_date: dict[date, list[TimeEntry]]
    total: float
    username: str | None = None

    @property
    def entries(self) -> list[TimeEntry]:
        return [entry for bucket in self.by_date.values() for entry in bucket]

    def daily_totals(self) -> dict[date, float]:
        return {day: sum(e.hours for e in bucket) for day, bucket in self.by_date.items()}


@dataclass
class UserReport:
    """One collaborator's slot in a multi-user report.

    Exactly one of ``report`` and ``failure`` is set.
    """

    username: str
    avatar_url: str | None = None
    report: AggregatedReport | None = None
    failure: PartialFetchError | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def error(self) -> str | None:
        return self.failure.message if self.failure else None

    @property
    def total(self) -> float:
        return self.report.total if self.report else 0.0


@dataclass
class MultiUserReport:
    """Per-user reports plus a grand total over the successful ones."""

    per_user: dict[str, UserReport] = field(default_factory=dict)
    grand_total: float = 0.0

    @property
    def failures(self) -> dict[str, str]:
        return {
            name: slot.error
            for name, slot in self.per_user.items()
            if slot.error is not None
        }
