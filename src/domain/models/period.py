"""Reporting period and tenant session models."""

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if self.start_date > self.end_date:
            raise ValueError(
                f"start_date {self.start_date} is after end_date {self.end_date}"
            )

    @classmethod
    def from_strings(cls, start: str, end: str) -> "DateRange":
        """Build a range from ``YYYY-MM-DD`` strings (extra suffix ignored)."""
        return cls(
            start_date=date.fromisoformat(start[:10]),
            end_date=date.fromisoformat(end[:10]),
        )

    @classmethod
    def month_of(cls, day: date) -> "DateRange":
        """Return the calendar month containing ``day``."""
        start = day.replace(day=1)
        if day.month == 12:
            next_month = date(day.year + 1, 1, 1)
        else:
            next_month = date(day.year, day.month + 1, 1)
        return cls(start_date=start, end_date=next_month - timedelta(days=1))

    @property
    def total_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class TenantSession:
    """Authenticated user and the company (tenant) whose rows it may read.

    Attributes:
        user_id: Authenticated user id, if any.
        company_id: Tenant partition key used to scope every query.
    """

    user_id: str | None = None
    company_id: str | None = None

    @property
    def is_active(self) -> bool:
        return bool(self.user_id and self.company_id)


__all__ = ["DateRange", "TenantSession"]
