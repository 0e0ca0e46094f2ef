"""Monthly installment schedules."""

import calendar
from datetime import date

from src.domain.models import InstallmentDate


def add_months_preserving_day(
    start: date,
    months: int,
    original_day: int | None = None,
) -> date:
    """Shift ``start`` by whole months, keeping the day when it exists.

    Days past the end of the target month are clamped to its last day.
    """
    day = original_day if original_day is not None else start.day
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def generate_installment_dates(
    start: date,
    count: int,
) -> list[InstallmentDate]:
    """Return the due dates of ``count`` monthly installments.

    Args:
        start: Due date of the first installment.
        count: Number of installments.

    Returns:
        list[InstallmentDate]: Installments numbered from 1.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"Installment count must be >= 0, got {count}")
    schedule = []
    for index in range(count):
        due = add_months_preserving_day(start, index, start.day)
        schedule.append(
            InstallmentDate(
                number=index + 1,
                date=due,
                was_adjusted=due.day != start.day,
                original_day=start.day,
            )
        )
    return schedule


__all__ = ["add_months_preserving_day", "generate_installment_dates"]
