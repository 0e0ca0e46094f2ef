"""Linear month-end projection of revenue and expenses."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import ENTRY_TYPE_EXPENSE, ENTRY_TYPE_REVENUE
from src.domain.models import DateRange, EstimateSummary, LedgerEntry


def elapsed_days(date_range: DateRange, today: date) -> int:
    """Return the days of the range already elapsed, today included.

    The value is clamped to ``[1, total_days]`` so a range starting in the
    future still projects from a single day.
    """
    until = min(today, date_range.end_date)
    elapsed = (until - date_range.start_date).days + 1
    return max(1, min(elapsed, date_range.total_days))


def compute_estimate(
    entries: Iterable[LedgerEntry],
    date_range: DateRange,
    today: date,
) -> EstimateSummary:
    """Project period totals from the daily average observed so far.

    Args:
        entries: Settled entries dated inside the range.
        date_range: Reporting period.
        today: Reference date for the elapsed-day count.

    Returns:
        EstimateSummary: Current and projected revenue, expenses and profit.
    """
    current_revenue = Decimal("0")
    current_expenses = Decimal("0")
    for entry in entries:
        if entry.entry_type == ENTRY_TYPE_REVENUE:
            current_revenue += entry.amount
        elif entry.entry_type == ENTRY_TYPE_EXPENSE:
            current_expenses += entry.amount

    total_days = date_range.total_days
    days_elapsed = elapsed_days(date_range, today)
    if days_elapsed > 0:
        daily_revenue = current_revenue / days_elapsed
        daily_expenses = current_expenses / days_elapsed
    else:
        daily_revenue = Decimal("0")
        daily_expenses = Decimal("0")

    estimated_revenue = daily_revenue * total_days
    estimated_expenses = daily_expenses * total_days
    return EstimateSummary(
        current_revenue=current_revenue,
        current_expenses=current_expenses,
        current_profit=current_revenue - current_expenses,
        estimated_revenue=estimated_revenue,
        estimated_expenses=estimated_expenses,
        estimated_profit=estimated_revenue - estimated_expenses,
        days_elapsed=days_elapsed,
        total_days=total_days,
    )


__all__ = ["compute_estimate", "elapsed_days"]
