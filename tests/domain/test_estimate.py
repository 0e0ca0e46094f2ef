"""Tests for the month-end estimate."""

from datetime import date
from decimal import Decimal

from src.domain.models import DateRange, LedgerEntry
from src.domain.services.estimate import compute_estimate, elapsed_days

APRIL = DateRange(start_date=date(2024, 4, 1), end_date=date(2024, 4, 30))


def _entry(entry_type: str, amount: str) -> LedgerEntry:
    return LedgerEntry(
        id=f"{entry_type}-{amount}",
        entry_type=entry_type,
        amount=Decimal(amount),
        transaction_date=date(2024, 4, 5),
        status="pago",
    )


def test_projects_daily_average_over_the_month() -> None:
    """1000 after 10 of 30 days projects 3000."""
    summary = compute_estimate(
        [_entry("revenue", "1000"), _entry("expense", "400")],
        APRIL,
        today=date(2024, 4, 10),
    )

    assert summary.days_elapsed == 10
    assert summary.total_days == 30
    assert summary.current_revenue == Decimal("1000")
    assert summary.estimated_revenue == Decimal("3000")
    assert summary.estimated_expenses == Decimal("1200")
    assert summary.estimated_profit == Decimal("1800")
    assert summary.current_profit == Decimal("600")


def test_elapsed_days_is_clamped_to_the_range() -> None:
    """Elapsed days never leave the [1, total_days] interval."""
    assert elapsed_days(APRIL, date(2024, 3, 20)) == 1
    assert elapsed_days(APRIL, date(2024, 4, 1)) == 1
    assert elapsed_days(APRIL, date(2024, 5, 20)) == 30


def test_finished_period_estimate_equals_actuals() -> None:
    """Once the period is over the projection equals what happened."""
    summary = compute_estimate(
        [_entry("revenue", "900")],
        APRIL,
        today=date(2024, 6, 1),
    )

    assert summary.estimated_revenue == Decimal("900")
    assert summary.progress_pct == Decimal("100")


def test_empty_entries_project_zero() -> None:
    summary = compute_estimate([], APRIL, today=date(2024, 4, 15))

    assert summary.estimated_revenue == Decimal("0")
    assert summary.estimated_profit == Decimal("0")
