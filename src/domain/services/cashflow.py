"""Daily cash flow and cash position aggregates."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    CASH_EXPENSE_STATUSES,
    CASH_STATUSES,
    ENTRY_TYPE_EXPENSE,
    ENTRY_TYPE_REVENUE,
)
from src.domain.models import (
    CashflowDay,
    CashflowSeries,
    CashPosition,
    Category,
    LedgerEntry,
)
from src.domain.services.classification import (
    classify_expense,
    index_categories,
)


def compute_daily_cashflow(entries: Iterable[LedgerEntry]) -> CashflowSeries:
    """Group entries by transaction date with a running balance.

    Anything that is not revenue counts as an outflow.

    Args:
        entries: Settled entries of the period.

    Returns:
        CashflowSeries: One row per day with movements, in date order.
    """
    income: dict[date, Decimal] = {}
    expenses: dict[date, Decimal] = {}
    for entry in entries:
        day = entry.transaction_date
        income.setdefault(day, Decimal("0"))
        expenses.setdefault(day, Decimal("0"))
        if entry.entry_type == ENTRY_TYPE_REVENUE:
            income[day] += entry.amount
        else:
            expenses[day] += entry.amount

    days: list[CashflowDay] = []
    balance = Decimal("0")
    for day in sorted(income):
        balance += income[day] - expenses[day]
        days.append(
            CashflowDay(
                date=day,
                income=income[day],
                expenses=expenses[day],
                balance=balance,
            )
        )
    return CashflowSeries(days=days)


def compute_cash_position(
    entries: Iterable[LedgerEntry],
    categories: Iterable[Category],
) -> CashPosition:
    """Compute received revenue, paid expenses and the resulting balance.

    Args:
        entries: Entries of the period, any status.
        categories: Categories used to break paid expenses down.

    Returns:
        CashPosition: Totals, classification breakdown and detail lists.
    """
    categories_by_id = index_categories(categories)
    revenue_details: list[LedgerEntry] = []
    expense_details: list[LedgerEntry] = []
    by_classification: dict[str, Decimal] = {}
    for entry in entries:
        if (
            entry.entry_type == ENTRY_TYPE_REVENUE
            and entry.status in CASH_STATUSES
        ):
            revenue_details.append(entry)
        elif (
            entry.entry_type == ENTRY_TYPE_EXPENSE
            and entry.status in CASH_EXPENSE_STATUSES
        ):
            expense_details.append(entry)
            classification = classify_expense(entry, categories_by_id)
            by_classification[classification] = (
                by_classification.get(classification, Decimal("0"))
                + entry.amount
            )

    revenue_details.sort(key=lambda item: item.transaction_date, reverse=True)
    expense_details.sort(key=lambda item: item.transaction_date, reverse=True)
    return CashPosition(
        received_revenue=sum(
            (item.amount for item in revenue_details),
            Decimal("0"),
        ),
        paid_expenses=sum(
            (item.amount for item in expense_details),
            Decimal("0"),
        ),
        expenses_by_classification=by_classification,
        revenue_details=revenue_details,
        expense_details=expense_details,
    )


__all__ = ["compute_daily_cashflow", "compute_cash_position"]
