"""Business forecast and pending account totals."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    ENTRY_TYPE_EXPENSE,
    ENTRY_TYPE_REVENUE,
    FORECAST_EXPENSE_SETTLED,
    FORECAST_REVENUE_SETTLED,
    STATUS_PENDING,
)
from src.domain.models import (
    BusinessForecast,
    Category,
    ForecastDetail,
    LedgerEntry,
    PendingTotals,
    Person,
)
from src.domain.services.classification import (
    category_name,
    index_categories,
    index_people,
)


def compute_business_forecast(
    entries: Iterable[LedgerEntry],
    categories: Iterable[Category],
    people: Iterable[Person],
) -> BusinessForecast:
    """Compute the expected result of the period.

    Args:
        entries: Entries whose due date falls inside the period.
        categories: Categories used for detail rows.
        people: People used for detail rows.

    Returns:
        BusinessForecast: Settled and pending totals with detail rows.
    """
    categories_by_id = index_categories(categories)
    people_by_id = index_people(people)

    received = Decimal("0")
    pending_revenue = Decimal("0")
    paid = Decimal("0")
    pending_expenses = Decimal("0")
    revenue_details: list[ForecastDetail] = []
    expense_details: list[ForecastDetail] = []
    for entry in entries:
        if entry.entry_type == ENTRY_TYPE_REVENUE:
            if entry.status in FORECAST_REVENUE_SETTLED:
                received += entry.amount
            elif entry.status == STATUS_PENDING:
                pending_revenue += entry.amount
            else:
                continue
            revenue_details.append(
                _detail(entry, categories_by_id, people_by_id)
            )
        elif entry.entry_type == ENTRY_TYPE_EXPENSE:
            if entry.status in FORECAST_EXPENSE_SETTLED:
                paid += entry.amount
            elif entry.status == STATUS_PENDING:
                pending_expenses += entry.amount
            else:
                continue
            expense_details.append(
                _detail(entry, categories_by_id, people_by_id)
            )

    return BusinessForecast(
        received_revenue=received,
        pending_revenue=pending_revenue,
        paid_expenses=paid,
        pending_expenses=pending_expenses,
        revenue_details=revenue_details,
        expense_details=expense_details,
    )


def compute_pending_totals(entries: Iterable[LedgerEntry]) -> PendingTotals:
    """Sum pending receivables and payables."""
    receivables = Decimal("0")
    payables = Decimal("0")
    for entry in entries:
        if entry.status != STATUS_PENDING:
            continue
        if entry.entry_type == ENTRY_TYPE_REVENUE:
            receivables += entry.amount
        elif entry.entry_type == ENTRY_TYPE_EXPENSE:
            payables += entry.amount
    return PendingTotals(receivables=receivables, payables=payables)


def _detail(
    entry: LedgerEntry,
    categories_by_id: dict[str, Category],
    people_by_id: dict[str, str],
) -> ForecastDetail:
    person = people_by_id.get(entry.person_id) if entry.person_id else None
    return ForecastDetail(
        entry_id=entry.id,
        description=entry.description,
        amount=entry.amount,
        due_date=entry.due_date,
        status=entry.status,
        category_name=category_name(entry.category_id, categories_by_id)
        or "-",
        person_name=person or "-",
    )


__all__ = ["compute_business_forecast", "compute_pending_totals"]
