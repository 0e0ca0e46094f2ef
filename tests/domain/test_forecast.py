"""Tests for the business forecast and pending totals."""

from datetime import date
from decimal import Decimal

from src.domain.models import Category, LedgerEntry, Person
from src.domain.services.forecast import (
    compute_business_forecast,
    compute_pending_totals,
)


def _entry(
    entry_id: str,
    entry_type: str,
    amount: str,
    status: str,
    category_id: str | None = None,
    person_id: str | None = None,
) -> LedgerEntry:
    return LedgerEntry(
        id=entry_id,
        entry_type=entry_type,
        amount=Decimal(amount),
        transaction_date=date(2024, 6, 1),
        due_date=date(2024, 6, 15),
        category_id=category_id,
        person_id=person_id,
        status=status,
    )


def test_forecast_adds_pending_to_settled() -> None:
    """Forecast result is all receivables minus all payables."""
    entries = [
        _entry("r1", "revenue", "700", "recebido", category_id="c1"),
        _entry("r2", "revenue", "300", "pendente", person_id="p1"),
        _entry("r3", "revenue", "50", "cancelado"),
        _entry("e1", "expense", "200", "pago"),
        _entry("e2", "expense", "100", "pendente"),
        _entry("e3", "expense", "80", "recebido"),
    ]

    forecast = compute_business_forecast(
        entries,
        [Category(id="c1", name="Services", category_type="revenue")],
        [Person(id="p1", name="ACME")],
    )

    assert forecast.received_revenue == Decimal("700")
    assert forecast.pending_revenue == Decimal("300")
    assert forecast.paid_expenses == Decimal("200")
    assert forecast.pending_expenses == Decimal("100")
    assert forecast.total_receivable == Decimal("1000")
    assert forecast.total_payable == Decimal("300")
    assert forecast.forecast_result == Decimal("700")
    assert [d.entry_id for d in forecast.revenue_details] == ["r1", "r2"]
    assert forecast.revenue_details[0].category_name == "Services"
    assert forecast.revenue_details[1].person_name == "ACME"
    assert forecast.revenue_details[1].category_name == "-"
    assert [d.entry_id for d in forecast.expense_details] == ["e1", "e2"]


def test_pending_totals_only_count_pending_entries() -> None:
    totals = compute_pending_totals(
        [
            _entry("r1", "revenue", "120", "pendente"),
            _entry("r2", "revenue", "999", "recebido"),
            _entry("e1", "expense", "45", "pendente"),
        ]
    )

    assert totals.receivables == Decimal("120")
    assert totals.payables == Decimal("45")
