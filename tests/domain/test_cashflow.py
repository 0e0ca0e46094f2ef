"""Tests for daily cash flow and cash position aggregates."""

from datetime import date
from decimal import Decimal

from src.domain.models import Category, LedgerEntry
from src.domain.services.cashflow import (
    compute_cash_position,
    compute_daily_cashflow,
)


def _entry(
    entry_id: str,
    entry_type: str,
    amount: str,
    day: int,
    status: str = "pago",
    category_id: str | None = None,
) -> LedgerEntry:
    return LedgerEntry(
        id=entry_id,
        entry_type=entry_type,
        amount=Decimal(amount),
        transaction_date=date(2024, 5, day),
        category_id=category_id,
        status=status,
    )


def test_daily_cashflow_keeps_a_running_balance() -> None:
    """Days are sorted and the balance accumulates across them."""
    series = compute_daily_cashflow(
        [
            _entry("e1", "expense", "30", day=3),
            _entry("r1", "revenue", "100", day=1),
            _entry("r2", "revenue", "20", day=3),
        ]
    )

    assert [day.date.day for day in series.days] == [1, 3]
    assert [day.balance for day in series.days] == [
        Decimal("100"),
        Decimal("90"),
    ]
    assert series.days[1].income == Decimal("20")
    assert series.days[1].expenses == Decimal("30")
    assert series.total_income == Decimal("120")
    assert series.total_expenses == Decimal("30")
    assert series.final_balance == Decimal("90")


def test_empty_cashflow_has_zero_balance() -> None:
    series = compute_daily_cashflow([])

    assert series.days == []
    assert series.final_balance == Decimal("0")


def test_cash_position_counts_only_settled_cash() -> None:
    """Pending entries and received expenses do not move cash."""
    categories = [
        Category(id="rent", name="Rent", category_type="expense",
                 dre_classification="custo_fixo"),
    ]
    entries = [
        _entry("r1", "revenue", "500", day=2, status="recebido"),
        _entry("r2", "revenue", "50", day=4, status="pendente"),
        _entry("e1", "expense", "200", day=3, category_id="rent"),
        _entry("e2", "expense", "40", day=5, status="concluida"),
        _entry("e3", "expense", "999", day=6, status="recebido"),
    ]

    position = compute_cash_position(entries, categories)

    assert position.received_revenue == Decimal("500")
    assert position.paid_expenses == Decimal("240")
    assert position.cash_balance == Decimal("260")
    assert position.expenses_by_classification == {
        "custo_fixo": Decimal("200"),
        "despesa_operacional": Decimal("40"),
    }
    assert [item.id for item in position.expense_details] == ["e2", "e1"]
