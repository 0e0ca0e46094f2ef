"""Tests for the dashboard panel use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.ports.ledger_repository import RepositoryError
from src.application.use_cases import (
    GetBusinessForecastUseCase,
    GetCashPositionUseCase,
    GetDailyCashflowUseCase,
    GetEstimateUseCase,
    GetOverdueIndicatorsUseCase,
    GetPendingAccountsUseCase,
)
from src.domain.models import DateRange, LedgerEntry, TenantSession

SESSION = TenantSession(user_id="user-1", company_id="company-1")
JUNE = DateRange(start_date=date(2024, 6, 1), end_date=date(2024, 6, 30))


def _entry(
    entry_id: str,
    entry_type: str,
    amount: str,
    status: str = "pago",
    day: int = 5,
    due: date | None = None,
) -> LedgerEntry:
    return LedgerEntry(
        id=entry_id,
        entry_type=entry_type,
        amount=Decimal(amount),
        transaction_date=date(2024, 6, day),
        due_date=due,
        status=status,
    )


def test_cashflow_use_case_fetches_cash_statuses() -> None:
    repository = MagicMock()
    repository.fetch_entries_by_transaction_date.return_value = [
        _entry("r1", "revenue", "100", status="recebido", day=1),
        _entry("e1", "expense", "40", day=2),
    ]

    series = GetDailyCashflowUseCase(
        repository=repository,
        logger=MagicMock(),
    ).execute(SESSION, JUNE)

    assert series.final_balance == Decimal("60")
    repository.fetch_entries_by_transaction_date.assert_called_once_with(
        "company-1",
        date(2024, 6, 1),
        date(2024, 6, 30),
        ("concluida", "pago", "recebido"),
    )


def test_cashflow_use_case_degrades_on_error() -> None:
    repository = MagicMock()
    repository.fetch_entries_by_transaction_date.side_effect = (
        RepositoryError("timeout")
    )
    logger = MagicMock()

    series = GetDailyCashflowUseCase(
        repository=repository,
        logger=logger,
    ).execute(SESSION, JUNE)

    assert series.days == []
    logger.error.assert_called_once()


def test_estimate_use_case_projects_from_today() -> None:
    repository = MagicMock()
    repository.fetch_entries_by_transaction_date.return_value = [
        _entry("r1", "revenue", "1000"),
    ]

    summary = GetEstimateUseCase(
        repository=repository,
        logger=MagicMock(),
    ).execute(SESSION, JUNE, today=date(2024, 6, 10))

    assert summary.estimated_revenue == Decimal("3000")


def test_estimate_use_case_without_session_returns_zero() -> None:
    repository = MagicMock()

    summary = GetEstimateUseCase(
        repository=repository,
        logger=MagicMock(),
    ).execute(TenantSession(), JUNE, today=date(2024, 6, 10))

    assert summary.estimated_revenue == Decimal("0")
    repository.fetch_entries_by_transaction_date.assert_not_called()


def test_cash_position_use_case() -> None:
    repository = MagicMock()
    repository.fetch_entries_by_transaction_date.return_value = [
        _entry("r1", "revenue", "500", status="recebido"),
        _entry("e1", "expense", "120"),
    ]
    repository.fetch_categories.return_value = []

    position = GetCashPositionUseCase(
        repository=repository,
        logger=MagicMock(),
    ).execute(SESSION, JUNE)

    assert position.cash_balance == Decimal("380")


def test_cash_position_use_case_degrades_on_error() -> None:
    repository = MagicMock()
    repository.fetch_categories.side_effect = RepositoryError("denied")

    position = GetCashPositionUseCase(
        repository=repository,
        logger=MagicMock(),
    ).execute(SESSION, JUNE)

    assert position.cash_balance == Decimal("0")
    assert position.revenue_details == []


def test_business_forecast_use_case_reads_by_due_date() -> None:
    repository = MagicMock()
    repository.fetch_entries_by_due_date.return_value = [
        _entry("r1", "revenue", "300", status="pendente"),
        _entry("e1", "expense", "100"),
    ]
    repository.fetch_categories.return_value = []
    repository.fetch_people.return_value = []

    forecast = GetBusinessForecastUseCase(
        repository=repository,
        logger=MagicMock(),
    ).execute(SESSION, JUNE)

    assert forecast.forecast_result == Decimal("200")
    repository.fetch_entries_by_due_date.assert_called_once_with(
        "company-1",
        date(2024, 6, 1),
        date(2024, 6, 30),
    )


def test_pending_accounts_use_case() -> None:
    repository = MagicMock()
    repository.fetch_entries_by_due_date.return_value = [
        _entry("r1", "revenue", "70", status="pendente"),
        _entry("e1", "expense", "20", status="pendente"),
    ]

    totals = GetPendingAccountsUseCase(
        repository=repository,
        logger=MagicMock(),
    ).execute(SESSION, JUNE)

    assert totals.receivables == Decimal("70")
    assert totals.payables == Decimal("20")
    _, kwargs = repository.fetch_entries_by_due_date.call_args
    assert kwargs["statuses"] == ("pendente",)


def test_overdue_indicators_use_case_splits_directions() -> None:
    repository = MagicMock()
    repository.fetch_categories.return_value = []
    repository.fetch_people.return_value = []
    repository.fetch_entries_by_due_date.side_effect = [
        [_entry("e1", "expense", "90", status="pendente",
                due=date(2024, 6, 20))],
        [_entry("r1", "revenue", "40", status="pendente",
                due=date(2024, 6, 1))],
    ]
    logger = MagicMock()

    indicators = GetOverdueIndicatorsUseCase(
        repository=repository,
        logger=logger,
    ).execute(SESSION, today=date(2024, 6, 30))

    assert indicators.total_payables == Decimal("90")
    assert indicators.total_receivables == Decimal("40")
    assert indicators.receivables[0].days_overdue == 29
    first_call, second_call = repository.fetch_entries_by_due_date.call_args_list
    assert first_call.args == ("company-1", None, date(2024, 6, 29))
    assert first_call.kwargs["entry_type"] == "expense"
    assert second_call.kwargs["entry_type"] == "revenue"
    logger.warning.assert_called_once()


def test_overdue_indicators_use_case_degrades_on_error() -> None:
    repository = MagicMock()
    repository.fetch_categories.side_effect = RepositoryError("offline")

    indicators = GetOverdueIndicatorsUseCase(
        repository=repository,
        logger=MagicMock(),
    ).execute(SESSION, today=date(2024, 6, 30))

    assert indicators.payables == []
    assert indicators.receivables == []
