"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.domain.models import (
    BusinessForecast,
    CashflowDay,
    CashflowSeries,
    CashPosition,
    DateRange,
    EstimateSummary,
    LedgerEntry,
    OverdueIndicators,
    OverdueItem,
    PendingTotals,
    TenantSession,
)
from src.domain.services.dre import compute_dre
from src.infrastructure.settings import ErpSettings

SETTINGS = ErpSettings(company_id="company-1", user_id="user-1")


def test_fetch_dre_invokes_use_case(monkeypatch):
    """_fetch_dre should run the session use case for the period."""
    captured = {}

    class _FakeUseCase:
        def __init__(self, repository):
            captured["repository"] = repository

        def execute(self, session, date_range):
            captured["session"] = session
            captured["date_range"] = date_range
            return "dre"

    fake_st = MagicMock()
    fake_st.session_state = {}
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_ledger_repository", lambda: "repository")
    monkeypatch.setattr(app, "GetDREUseCase", _FakeUseCase)

    use_case = app._dre_use_case()
    result = app._fetch_dre(
        use_case,
        "company-1",
        "user-1",
        date(2024, 5, 1),
        date(2024, 5, 31),
    )

    assert result == "dre"
    assert captured["repository"] == "repository"
    assert captured["session"] == TenantSession(
        user_id="user-1",
        company_id="company-1",
    )
    assert captured["date_range"] == DateRange(
        start_date=date(2024, 5, 1),
        end_date=date(2024, 5, 31),
    )
    assert app._dre_use_case() is use_case


def test_load_dre_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_dre."""
    monkeypatch.setattr(app, "_fetch_dre", lambda *args: ("cached", args))

    use_case = object()
    result = app._load_dre(use_case, "company-9", "user-9", date(2024, 1, 1),
                           date(2024, 1, 31))

    assert result[0] == "cached"
    assert result[1][0] is use_case
    assert result[1][1] == "company-9"


def test_check_altair_dependencies_ok() -> None:
    ok, message = app._check_altair_dependencies()

    assert ok is True
    assert message is None


def _fake_streamlit(page: str, period: str = "Current Month") -> MagicMock:
    fake_st = MagicMock()
    fake_st.session_state = {}
    fake_st.sidebar.button.return_value = False
    fake_st.sidebar.selectbox.side_effect = [page, period]
    fake_st.selectbox.return_value = "all"
    fake_st.date_input.return_value = date(2024, 1, 31)
    fake_st.number_input.return_value = 3
    fake_st.columns.side_effect = lambda layout: [
        MagicMock()
        for _ in range(layout if isinstance(layout, int) else len(layout))
    ]
    return fake_st


def _patch_loaders(monkeypatch) -> None:
    period = DateRange.month_of(date.today())
    result = compute_dre(
        [
            LedgerEntry(
                id="r1",
                entry_type="revenue",
                amount=Decimal("900"),
                transaction_date=period.start_date,
                status="recebido",
            )
        ],
        [],
        [],
        period,
    )
    zero = Decimal("0")
    monkeypatch.setattr(app, "build_ledger_repository", MagicMock)
    monkeypatch.setattr(app, "_load_dre", lambda *args: result)
    monkeypatch.setattr(
        app,
        "_load_estimate",
        lambda *args: EstimateSummary(
            current_revenue=Decimal("900"),
            current_expenses=zero,
            current_profit=Decimal("900"),
            estimated_revenue=Decimal("1800"),
            estimated_expenses=zero,
            estimated_profit=Decimal("1800"),
            days_elapsed=15,
            total_days=30,
        ),
    )
    monkeypatch.setattr(
        app,
        "_load_cashflow",
        lambda *args: CashflowSeries(
            days=[
                CashflowDay(
                    date=period.start_date,
                    income=Decimal("900"),
                    expenses=zero,
                    balance=Decimal("900"),
                )
            ]
        ),
    )
    monkeypatch.setattr(
        app,
        "_load_cash_position",
        lambda *args: CashPosition(
            received_revenue=Decimal("900"),
            paid_expenses=zero,
            expenses_by_classification={},
            revenue_details=[],
            expense_details=[],
        ),
    )
    monkeypatch.setattr(
        app,
        "_load_pending",
        lambda *args: PendingTotals(receivables=zero, payables=zero),
    )
    monkeypatch.setattr(
        app,
        "_load_forecast",
        lambda *args: BusinessForecast(
            received_revenue=Decimal("900"),
            pending_revenue=zero,
            paid_expenses=zero,
            pending_expenses=zero,
            revenue_details=[],
            expense_details=[],
        ),
    )


def test_main_renders_dashboard(monkeypatch):
    """main should render every dashboard panel for an active session."""
    fake_st = _fake_streamlit("Dashboard")
    usage_logger = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_settings", lambda: SETTINGS)
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)
    _patch_loaders(monkeypatch)

    app.main()

    fake_st.set_page_config.assert_called_once()
    assert fake_st.session_state[app.SESSION_KEY].company_id == "company-1"
    fake_st.plotly_chart.assert_called_once()
    fake_st.altair_chart.assert_called_once()
    assert "page=dashboard" in usage_logger.info.call_args.args[0]


def test_main_renders_indicators(monkeypatch):
    fake_st = _fake_streamlit("Indicators")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_settings", lambda: SETTINGS)
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)
    item = OverdueItem(
        entry=LedgerEntry(
            id="e1",
            entry_type="expense",
            amount=Decimal("75"),
            transaction_date=date(2024, 1, 1),
            due_date=date(2024, 1, 10),
            status="pendente",
            description="Energy bill",
        ),
        category_name="Utilities",
        person_name="-",
        days_overdue=5,
    )
    monkeypatch.setattr(
        app,
        "_load_overdue",
        lambda *args: OverdueIndicators(payables=[item], receivables=[]),
    )

    app.main()

    payables_rows = fake_st.dataframe.call_args_list[0].args[0]
    assert payables_rows[0]["Description"] == "Energy bill"
    assert payables_rows[0]["Due"] == "10/01/2024"
    assert payables_rows[0]["Amount"] == "R$ 75,00"


def test_main_warns_without_tenant(monkeypatch):
    """main should stop with a warning when no tenant is configured."""
    fake_st = _fake_streamlit("Dashboard")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_settings", ErpSettings)

    app.main()

    fake_st.warning.assert_called_once()
    fake_st.sidebar.selectbox.assert_not_called()


def test_sign_out_clears_session(monkeypatch):
    fake_st = _fake_streamlit("Dashboard")
    fake_st.session_state[app.DRE_USE_CASE_KEY] = MagicMock()
    fake_st.sidebar.button.return_value = True
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_settings", lambda: SETTINGS)

    app.main()

    assert app.SESSION_KEY not in fake_st.session_state
    assert app.DRE_USE_CASE_KEY not in fake_st.session_state
    fake_st.cache_data.clear.assert_called_once()


def test_main_uses_custom_date_range(monkeypatch):
    """A custom period drives every panel with the chosen dates."""
    fake_st = _fake_streamlit("Dashboard", period=app.CUSTOM_PERIOD)
    fake_st.sidebar.date_input.side_effect = [
        date(2024, 2, 10),
        date(2024, 4, 20),
    ]
    usage_logger = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_settings", lambda: SETTINGS)
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)
    _patch_loaders(monkeypatch)
    calls = []
    loader = app._load_cashflow
    monkeypatch.setattr(
        app,
        "_load_cashflow",
        lambda *args: calls.append(args) or loader(*args),
    )

    app.main()

    assert calls == [
        ("company-1", "user-1", date(2024, 2, 10), date(2024, 4, 20))
    ]
    assert fake_st.sidebar.date_input.call_count == 2
    assert "period=2024-02-10..2024-04-20" in usage_logger.info.call_args.args[0]
    fake_st.plotly_chart.assert_called_once()


def test_main_rejects_inverted_custom_range(monkeypatch):
    fake_st = _fake_streamlit("Dashboard", period=app.CUSTOM_PERIOD)
    fake_st.sidebar.date_input.side_effect = [
        date(2024, 5, 1),
        date(2024, 4, 1),
    ]
    usage_logger = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_settings", lambda: SETTINGS)
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)
    _patch_loaders(monkeypatch)

    app.main()

    fake_st.sidebar.error.assert_called_once()
    fake_st.plotly_chart.assert_not_called()
    usage_logger.info.assert_not_called()


def test_dashboard_reuses_session_dre_use_case(monkeypatch):
    fake_st = _fake_streamlit("Dashboard")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_settings", lambda: SETTINGS)
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)
    _patch_loaders(monkeypatch)
    seen = []
    loader = app._load_dre
    monkeypatch.setattr(
        app,
        "_load_dre",
        lambda *args: seen.append(args[0]) or loader(*args),
    )

    app.main()
    fake_st.sidebar.selectbox.side_effect = ["Dashboard", "Previous Month"]
    app.main()

    assert len(seen) == 2
    assert seen[0] is seen[1]
    assert fake_st.session_state[app.DRE_USE_CASE_KEY] is seen[0]


def test_indicators_page_previews_installments(monkeypatch):
    """Installments due on the 31st are clamped in shorter months."""
    fake_st = _fake_streamlit("Indicators")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_settings", lambda: SETTINGS)
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)
    monkeypatch.setattr(
        app,
        "_load_overdue",
        lambda *args: OverdueIndicators(payables=[], receivables=[]),
    )

    app.main()

    rows = fake_st.dataframe.call_args_list[-1].args[0]
    assert [row["Due"] for row in rows] == [
        "31/01/2024",
        "29/02/2024",
        "31/03/2024",
    ]
    assert [row["Adjusted"] for row in rows] == ["", "yes", ""]
