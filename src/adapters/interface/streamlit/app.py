"""Streamlit dashboard entry point.

Streamlit stops a superseded script run at its next widget call. The DRE use
case is still kept per browser session, so its request sequencer covers
overlapping runs of that session.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from src.adapters.interface.streamlit.cashflow_chart import (
    build_cashflow_model,
    build_cashflow_rows,
    build_plotly_figure,
)
from src.adapters.interface.streamlit.dre_view import (
    CUSTOM_PERIOD,
    PERIOD_OPTIONS,
    bucket_detail_rows,
    dre_statement_rows,
    format_currency,
    format_date,
    format_percent,
    format_period,
    get_period_range,
    prepare_revenue_donut_data,
)
from src.application.use_cases import (
    GetBusinessForecastUseCase,
    GetCashPositionUseCase,
    GetDailyCashflowUseCase,
    GetDREUseCase,
    GetEstimateUseCase,
    GetOverdueIndicatorsUseCase,
    GetPendingAccountsUseCase,
)
from src.domain.constants import OVERDUE_WINDOWS
from src.domain.models import (
    BusinessForecast,
    CashflowSeries,
    CashPosition,
    DateRange,
    DREBucket,
    DREResult,
    EstimateSummary,
    InstallmentDate,
    OverdueIndicators,
    OverdueItem,
    PendingTotals,
    TenantSession,
)
from src.domain.services.installments import generate_installment_dates
from src.domain.services.overdue import filter_overdue_items
from src.infrastructure.container import (
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger

SESSION_KEY = "tenant_session"
DRE_USE_CASE_KEY = "dre_use_case"


def _session(company_id: str | None, user_id: str | None) -> TenantSession:
    return TenantSession(user_id=user_id, company_id=company_id)


def _dre_use_case() -> GetDREUseCase:
    """Return the DRE use case of the current browser session."""
    if DRE_USE_CASE_KEY not in st.session_state:
        st.session_state[DRE_USE_CASE_KEY] = GetDREUseCase(
            repository=build_ledger_repository()
        )
    return st.session_state[DRE_USE_CASE_KEY]


def _fetch_dre(
    use_case: GetDREUseCase,
    company_id: str | None,
    user_id: str | None,
    start_date: date,
    end_date: date,
) -> DREResult:
    """Fetch the income statement for the period."""
    return use_case.execute(
        _session(company_id, user_id),
        DateRange(start_date=start_date, end_date=end_date),
    )


@st.cache_data(show_spinner=False, ttl=300)
def _load_dre(
    _use_case: GetDREUseCase,
    company_id: str | None,
    user_id: str | None,
    start_date: date,
    end_date: date,
) -> DREResult:
    """Cached wrapper around _fetch_dre; the use case is not hashed."""
    return _fetch_dre(_use_case, company_id, user_id, start_date, end_date)


@st.cache_data(show_spinner=False, ttl=300)
def _load_estimate(
    company_id: str | None,
    user_id: str | None,
    start_date: date,
    end_date: date,
    today: date,
) -> EstimateSummary:
    use_case = GetEstimateUseCase(repository=build_ledger_repository())
    return use_case.execute(
        _session(company_id, user_id),
        DateRange(start_date=start_date, end_date=end_date),
        today=today,
    )


@st.cache_data(show_spinner=False, ttl=300)
def _load_cashflow(
    company_id: str | None,
    user_id: str | None,
    start_date: date,
    end_date: date,
) -> CashflowSeries:
    use_case = GetDailyCashflowUseCase(repository=build_ledger_repository())
    return use_case.execute(
        _session(company_id, user_id),
        DateRange(start_date=start_date, end_date=end_date),
    )


@st.cache_data(show_spinner=False, ttl=300)
def _load_cash_position(
    company_id: str | None,
    user_id: str | None,
    start_date: date,
    end_date: date,
) -> CashPosition:
    use_case = GetCashPositionUseCase(repository=build_ledger_repository())
    return use_case.execute(
        _session(company_id, user_id),
        DateRange(start_date=start_date, end_date=end_date),
    )


@st.cache_data(show_spinner=False, ttl=300)
def _load_pending(
    company_id: str | None,
    user_id: str | None,
    start_date: date,
    end_date: date,
) -> PendingTotals:
    use_case = GetPendingAccountsUseCase(repository=build_ledger_repository())
    return use_case.execute(
        _session(company_id, user_id),
        DateRange(start_date=start_date, end_date=end_date),
    )


@st.cache_data(show_spinner=False, ttl=300)
def _load_forecast(
    company_id: str | None,
    user_id: str | None,
    start_date: date,
    end_date: date,
) -> BusinessForecast:
    use_case = GetBusinessForecastUseCase(repository=build_ledger_repository())
    return use_case.execute(
        _session(company_id, user_id),
        DateRange(start_date=start_date, end_date=end_date),
    )


@st.cache_data(show_spinner=False, ttl=300)
def _load_overdue(
    company_id: str | None,
    user_id: str | None,
    today: date,
) -> OverdueIndicators:
    use_case = GetOverdueIndicatorsUseCase(
        repository=build_ledger_repository()
    )
    return use_case.execute(_session(company_id, user_id), today=today)


def _current_session() -> TenantSession:
    """Return the tenant session, opening it from settings on first run."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = build_settings().default_session()
    return st.session_state[SESSION_KEY]


def _close_session() -> None:
    """Drop the tenant session and every cached aggregate."""
    st.session_state.pop(SESSION_KEY, None)
    st.session_state.pop(DRE_USE_CASE_KEY, None)
    st.cache_data.clear()


def _render_dre_bucket_section(
    title: str,
    total: Decimal,
    buckets: Sequence[DREBucket],
    currency_code: str,
) -> None:
    with st.expander(f"{title}: {format_currency(total, currency_code)}"):
        if not buckets:
            st.caption("No entries in this period.")
            return
        for bucket in buckets:
            st.markdown(
                f"**{bucket.name}** "
                f"{format_currency(bucket.amount, currency_code)}"
            )
            st.dataframe(
                bucket_detail_rows(bucket, currency_code),
                width="stretch",
                hide_index=True,
            )


def _render_dre(result: DREResult, currency_code: str) -> None:
    """Render the income statement with drill-down sections."""
    st.subheader(f"Income Statement (DRE) {format_period(result.period)}")
    st.dataframe(
        dre_statement_rows(result, currency_code),
        width="stretch",
        hide_index=True,
    )
    _render_dre_bucket_section(
        "Gross revenue",
        result.gross_revenue,
        result.revenue,
        currency_code,
    )
    _render_dre_bucket_section(
        "Operating expense",
        result.operating_expense,
        result.operating_expenses,
        currency_code,
    )
    _render_dre_bucket_section(
        "Fixed cost",
        result.fixed_cost,
        result.fixed_costs,
        currency_code,
    )
    if result.excluded_expense:
        st.warning(
            "Expenses with other classifications are not part of the net "
            f"result: {format_currency(result.excluded_expense, currency_code)}"
        )

    margin_col, net_col, expense_col, fixed_col = st.columns(4)
    margin_col.metric(
        "Contribution margin",
        format_percent(result.contribution_margin_pct),
    )
    net_col.metric("Net margin", format_percent(result.net_margin_pct))
    expense_col.metric("Expense ratio", format_percent(result.expense_ratio_pct))
    fixed_col.metric(
        "Fixed cost ratio",
        format_percent(result.fixed_cost_ratio_pct),
    )


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy/pandas builds Altair relies on are usable.

    Returns:
        tuple[bool, str | None]: Whether charts can render, and an error
        message when they cannot.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Chart dependencies unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "Incomplete numpy install: numpy.ndarray missing."
    if not hasattr(pandas, "Timestamp"):
        return False, "Incomplete pandas install: pandas.Timestamp missing."
    return True, None


def _render_revenue_chart(
    result: DREResult,
    currency_code: str,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of revenue by category."""
    if not result.revenue:
        st.info("No revenue available for the chart.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = prepare_revenue_donut_data(result, currency_code=currency_code)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.35)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader("Revenue by Category")
    st.altair_chart(chart, width="stretch")


def _render_estimate(summary: EstimateSummary, currency_code: str) -> None:
    st.subheader("Month-end Estimate")
    st.progress(
        min(1.0, float(summary.progress_pct) / 100),
        text=f"Day {summary.days_elapsed} of {summary.total_days}",
    )
    revenue_col, expense_col, profit_col = st.columns(3)
    revenue_col.metric(
        "Revenue",
        format_currency(summary.current_revenue, currency_code),
        f"est. {format_currency(summary.estimated_revenue, currency_code)}",
        delta_color="off",
    )
    expense_col.metric(
        "Expenses",
        format_currency(summary.current_expenses, currency_code),
        f"est. {format_currency(summary.estimated_expenses, currency_code)}",
        delta_color="off",
    )
    profit_col.metric(
        "Profit / Loss",
        format_currency(summary.current_profit, currency_code),
        f"est. {format_currency(summary.estimated_profit, currency_code)}",
        delta_color="off",
    )


def _render_cash_overview(
    position: CashPosition,
    pending: PendingTotals,
    forecast: BusinessForecast,
    currency_code: str,
) -> None:
    cash_col, receivable_col, payable_col, forecast_col = st.columns(4)
    cash_col.metric(
        "Cash position",
        format_currency(position.cash_balance, currency_code),
    )
    receivable_col.metric(
        "Pending receivables",
        format_currency(pending.receivables, currency_code),
    )
    payable_col.metric(
        "Pending payables",
        format_currency(pending.payables, currency_code),
    )
    forecast_col.metric(
        "Business forecast",
        format_currency(forecast.forecast_result, currency_code),
    )


def _render_cashflow(series: CashflowSeries, currency_code: str) -> None:
    st.subheader("Cash Flow")
    model = build_cashflow_model(series)
    if model.is_empty:
        st.info("No cash movements in this period.")
        return
    st.plotly_chart(build_plotly_figure(model), width="stretch")
    st.caption(
        f"In {format_currency(series.total_income, currency_code)} | "
        f"Out {format_currency(series.total_expenses, currency_code)} | "
        f"Balance {format_currency(series.final_balance, currency_code)}"
    )
    with st.expander("Daily detail"):
        st.dataframe(
            build_cashflow_rows(series),
            width="stretch",
            hide_index=True,
        )


def _overdue_rows(
    items: Sequence[OverdueItem],
    currency_code: str,
) -> list[dict[str, str | int]]:
    return [
        {
            "Description": item.entry.description,
            "Category": item.category_name,
            "Person": item.person_name,
            "Due": format_date(item.entry.due_date or item.entry.transaction_date),
            "Days overdue": item.days_overdue,
            "Amount": format_currency(item.entry.amount, currency_code),
        }
        for item in items
    ]


def _render_overdue(indicators: OverdueIndicators, currency_code: str) -> None:
    """Render overdue payables and receivables with filters."""
    st.subheader("Financial Indicators")
    payables_col, receivables_col = st.columns(2)
    payables_col.metric(
        f"Overdue payables ({len(indicators.payables)})",
        format_currency(indicators.total_payables, currency_code),
    )
    receivables_col.metric(
        f"Overdue receivables ({len(indicators.receivables)})",
        format_currency(indicators.total_receivables, currency_code),
    )
    window = st.selectbox("Overdue for at most", list(OVERDUE_WINDOWS))
    for title, items in (
        ("Payables", indicators.payables),
        ("Receivables", indicators.receivables),
    ):
        filtered = filter_overdue_items(items, window=window)
        st.markdown(f"**{title}**: {len(filtered)} shown")
        st.dataframe(
            _overdue_rows(filtered, currency_code),
            width="stretch",
            hide_index=True,
        )


def _installment_rows(
    schedule: Sequence[InstallmentDate],
) -> list[dict[str, str]]:
    return [
        {
            "Installment": str(item.number),
            "Due": format_date(item.date),
            "Adjusted": "yes" if item.was_adjusted else "",
        }
        for item in schedule
    ]


def _render_installment_planner(today: date) -> None:
    """Preview the due dates of a monthly installment plan."""
    with st.expander("Installment planner"):
        first_due = st.date_input(
            "First due date",
            value=today,
            format="DD/MM/YYYY",
        )
        count = st.number_input(
            "Installments",
            min_value=1,
            max_value=120,
            value=12,
            step=1,
        )
        schedule = generate_installment_dates(first_due, int(count))
        st.dataframe(
            _installment_rows(schedule),
            width="stretch",
            hide_index=True,
        )


def _select_period(today: date) -> tuple[str, DateRange | None]:
    """Return the sidebar period label and range.

    The range is None when a custom start date falls after its end date.
    """
    period = st.sidebar.selectbox("Period", list(PERIOD_OPTIONS))
    if period != CUSTOM_PERIOD:
        return period, get_period_range(period, today)
    start_date = st.sidebar.date_input(
        "Start date",
        value=DateRange.month_of(today).start_date,
        format="DD/MM/YYYY",
    )
    end_date = st.sidebar.date_input(
        "End date",
        value=today,
        format="DD/MM/YYYY",
    )
    try:
        date_range = DateRange(start_date=start_date, end_date=end_date)
    except ValueError:
        st.sidebar.error("Start date must be on or before end date.")
        return period, None
    return f"{start_date}..{end_date}", date_range


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="ERP Financial Dashboard", layout="wide")
    st.title("ERP Financial Dashboard")

    settings = build_settings()
    currency_code = settings.currency
    session = _current_session()
    if not session.is_active:
        st.warning(
            "No company session. Set ERP_USER_ID and ERP_COMPANY_ID."
        )
        return
    if st.sidebar.button("Sign out"):
        _close_session()
        st.info("Session closed.")
        return

    page = st.sidebar.selectbox("Page", ["Dashboard", "Indicators"])
    today = date.today()
    usage_logger = get_usage_logger()

    if page == "Dashboard":
        period, date_range = _select_period(today)
        if date_range is None:
            return
        usage_logger.info(
            f"page=dashboard company={session.company_id} period={period}"
        )
        args = (
            session.company_id,
            session.user_id,
            date_range.start_date,
            date_range.end_date,
        )
        _render_cash_overview(
            _load_cash_position(*args),
            _load_pending(*args),
            _load_forecast(*args),
            currency_code,
        )
        _render_estimate(_load_estimate(*args, today), currency_code)
        result = _load_dre(_dre_use_case(), *args)
        dre_col, chart_col = st.columns([3, 2])
        with dre_col:
            _render_dre(result, currency_code)
        with chart_col:
            _render_revenue_chart(result, currency_code)
        _render_cashflow(_load_cashflow(*args), currency_code)
    else:
        usage_logger.info(
            f"page=indicators company={session.company_id}"
        )
        _render_overdue(
            _load_overdue(session.company_id, session.user_id, today),
            currency_code,
        )
        _render_installment_planner(today)


if __name__ == "__main__":  # pragma: no cover
    main()
