"""Daily cash flow presentation logic for the Streamlit UI.

Pure transformations from a ``CashflowSeries`` produced by
``GetDailyCashflowUseCase`` to chart-ready series and a Plotly figure.
The UI is responsible for loading the series (no IO here).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.adapters.interface.streamlit.dre_view import format_currency
from src.domain.models.finance import CashflowSeries

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


INCOME_LABEL = "Income"
EXPENSES_LABEL = "Expenses"
BALANCE_LABEL = "Cumulative balance"


@dataclass(frozen=True)
class CashflowChartModel:
    """Parallel series for the cash flow chart.

    Attributes:
        dates: ISO dates, ascending.
        income: Daily income.
        expenses: Daily expenses, as positive values.
        balance: Running balance at the end of each day.
    """

    dates: list[str]
    income: list[float]
    expenses: list[float]
    balance: list[float]

    @property
    def is_empty(self) -> bool:
        return not self.dates


def build_cashflow_model(series: CashflowSeries) -> CashflowChartModel:
    """Convert a cash flow series into float lists for plotting.

    Args:
        series: Daily cash flow.

    Returns:
        CashflowChartModel: Chart-ready series.
    """
    return CashflowChartModel(
        dates=[day.date.isoformat() for day in series.days],
        income=[float(day.income) for day in series.days],
        expenses=[float(day.expenses) for day in series.days],
        balance=[float(day.balance) for day in series.days],
    )


def build_cashflow_rows(series: CashflowSeries) -> list[dict[str, str]]:
    """Return table rows for the daily cash flow."""
    return [
        {
            "Date": day.date.strftime("%d/%m/%Y"),
            INCOME_LABEL: format_currency(day.income),
            EXPENSES_LABEL: format_currency(day.expenses),
            "Balance": format_currency(day.balance),
        }
        for day in series.days
    ]


def build_plotly_figure(model: CashflowChartModel) -> "go.Figure":
    """Build a Plotly figure with daily bars and a running balance line.

    Args:
        model: Precomputed chart model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Bar(
                name=INCOME_LABEL,
                x=model.dates,
                y=model.income,
                marker_color="#2e7d32",
            ),
            go.Bar(
                name=EXPENSES_LABEL,
                x=model.dates,
                y=model.expenses,
                marker_color="#e76f51",
            ),
            go.Scatter(
                name=BALANCE_LABEL,
                x=model.dates,
                y=model.balance,
                mode="lines+markers",
                line=dict(color="#457b9d", width=2),
            ),
        ]
    )
    fig.update_layout(
        barmode="group",
        margin=dict(l=8, r=8, t=8, b=8),
        height=380,
        legend=dict(orientation="h", y=-0.15),
    )
    return fig


__all__ = [
    "CashflowChartModel",
    "build_cashflow_model",
    "build_cashflow_rows",
    "build_plotly_figure",
]
