"""Domain package for business rules and core models."""

from .models import (
    BusinessForecast,
    CashflowSeries,
    CashPosition,
    Category,
    DateRange,
    DREResult,
    EstimateSummary,
    LedgerEntry,
    OverdueIndicators,
    PendingTotals,
    Person,
    SalesOrder,
    TenantSession,
)
from .services import (
    compute_business_forecast,
    compute_cash_position,
    compute_daily_cashflow,
    compute_dre,
    compute_estimate,
    compute_overdue_items,
    compute_pending_totals,
    generate_installment_dates,
)

__all__ = [
    "BusinessForecast",
    "CashflowSeries",
    "CashPosition",
    "Category",
    "DateRange",
    "DREResult",
    "EstimateSummary",
    "LedgerEntry",
    "OverdueIndicators",
    "PendingTotals",
    "Person",
    "SalesOrder",
    "TenantSession",
    "compute_business_forecast",
    "compute_cash_position",
    "compute_daily_cashflow",
    "compute_dre",
    "compute_estimate",
    "compute_overdue_items",
    "compute_pending_totals",
    "generate_installment_dates",
]
