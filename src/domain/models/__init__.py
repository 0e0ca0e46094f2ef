"""Domain models package."""

from .finance import (
    BusinessForecast,
    CashflowDay,
    CashflowSeries,
    CashPosition,
    DREBucket,
    DREDiagnostics,
    DRELineItem,
    DREResult,
    EstimateSummary,
    ForecastDetail,
    InstallmentDate,
    OverdueIndicators,
    OverdueItem,
    PendingTotals,
)
from .period import DateRange, TenantSession
from .records import Category, LedgerEntry, Person, SalesOrder

__all__ = [
    "LedgerEntry",
    "Category",
    "Person",
    "SalesOrder",
    "DateRange",
    "TenantSession",
    "DRELineItem",
    "DREBucket",
    "DREDiagnostics",
    "DREResult",
    "EstimateSummary",
    "CashflowDay",
    "CashflowSeries",
    "CashPosition",
    "ForecastDetail",
    "BusinessForecast",
    "PendingTotals",
    "OverdueItem",
    "OverdueIndicators",
    "InstallmentDate",
]
