"""Domain services package."""

from .cashflow import compute_cash_position, compute_daily_cashflow
from .classification import classify_expense, normalize_classification
from .dre import compute_dre
from .estimate import compute_estimate, elapsed_days
from .forecast import compute_business_forecast, compute_pending_totals
from .installments import add_months_preserving_day, generate_installment_dates
from .overdue import compute_overdue_items, days_overdue, filter_overdue_items
from .validation import validate_amount_sign

__all__ = [
    "compute_dre",
    "compute_estimate",
    "elapsed_days",
    "compute_daily_cashflow",
    "compute_cash_position",
    "compute_business_forecast",
    "compute_pending_totals",
    "compute_overdue_items",
    "days_overdue",
    "filter_overdue_items",
    "add_months_preserving_day",
    "generate_installment_dates",
    "classify_expense",
    "normalize_classification",
    "validate_amount_sign",
]
