"""Status rules deciding which entries count for each aggregate."""

from src.domain.constants import (
    CASH_EXPENSE_STATUSES,
    CASH_STATUSES,
    ENTRY_TYPE_EXPENSE,
    ENTRY_TYPE_REVENUE,
    REVENUE_SALES_STATUSES,
    SETTLED_STATUSES,
    STATUS_PENDING,
)
from src.domain.models import LedgerEntry, SalesOrder


def is_settled(entry: LedgerEntry) -> bool:
    """Return True when the entry has been paid, received or completed."""
    return entry.status in SETTLED_STATUSES


def is_pending(entry: LedgerEntry) -> bool:
    return entry.status == STATUS_PENDING


def counts_as_cash(entry: LedgerEntry) -> bool:
    """Return True when the entry moved cash in or out of the company."""
    if entry.entry_type == ENTRY_TYPE_REVENUE:
        return entry.status in CASH_STATUSES
    if entry.entry_type == ENTRY_TYPE_EXPENSE:
        return entry.status in CASH_EXPENSE_STATUSES
    return False


def is_revenue_sale(order: SalesOrder) -> bool:
    """Return True for sales orders that contribute to gross revenue."""
    return order.status in REVENUE_SALES_STATUSES


__all__ = ["is_settled", "is_pending", "counts_as_cash", "is_revenue_sale"]
