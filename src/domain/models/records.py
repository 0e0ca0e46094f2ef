"""Typed read-only projections of backend rows."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LedgerEntry:
    """Account payable or receivable row.

    Attributes:
        id: Backend identifier.
        entry_type: ``revenue`` or ``expense``.
        amount: Non-negative currency amount.
        transaction_date: Date the entry was realized or registered.
        due_date: Due date, when the entry has one.
        category_id: Optional category reference.
        person_id: Optional customer/supplier reference.
        status: Backend status code (``pendente``, ``pago``...).
        description: Free-text description.
    """

    id: str
    entry_type: str
    amount: Decimal
    transaction_date: date
    due_date: date | None = None
    category_id: str | None = None
    person_id: str | None = None
    status: str = "pendente"
    description: str = ""


@dataclass(frozen=True)
class Category:
    """Revenue or expense category with its income-statement classification."""

    id: str
    name: str
    category_type: str
    dre_classification: str | None = None


@dataclass(frozen=True)
class Person:
    """Customer, supplier or staff member."""

    id: str
    name: str


@dataclass(frozen=True)
class SalesOrder:
    """Sales order header."""

    id: str
    total: Decimal
    order_date: date
    status: str
    sequence_number: int | None = None


__all__ = ["LedgerEntry", "Category", "Person", "SalesOrder"]
