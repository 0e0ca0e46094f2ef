"""Port for tenant-scoped reads of ledger, category, people and sales rows."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from src.domain.models import Category, LedgerEntry, Person, SalesOrder


class RepositoryError(RuntimeError):
    """Raised when the backend cannot serve a read."""


class LedgerRepositoryPort(Protocol):
    """Port exposing the rows the dashboard aggregates read.

    Every method is scoped by ``company_id``; implementations must never
    return rows of another tenant.
    """

    def fetch_entries_by_transaction_date(
        self,
        company_id: str,
        start_date: date,
        end_date: date,
        statuses: Sequence[str],
    ) -> list[LedgerEntry]:
        """Return entries with a transaction date inside the range."""

    def fetch_entries_by_due_date(
        self,
        company_id: str,
        start_date: date | None,
        end_date: date | None,
        statuses: Sequence[str] | None = None,
        entry_type: str | None = None,
    ) -> list[LedgerEntry]:
        """Return entries with a due date inside the (open-ended) range."""

    def fetch_categories(self, company_id: str) -> list[Category]:
        """Return the active categories."""

    def fetch_people(self, company_id: str) -> list[Person]:
        """Return the active people."""

    def fetch_sales_orders(
        self,
        company_id: str,
        start_date: date,
        end_date: date,
        statuses: Sequence[str],
    ) -> list[SalesOrder]:
        """Return active sales orders dated inside the range."""


__all__ = ["LedgerRepositoryPort", "RepositoryError"]
