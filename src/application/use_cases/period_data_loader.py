"""Concurrent loading of the row sets behind the income statement."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import REVENUE_SALES_STATUSES, SETTLED_STATUSES
from src.domain.models import (
    Category,
    DateRange,
    LedgerEntry,
    Person,
    SalesOrder,
)


@dataclass(frozen=True)
class PeriodData:
    """Rows of one tenant needed to build a period's income statement."""

    entries: list[LedgerEntry] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    sales_orders: list[SalesOrder] = field(default_factory=list)
    people: list[Person] = field(default_factory=list)


class PeriodDataLoader:
    """Fetch entries, categories, sales orders and people in parallel."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        max_workers: int = 4,
    ) -> None:
        """Initialize the loader.

        Args:
            repository: Port providing tenant-scoped rows.
            max_workers: Thread pool size for the parallel fetches.
        """
        self._repository = repository
        self._max_workers = max_workers

    def load(self, company_id: str, date_range: DateRange) -> PeriodData:
        """Return the period rows of a tenant.

        Args:
            company_id: Tenant id.
            date_range: Reporting period.

        Returns:
            PeriodData: Settled entries, active categories, revenue sales
            orders and active people.

        Raises:
            RepositoryError: If any fetch fails.
        """
        start, end = date_range.start_date, date_range.end_date
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            entries = executor.submit(
                self._repository.fetch_entries_by_transaction_date,
                company_id,
                start,
                end,
                SETTLED_STATUSES,
            )
            categories = executor.submit(
                self._repository.fetch_categories,
                company_id,
            )
            sales_orders = executor.submit(
                self._repository.fetch_sales_orders,
                company_id,
                start,
                end,
                REVENUE_SALES_STATUSES,
            )
            people = executor.submit(self._repository.fetch_people, company_id)
            return PeriodData(
                entries=entries.result(),
                categories=categories.result(),
                sales_orders=sales_orders.result(),
                people=people.result(),
            )


__all__ = ["PeriodData", "PeriodDataLoader"]
