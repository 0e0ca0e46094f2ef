"""Use case to compute the daily cash flow of a period."""

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RepositoryError,
)
from src.domain.constants import CASH_STATUSES
from src.domain.models import CashflowSeries, DateRange, TenantSession
from src.domain.services.cashflow import compute_daily_cashflow
from src.infrastructure.logging.logger import get_app_logger


class GetDailyCashflowUseCase:
    """Compute daily inflows, outflows and running balance."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing tenant-scoped rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        session: TenantSession,
        date_range: DateRange,
    ) -> CashflowSeries:
        """Return the daily cash flow for the period.

        Args:
            session: Authenticated tenant session.
            date_range: Reporting period.

        Returns:
            CashflowSeries: One row per day with movements.
        """
        if not session.is_active:
            return CashflowSeries(days=[])
        try:
            entries = self._repository.fetch_entries_by_transaction_date(
                session.company_id,
                date_range.start_date,
                date_range.end_date,
                CASH_STATUSES,
            )
        except RepositoryError as exc:
            self._logger.error(f"Error loading cash flow entries: {exc}")
            return CashflowSeries(days=[])

        self._logger.info(
            f"Fetched {len(entries)} cash flow entries for "
            f"{date_range.start_date}..{date_range.end_date}"
        )
        series = compute_daily_cashflow(entries)
        self._logger.info(
            f"Cash flow totals computed: in={series.total_income}, "
            f"out={series.total_expenses}, balance={series.final_balance}"
        )
        return series


__all__ = ["GetDailyCashflowUseCase", "CashflowSeries"]
