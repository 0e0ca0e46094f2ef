"""Use case to project the period result from its daily average."""

from datetime import date
from decimal import Decimal

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RepositoryError,
)
from src.domain.constants import SETTLED_STATUSES
from src.domain.models import DateRange, EstimateSummary, TenantSession
from src.domain.services.estimate import compute_estimate
from src.infrastructure.logging.logger import get_app_logger


class GetEstimateUseCase:
    """Project revenue, expenses and profit to the end of the period."""

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
        today: date | None = None,
    ) -> EstimateSummary:
        """Return the projection for the period.

        Args:
            session: Authenticated tenant session.
            date_range: Reporting period.
            today: Optional reference date, defaults to the current date.

        Returns:
            EstimateSummary: Current and projected totals.
        """
        reference = today or date.today()
        entries = []
        if session.is_active:
            try:
                entries = self._repository.fetch_entries_by_transaction_date(
                    session.company_id,
                    date_range.start_date,
                    date_range.end_date,
                    SETTLED_STATUSES,
                )
            except RepositoryError as exc:
                self._logger.error(f"Error loading estimate entries: {exc}")
                entries = []
        summary = compute_estimate(entries, date_range, reference)
        if summary.estimated_profit < Decimal("0"):
            self._logger.info(
                f"Projected loss of {summary.estimated_profit} for "
                f"{date_range.start_date}..{date_range.end_date}"
            )
        return summary


__all__ = ["GetEstimateUseCase", "EstimateSummary"]
