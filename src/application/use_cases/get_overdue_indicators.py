"""Use case to list overdue payables and receivables."""

from datetime import date, timedelta

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RepositoryError,
)
from src.domain.constants import (
    ENTRY_TYPE_EXPENSE,
    ENTRY_TYPE_REVENUE,
    STATUS_PENDING,
)
from src.domain.models import OverdueIndicators, TenantSession
from src.domain.services.overdue import compute_overdue_items
from src.infrastructure.logging.logger import get_app_logger


class GetOverdueIndicatorsUseCase:
    """Collect pending entries whose due date is before today."""

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
        today: date | None = None,
    ) -> OverdueIndicators:
        """Return overdue payables and receivables as of ``today``.

        Args:
            session: Authenticated tenant session.
            today: Optional reference date, defaults to the current date.

        Returns:
            OverdueIndicators: Overdue items split by direction.
        """
        empty = OverdueIndicators(payables=[], receivables=[])
        if not session.is_active:
            return empty
        reference = today or date.today()
        company_id = session.company_id
        try:
            categories = self._repository.fetch_categories(company_id)
            people = self._repository.fetch_people(company_id)
            payables = self._repository.fetch_entries_by_due_date(
                company_id,
                None,
                reference - timedelta(days=1),
                statuses=(STATUS_PENDING,),
                entry_type=ENTRY_TYPE_EXPENSE,
            )
            receivables = self._repository.fetch_entries_by_due_date(
                company_id,
                None,
                reference - timedelta(days=1),
                statuses=(STATUS_PENDING,),
                entry_type=ENTRY_TYPE_REVENUE,
            )
        except RepositoryError as exc:
            self._logger.error(f"Error loading overdue data: {exc}")
            return empty

        indicators = OverdueIndicators(
            payables=compute_overdue_items(
                payables,
                categories,
                people,
                reference,
            ),
            receivables=compute_overdue_items(
                receivables,
                categories,
                people,
                reference,
            ),
        )
        if indicators.payables or indicators.receivables:
            self._logger.warning(
                f"Overdue entries: payables={len(indicators.payables)} "
                f"({indicators.total_payables}), "
                f"receivables={len(indicators.receivables)} "
                f"({indicators.total_receivables})"
            )
        return indicators


__all__ = ["GetOverdueIndicatorsUseCase", "OverdueIndicators"]
