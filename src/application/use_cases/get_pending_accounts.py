"""Use case to total pending receivables and payables of a period."""

from decimal import Decimal

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RepositoryError,
)
from src.domain.constants import STATUS_PENDING
from src.domain.models import DateRange, PendingTotals, TenantSession
from src.domain.services.forecast import compute_pending_totals
from src.infrastructure.logging.logger import get_app_logger


class GetPendingAccountsUseCase:
    """Sum pending entries whose due date falls inside the period."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        session: TenantSession,
        date_range: DateRange,
    ) -> PendingTotals:
        empty = PendingTotals(receivables=Decimal("0"), payables=Decimal("0"))
        if not session.is_active:
            return empty
        try:
            entries = self._repository.fetch_entries_by_due_date(
                session.company_id,
                date_range.start_date,
                date_range.end_date,
                statuses=(STATUS_PENDING,),
            )
        except RepositoryError as exc:
            self._logger.error(f"Error loading pending accounts: {exc}")
            return empty
        return compute_pending_totals(entries)


__all__ = ["GetPendingAccountsUseCase", "PendingTotals"]
