"""Use case to compute the cash position of a period."""

from decimal import Decimal

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RepositoryError,
)
from src.domain.constants import CASH_STATUSES
from src.domain.models import CashPosition, DateRange, TenantSession
from src.domain.services.cashflow import compute_cash_position
from src.infrastructure.logging.logger import get_app_logger


def _empty_position() -> CashPosition:
    return CashPosition(
        received_revenue=Decimal("0"),
        paid_expenses=Decimal("0"),
        expenses_by_classification={},
        revenue_details=[],
        expense_details=[],
    )


class GetCashPositionUseCase:
    """Compute received revenue against paid expenses."""

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
    ) -> CashPosition:
        """Return the cash position for the period.

        Args:
            session: Authenticated tenant session.
            date_range: Reporting period.

        Returns:
            CashPosition: Totals and detail lists.
        """
        if not session.is_active:
            return _empty_position()
        try:
            entries = self._repository.fetch_entries_by_transaction_date(
                session.company_id,
                date_range.start_date,
                date_range.end_date,
                CASH_STATUSES,
            )
            categories = self._repository.fetch_categories(session.company_id)
        except RepositoryError as exc:
            self._logger.error(f"Error loading cash position data: {exc}")
            return _empty_position()
        position = compute_cash_position(entries, categories)
        self._logger.info(
            f"Cash position computed: received={position.received_revenue}, "
            f"paid={position.paid_expenses}, balance={position.cash_balance}"
        )
        return position


__all__ = ["GetCashPositionUseCase", "CashPosition"]
