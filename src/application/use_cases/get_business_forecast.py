"""Use case to forecast the result once pending entries settle."""

from decimal import Decimal

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RepositoryError,
)
from src.domain.models import BusinessForecast, DateRange, TenantSession
from src.domain.services.forecast import compute_business_forecast
from src.infrastructure.logging.logger import get_app_logger


def _empty_forecast() -> BusinessForecast:
    return BusinessForecast(
        received_revenue=Decimal("0"),
        pending_revenue=Decimal("0"),
        paid_expenses=Decimal("0"),
        pending_expenses=Decimal("0"),
        revenue_details=[],
        expense_details=[],
    )


class GetBusinessForecastUseCase:
    """Combine settled and pending entries due in the period."""

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
    ) -> BusinessForecast:
        """Return the business forecast for entries due in the period."""
        if not session.is_active:
            return _empty_forecast()
        company_id = session.company_id
        try:
            entries = self._repository.fetch_entries_by_due_date(
                company_id,
                date_range.start_date,
                date_range.end_date,
            )
            categories = self._repository.fetch_categories(company_id)
            people = self._repository.fetch_people(company_id)
        except RepositoryError as exc:
            self._logger.error(f"Error loading business forecast data: {exc}")
            return _empty_forecast()
        return compute_business_forecast(entries, categories, people)


__all__ = ["GetBusinessForecastUseCase", "BusinessForecast"]
