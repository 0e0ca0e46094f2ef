"""Use case to compute the income statement (DRE) of a period."""

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RepositoryError,
)
from src.application.use_cases.period_data_loader import (
    PeriodData,
    PeriodDataLoader,
)
from src.application.use_cases.request_sequencer import RequestSequencer
from src.domain.models import DateRange, DREResult, TenantSession
from src.domain.services.dre import compute_dre
from src.infrastructure.logging.logger import get_app_logger


class GetDREUseCase:
    """Load the period rows of a tenant and build its income statement."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        sequencer: RequestSequencer | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing tenant-scoped rows.
            logger: Optional logger compatible with logging.Logger-like API.
            sequencer: Optional shared sequencer for overlapping requests.
        """
        self._loader = PeriodDataLoader(repository)
        self._logger = logger or get_app_logger()
        self._sequencer = sequencer or RequestSequencer()
        self._latest: DREResult | None = None

    @property
    def latest_result(self) -> DREResult | None:
        """Result of the most recent request that was not superseded."""
        return self._latest

    def execute(
        self,
        session: TenantSession,
        date_range: DateRange,
    ) -> DREResult:
        """Return the income statement for the period.

        Fetch failures are logged and produce an empty statement.

        Args:
            session: Authenticated tenant session.
            date_range: Reporting period.

        Returns:
            DREResult: Statement computed from the rows of this request.
        """
        request_id = self._sequencer.next_id()
        data = self._load(session, date_range)
        result = compute_dre(
            data.entries,
            data.sales_orders,
            data.categories,
            date_range,
            people=data.people,
            logger=self._logger,
        )
        if self._sequencer.is_latest(request_id):
            self._latest = result
        else:
            self._logger.info(
                f"Discarding stale DRE response for request {request_id} "
                f"(latest is {self._sequencer.latest_id})"
            )
        self._logger.info(
            f"DRE computed for {date_range.start_date}..{date_range.end_date}: "
            f"revenue={result.gross_revenue}, "
            f"operating_expense={result.operating_expense}, "
            f"fixed_cost={result.fixed_cost}, net={result.net_result}"
        )
        return result

    def _load(
        self,
        session: TenantSession,
        date_range: DateRange,
    ) -> PeriodData:
        if not session.is_active:
            self._logger.info("No active tenant session; DRE left empty")
            return PeriodData()
        try:
            return self._loader.load(session.company_id, date_range)
        except RepositoryError as exc:
            self._logger.error(f"Error loading DRE data: {exc}")
            return PeriodData()


__all__ = ["GetDREUseCase", "DREResult"]
