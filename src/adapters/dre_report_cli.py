"""CLI adapter printing the income statement (DRE) of a period."""

from datetime import date
import os

from src.adapters.interface.streamlit.dre_view import (
    dre_statement_rows,
    format_currency,
    format_period,
)
from src.application.use_cases.get_dre import GetDREUseCase
from src.domain.models import DateRange, DREResult
from src.infrastructure.container import build_ledger_repository, build_settings
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _resolve_range(
    start_date: date | None,
    end_date: date | None,
    today: date,
) -> DateRange:
    """Return the report range, defaulting to the month of ``today``."""
    month = DateRange.month_of(today)
    return DateRange(
        start_date=start_date or month.start_date,
        end_date=end_date or month.end_date,
    )


def _print_report(result: DREResult, currency_code: str) -> None:
    print(f"Income statement (DRE) {format_period(result.period)}")
    for row in dre_statement_rows(result, currency_code):
        ratio = f"  ({row['% of revenue']})" if row["% of revenue"] else ""
        print(f"{row['Line']:<28}{row['Amount']:>20}{ratio}")
    sections = (
        ("Revenue", result.revenue),
        ("Operating expenses", result.operating_expenses),
        ("Fixed costs", result.fixed_costs),
    )
    for title, buckets in sections:
        if not buckets:
            continue
        print(f"\n{title}")
        for bucket in buckets:
            print(
                f"  {bucket.name:<40}"
                f"{format_currency(bucket.amount, currency_code):>20}"
            )
    if result.excluded_expense:
        print(
            "\nExcluded from net result: "
            f"{format_currency(result.excluded_expense, currency_code)}"
        )
    diagnostics = result.diagnostics
    print(
        f"\nentries={diagnostics.entries_count}, "
        f"sales_orders={diagnostics.sales_orders_count}, "
        f"excluded_expenses={diagnostics.excluded_expense_count}"
    )


def main() -> None:
    """Print the income statement for REPORT_START_DATE..REPORT_END_DATE."""
    logger = get_app_logger()
    settings = build_settings()
    session = settings.default_session()
    if not session.is_active:
        logger.warning(
            "ERP_USER_ID and ERP_COMPANY_ID are required to build a report."
        )
        return

    start_date = _parse_date(os.getenv("REPORT_START_DATE"), logger)
    end_date = _parse_date(os.getenv("REPORT_END_DATE"), logger)
    try:
        date_range = _resolve_range(start_date, end_date, date.today())
    except ValueError as exc:
        logger.error(str(exc))
        return

    use_case = GetDREUseCase(
        repository=build_ledger_repository(settings=settings),
        logger=logger,
    )
    result = use_case.execute(session, date_range)
    _print_report(result, settings.currency)


if __name__ == "__main__":
    main()
