"""Income statement presentation logic for the Streamlit UI.

Formatting helpers and pure transformations from ``DREResult`` to table
rows and chart data. Nothing here performs IO.
"""

from datetime import date, timedelta
from decimal import Decimal

from src.domain.models import DateRange
from src.domain.models.finance import DREBucket, DREResult

CUSTOM_PERIOD = "Custom"

PERIOD_OPTIONS = (
    "Current Month",
    "Previous Month",
    "Current Quarter",
    "Year to Date",
    CUSTOM_PERIOD,
)


def format_currency(value: Decimal, currency_code: str = "BRL") -> str:
    """Format currency values for display.

    BRL uses the Brazilian convention (``R$ 1.234,56``).
    """
    body = f"{abs(value):,.2f}"
    if currency_code == "BRL":
        body = body.replace(",", "_").replace(".", ",").replace("_", ".")
        text = f"R$ {body}"
    else:
        text = f"{body} {currency_code}"
    return f"-{text}" if value < 0 else text


def format_percent(value: Decimal) -> str:
    return f"{value:.1f}%"


def format_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def format_period(date_range: DateRange) -> str:
    return (
        f"{format_date(date_range.start_date)} - "
        f"{format_date(date_range.end_date)}"
    )


def get_period_range(period: str, today: date) -> DateRange:
    """Return the date range for a sidebar period option.

    Args:
        period: One of ``PERIOD_OPTIONS`` other than ``CUSTOM_PERIOD``.
        today: Reference date.

    Returns:
        DateRange: Inclusive period.

    Raises:
        ValueError: If the period is unknown or custom.
    """
    if period == "Current Month":
        return DateRange.month_of(today)
    if period == "Previous Month":
        return DateRange.month_of(today.replace(day=1) - timedelta(days=1))
    if period == "Current Quarter":
        start_month = (today.month - 1) // 3 * 3 + 1
        start = date(today.year, start_month, 1)
        end = DateRange.month_of(date(today.year, start_month + 2, 1)).end_date
        return DateRange(start_date=start, end_date=end)
    if period == "Year to Date":
        return DateRange(start_date=date(today.year, 1, 1), end_date=today)
    raise ValueError(f"Unsupported period: {period}")


def dre_statement_rows(
    result: DREResult,
    currency_code: str = "BRL",
) -> list[dict[str, str]]:
    """Return the four-line statement with subtotals as table rows."""
    lines = [
        ("(+) Gross revenue", result.gross_revenue, None),
        (
            "(-) Operating expense",
            -result.operating_expense,
            result.expense_ratio_pct,
        ),
        (
            "(=) Contribution margin",
            result.contribution_margin,
            result.contribution_margin_pct,
        ),
        ("(-) Fixed cost", -result.fixed_cost, result.fixed_cost_ratio_pct),
        ("(=) Net result", result.net_result, result.net_margin_pct),
    ]
    return [
        {
            "Line": label,
            "Amount": format_currency(amount, currency_code),
            "% of revenue": format_percent(ratio) if ratio is not None else "",
        }
        for label, amount, ratio in lines
    ]


def bucket_detail_rows(
    bucket: DREBucket,
    currency_code: str = "BRL",
) -> list[dict[str, str]]:
    """Return the drill-down rows of one category bucket."""
    return [
        {
            "Description": item.description,
            "Date": format_date(item.date),
            "Amount": format_currency(item.amount, currency_code),
        }
        for item in bucket.items
    ]


def prepare_revenue_donut_data(
    result: DREResult,
    max_categories: int = 6,
    currency_code: str = "BRL",
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        result: Income statement of the period.
        max_categories: Maximum categories to keep before grouping.
        currency_code: Currency used for labels.

    Returns:
        Altair-ready chart data, largest category first.
    """
    sorted_buckets = sorted(
        result.revenue,
        key=lambda bucket: bucket.amount,
        reverse=True,
    )
    top = [
        (bucket.name, bucket.amount)
        for bucket in sorted_buckets[:max_categories]
    ]
    rest = sum(
        (bucket.amount for bucket in sorted_buckets[max_categories:]),
        start=Decimal("0"),
    )
    if rest != 0:
        top.append(("Other", rest))
    total = result.gross_revenue
    data: list[dict[str, str | float]] = []
    for name, amount in top:
        share = (amount / total) * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": name,
                "amount": float(amount),
                "amount_label": format_currency(amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


__all__ = [
    "CUSTOM_PERIOD",
    "PERIOD_OPTIONS",
    "format_currency",
    "format_percent",
    "format_date",
    "format_period",
    "get_period_range",
    "dre_statement_rows",
    "bucket_detail_rows",
    "prepare_revenue_donut_data",
]
