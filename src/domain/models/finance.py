"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.models.period import DateRange
from src.domain.models.records import LedgerEntry
from src.utils.decimal_utils import percent_of


@dataclass(frozen=True)
class DRELineItem:
    """Single row shown when an income statement bucket is expanded."""

    description: str
    amount: Decimal
    date: date


@dataclass(frozen=True)
class DREBucket:
    """Amount grouped under one category of an income statement line.

    Attributes:
        key: Category id, or a synthetic key for uncategorized rows.
        name: Display name of the category.
        amount: Sum of the line item amounts.
        items: Line items in source order.
    """

    key: str
    name: str
    amount: Decimal
    items: list[DRELineItem] = field(default_factory=list)


@dataclass(frozen=True)
class DREDiagnostics:
    """Row counts observed while building the income statement."""

    entries_count: int
    sales_orders_count: int
    sales_revenue: Decimal
    revenue_entries_count: int
    operating_expense_count: int
    fixed_cost_count: int
    excluded_expense_count: int


@dataclass(frozen=True)
class DREResult:
    """Income statement (DRE) for a period."""

    period: DateRange
    gross_revenue: Decimal
    operating_expense: Decimal
    contribution_margin: Decimal
    fixed_cost: Decimal
    net_result: Decimal
    revenue: list[DREBucket]
    operating_expenses: list[DREBucket]
    fixed_costs: list[DREBucket]
    excluded_expense: Decimal
    diagnostics: DREDiagnostics

    @property
    def contribution_margin_pct(self) -> Decimal:
        return percent_of(self.contribution_margin, self.gross_revenue)

    @property
    def net_margin_pct(self) -> Decimal:
        return percent_of(self.net_result, self.gross_revenue)

    @property
    def expense_ratio_pct(self) -> Decimal:
        return percent_of(self.operating_expense, self.gross_revenue)

    @property
    def fixed_cost_ratio_pct(self) -> Decimal:
        return percent_of(self.fixed_cost, self.gross_revenue)


@dataclass(frozen=True)
class EstimateSummary:
    """Month-end projection from the daily average observed so far."""

    current_revenue: Decimal
    current_expenses: Decimal
    current_profit: Decimal
    estimated_revenue: Decimal
    estimated_expenses: Decimal
    estimated_profit: Decimal
    days_elapsed: int
    total_days: int

    @property
    def progress_pct(self) -> Decimal:
        return percent_of(Decimal(self.days_elapsed), Decimal(self.total_days))


@dataclass(frozen=True)
class CashflowDay:
    """Cash movement for one calendar day."""

    date: date
    income: Decimal
    expenses: Decimal
    balance: Decimal


@dataclass(frozen=True)
class CashflowSeries:
    """Daily cash movements with a cumulative balance."""

    days: list[CashflowDay]

    @property
    def total_income(self) -> Decimal:
        return sum((day.income for day in self.days), Decimal("0"))

    @property
    def total_expenses(self) -> Decimal:
        return sum((day.expenses for day in self.days), Decimal("0"))

    @property
    def final_balance(self) -> Decimal:
        if not self.days:
            return Decimal("0")
        return self.days[-1].balance


@dataclass(frozen=True)
class CashPosition:
    """Received revenue against paid expenses for a period.

    Attributes:
        received_revenue: Revenue already received.
        paid_expenses: Expenses already paid.
        expenses_by_classification: Paid expenses per DRE classification.
        revenue_details: Received revenue entries, newest first.
        expense_details: Paid expense entries, newest first.
    """

    received_revenue: Decimal
    paid_expenses: Decimal
    expenses_by_classification: dict[str, Decimal]
    revenue_details: list[LedgerEntry]
    expense_details: list[LedgerEntry]

    @property
    def cash_balance(self) -> Decimal:
        return self.received_revenue - self.paid_expenses


@dataclass(frozen=True)
class ForecastDetail:
    """Entry shown in the business forecast drill-down."""

    entry_id: str
    description: str
    amount: Decimal
    due_date: date | None
    status: str
    category_name: str
    person_name: str


@dataclass(frozen=True)
class BusinessForecast:
    """Expected result once every pending entry of the period settles."""

    received_revenue: Decimal
    pending_revenue: Decimal
    paid_expenses: Decimal
    pending_expenses: Decimal
    revenue_details: list[ForecastDetail]
    expense_details: list[ForecastDetail]

    @property
    def total_receivable(self) -> Decimal:
        return self.received_revenue + self.pending_revenue

    @property
    def total_payable(self) -> Decimal:
        return self.paid_expenses + self.pending_expenses

    @property
    def forecast_result(self) -> Decimal:
        return self.total_receivable - self.total_payable


@dataclass(frozen=True)
class PendingTotals:
    """Pending receivables and payables due within a period."""

    receivables: Decimal
    payables: Decimal


@dataclass(frozen=True)
class OverdueItem:
    """Pending entry whose due date has passed."""

    entry: LedgerEntry
    category_name: str
    person_name: str
    days_overdue: int


@dataclass(frozen=True)
class OverdueIndicators:
    """Overdue payables and receivables."""

    payables: list[OverdueItem]
    receivables: list[OverdueItem]

    @property
    def total_payables(self) -> Decimal:
        return sum((item.entry.amount for item in self.payables), Decimal("0"))

    @property
    def total_receivables(self) -> Decimal:
        return sum(
            (item.entry.amount for item in self.receivables),
            Decimal("0"),
        )


@dataclass(frozen=True)
class InstallmentDate:
    """Due date of one installment in a monthly schedule."""

    number: int
    date: date
    was_adjusted: bool
    original_day: int


__all__ = [
    "DRELineItem",
    "DREBucket",
    "DREDiagnostics",
    "DREResult",
    "EstimateSummary",
    "CashflowDay",
    "CashflowSeries",
    "CashPosition",
    "ForecastDetail",
    "BusinessForecast",
    "PendingTotals",
    "OverdueItem",
    "OverdueIndicators",
    "InstallmentDate",
]
