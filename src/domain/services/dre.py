"""Income statement (DRE) aggregation for a reporting period.

The statement has four lines::

    gross revenue        = sales + revenue entries, grouped by category
    - operating expense  = expenses classified as operating (or unclassified)
    = contribution margin
    - fixed cost         = expenses classified as fixed cost
    = net result

Expenses carrying any other classification (variable cost, for instance)
are reported in ``DREResult.excluded_expense`` and do not reach the net
result.
"""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    DRE_FIXED_COST,
    DRE_OPERATING_EXPENSE,
    ENTRY_TYPE_EXPENSE,
    ENTRY_TYPE_REVENUE,
    GENERAL_EXPENSE_KEY,
    GENERAL_FIXED_COST_NAME,
    GENERAL_OPERATING_EXPENSE_NAME,
    OTHER_REVENUE_KEY,
    OTHER_REVENUE_NAME,
    SALES_BUCKET_KEY,
    SALES_BUCKET_NAME,
)
from src.domain.models import (
    Category,
    DateRange,
    DREBucket,
    DREDiagnostics,
    DRELineItem,
    DREResult,
    LedgerEntry,
    Person,
    SalesOrder,
)
from src.domain.policies import is_revenue_sale
from src.domain.services.classification import (
    category_name,
    classify_expense,
    index_categories,
    index_people,
)
from src.domain.services.validation import validate_amount_sign


class _BucketAccumulator:
    """Insertion-ordered category buckets with running totals."""

    def __init__(self) -> None:
        self._names: dict[str, str] = {}
        self._amounts: dict[str, Decimal] = {}
        self._items: dict[str, list[DRELineItem]] = {}

    def add(self, key: str, name: str, item: DRELineItem) -> None:
        if key not in self._amounts:
            self._names[key] = name
            self._amounts[key] = Decimal("0")
            self._items[key] = []
        self._amounts[key] += item.amount
        self._items[key].append(item)

    def put(
        self,
        key: str,
        name: str,
        amount: Decimal,
        items: list[DRELineItem],
    ) -> None:
        self._names[key] = name
        self._amounts[key] = amount
        self._items[key] = items

    def total(self) -> Decimal:
        return sum(self._amounts.values(), Decimal("0"))

    def buckets(self) -> list[DREBucket]:
        return [
            DREBucket(
                key=key,
                name=self._names[key],
                amount=amount,
                items=list(self._items[key]),
            )
            for key, amount in self._amounts.items()
        ]


def compute_dre(
    entries: Iterable[LedgerEntry],
    sales_orders: Iterable[SalesOrder],
    categories: Iterable[Category],
    date_range: DateRange,
    *,
    people: Iterable[Person] = (),
    logger: Logger | None = None,
) -> DREResult:
    """Compute the income statement for a period.

    Entries are expected to be filtered to settled statuses by the caller.
    Sales orders outside the range or not confirmed/delivered are ignored.

    Args:
        entries: Settled ledger entries dated inside the range.
        sales_orders: Sales orders of the tenant.
        categories: Categories of the tenant.
        date_range: Reporting period.
        people: Optional people lookup used in expense descriptions.
        logger: Optional logger for data warnings.

    Returns:
        DREResult: Statement lines, category buckets and diagnostics.
    """
    entries = list(entries)
    sales_orders = list(sales_orders)
    categories_by_id = index_categories(categories)
    people_by_id = index_people(people)
    if logger is not None:
        validate_amount_sign(entries, logger)

    revenue = _BucketAccumulator()
    operating = _BucketAccumulator()
    fixed = _BucketAccumulator()

    sales = [
        order
        for order in sales_orders
        if is_revenue_sale(order) and date_range.contains(order.order_date)
    ]
    sales_revenue = sum((order.total for order in sales), Decimal("0"))
    if sales_revenue > 0:
        revenue.put(
            SALES_BUCKET_KEY,
            SALES_BUCKET_NAME,
            sales_revenue,
            [
                DRELineItem(
                    description=f"Sale #{_sale_label(order)}",
                    amount=order.total,
                    date=order.order_date,
                )
                for order in sales
            ],
        )

    revenue_count = 0
    operating_count = 0
    fixed_count = 0
    excluded_count = 0
    excluded_expense = Decimal("0")
    for entry in entries:
        if not date_range.contains(entry.transaction_date):
            continue
        name = category_name(entry.category_id, categories_by_id)
        if entry.entry_type == ENTRY_TYPE_REVENUE:
            revenue_count += 1
            revenue.add(
                entry.category_id if name else OTHER_REVENUE_KEY,
                name or OTHER_REVENUE_NAME,
                DRELineItem(
                    description=entry.description,
                    amount=entry.amount,
                    date=entry.transaction_date,
                ),
            )
            continue
        if entry.entry_type != ENTRY_TYPE_EXPENSE:
            continue

        item = DRELineItem(
            description=_expense_description(entry, people_by_id),
            amount=entry.amount,
            date=entry.transaction_date,
        )
        classification = classify_expense(entry, categories_by_id)
        if classification == DRE_OPERATING_EXPENSE:
            operating_count += 1
            operating.add(
                entry.category_id if name else GENERAL_EXPENSE_KEY,
                name or GENERAL_OPERATING_EXPENSE_NAME,
                item,
            )
        elif classification == DRE_FIXED_COST:
            fixed_count += 1
            fixed.add(
                entry.category_id if name else GENERAL_EXPENSE_KEY,
                name or GENERAL_FIXED_COST_NAME,
                item,
            )
        else:
            excluded_count += 1
            excluded_expense += entry.amount

    if excluded_count and logger is not None:
        logger.warning(
            f"{excluded_count} expense entries ({excluded_expense}) have a "
            "classification outside operating expense and fixed cost and "
            "are left out of the net result"
        )

    gross_revenue = revenue.total()
    operating_expense = operating.total()
    contribution_margin = gross_revenue - operating_expense
    fixed_cost = fixed.total()
    net_result = contribution_margin - fixed_cost

    return DREResult(
        period=date_range,
        gross_revenue=gross_revenue,
        operating_expense=operating_expense,
        contribution_margin=contribution_margin,
        fixed_cost=fixed_cost,
        net_result=net_result,
        revenue=revenue.buckets(),
        operating_expenses=operating.buckets(),
        fixed_costs=fixed.buckets(),
        excluded_expense=excluded_expense,
        diagnostics=DREDiagnostics(
            entries_count=len(entries),
            sales_orders_count=len(sales),
            sales_revenue=sales_revenue,
            revenue_entries_count=revenue_count,
            operating_expense_count=operating_count,
            fixed_cost_count=fixed_count,
            excluded_expense_count=excluded_count,
        ),
    )


def _sale_label(order: SalesOrder) -> str:
    if order.sequence_number is not None:
        return str(order.sequence_number)
    return order.id


def _expense_description(
    entry: LedgerEntry,
    people_by_id: dict[str, str],
) -> str:
    person = people_by_id.get(entry.person_id) if entry.person_id else None
    if person:
        return f"{entry.description} - {person}"
    return entry.description


__all__ = ["compute_dre"]
