"""Lookups resolving category and person references of ledger entries."""

from collections.abc import Iterable

from src.domain.constants import (
    DRE_FIXED_COST,
    DRE_OPERATING_EXPENSE,
)
from src.domain.models import Category, LedgerEntry, Person


def index_categories(categories: Iterable[Category]) -> dict[str, Category]:
    return {category.id: category for category in categories}


def index_people(people: Iterable[Person]) -> dict[str, str]:
    return {person.id: person.name for person in people}


def normalize_classification(raw: str | None) -> str | None:
    """Normalize a DRE classification code.

    Args:
        raw: Classification as stored on the category.

    Returns:
        str | None: Lower-cased code, or None when blank.
    """
    if not raw:
        return None
    cleaned = raw.strip().lower()
    return cleaned or None


def classify_expense(
    entry: LedgerEntry,
    categories_by_id: dict[str, Category],
) -> str | None:
    """Return the income statement line an expense entry belongs to.

    Expenses without a category, with an unknown category or with an
    unclassified category are operating expenses. Any classification other
    than operating expense or fixed cost returns that classification so the
    caller can leave it out of both lines.

    Args:
        entry: Expense entry.
        categories_by_id: Categories of the tenant keyed by id.

    Returns:
        str | None: ``despesa_operacional``, ``custo_fixo`` or the raw
        classification of the category.
    """
    if not entry.category_id:
        return DRE_OPERATING_EXPENSE
    category = categories_by_id.get(entry.category_id)
    classification = normalize_classification(
        category.dre_classification if category else None
    )
    if classification is None or classification == DRE_OPERATING_EXPENSE:
        return DRE_OPERATING_EXPENSE
    if classification == DRE_FIXED_COST:
        return DRE_FIXED_COST
    return classification


def category_name(
    category_id: str | None,
    categories_by_id: dict[str, Category],
) -> str | None:
    if not category_id:
        return None
    category = categories_by_id.get(category_id)
    return category.name if category else None


__all__ = [
    "index_categories",
    "index_people",
    "normalize_classification",
    "classify_expense",
    "category_name",
]
