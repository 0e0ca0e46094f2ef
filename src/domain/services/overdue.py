"""Overdue payables and receivables."""

from collections.abc import Iterable
from datetime import date

from src.domain.constants import OVERDUE_WINDOWS, STATUS_PENDING
from src.domain.models import Category, LedgerEntry, OverdueItem, Person
from src.domain.services.classification import (
    category_name,
    index_categories,
    index_people,
)


def days_overdue(entry: LedgerEntry, today: date) -> int:
    """Return the days elapsed since the entry's due date.

    Entries without a due date fall back to their transaction date.
    """
    reference = entry.due_date or entry.transaction_date
    return (today - reference).days


def compute_overdue_items(
    entries: Iterable[LedgerEntry],
    categories: Iterable[Category],
    people: Iterable[Person],
    today: date,
) -> list[OverdueItem]:
    """Return pending entries due before ``today``.

    Args:
        entries: Candidate entries.
        categories: Categories for display names.
        people: People for display names.
        today: Reference date.

    Returns:
        list[OverdueItem]: Overdue entries, most overdue first.
    """
    categories_by_id = index_categories(categories)
    people_by_id = index_people(people)
    items: list[OverdueItem] = []
    for entry in entries:
        if entry.status != STATUS_PENDING:
            continue
        overdue = days_overdue(entry, today)
        if overdue <= 0:
            continue
        person = people_by_id.get(entry.person_id) if entry.person_id else None
        items.append(
            OverdueItem(
                entry=entry,
                category_name=category_name(
                    entry.category_id,
                    categories_by_id,
                )
                or "-",
                person_name=person or "-",
                days_overdue=overdue,
            )
        )
    return sorted(items, key=lambda item: item.days_overdue, reverse=True)


def filter_overdue_items(
    items: Iterable[OverdueItem],
    window: str = "all",
    category_id: str | None = None,
    person_id: str | None = None,
) -> list[OverdueItem]:
    """Filter overdue items by age window, category and person.

    Args:
        items: Overdue items.
        window: One of ``all``, ``7days``, ``30days`` or ``90days``.
        category_id: Keep only this category when given.
        person_id: Keep only this person when given.

    Returns:
        list[OverdueItem]: Matching items in input order.

    Raises:
        ValueError: If the window is unknown.
    """
    if window not in OVERDUE_WINDOWS:
        raise ValueError(
            f"Unsupported overdue window: {window}. "
            f"Expected one of {', '.join(OVERDUE_WINDOWS)}."
        )
    max_days = OVERDUE_WINDOWS[window]
    filtered = []
    for item in items:
        if category_id and item.entry.category_id != category_id:
            continue
        if person_id and item.entry.person_id != person_id:
            continue
        if max_days is not None and item.days_overdue > max_days:
            continue
        filtered.append(item)
    return filtered


__all__ = ["days_overdue", "compute_overdue_items", "filter_overdue_items"]
