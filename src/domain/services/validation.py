"""Domain validation helpers."""

from collections.abc import Iterable

from src.domain.models import LedgerEntry


def validate_amount_sign(entries: Iterable[LedgerEntry], logger) -> int:
    """Warn about entries carrying a negative amount.

    Amounts are stored unsigned; the entry type carries the direction.

    Args:
        entries: Ledger entries to check.
        logger: Logger used for warnings.

    Returns:
        int: Number of entries with a negative amount.
    """
    negative = 0
    for entry in entries:
        if entry.amount < 0:
            negative += 1
            logger.warning(
                f"Negative amount on {entry.entry_type} entry "
                f"id={entry.id}: {entry.amount}"
            )
    return negative


__all__ = ["validate_amount_sign"]
