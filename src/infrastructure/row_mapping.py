"""Conversion of raw backend rows into typed domain records.

Rows come either from SQLAlchemy (``Row._mapping``) or from the Supabase
REST API (plain dicts) and use the backend's Portuguese column names.
"""

from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from typing import TypeVar

from src.domain.constants import BACKEND_ENTRY_TYPES
from src.domain.models import Category, LedgerEntry, Person, SalesOrder
from src.utils.decimal_utils import coerce_decimal

T = TypeVar("T")


class InvalidRowError(ValueError):
    """Raised when a backend row cannot be converted into a record."""


def _as_mapping(row) -> Mapping:
    if isinstance(row, Mapping):
        return row
    mapping = getattr(row, "_mapping", None)
    if mapping is None:
        raise InvalidRowError(f"Unsupported row type: {type(row).__name__}")
    return mapping


def _required(row: Mapping, column: str):
    value = row.get(column)
    if value is None or value == "":
        raise InvalidRowError(f"Missing required column '{column}'")
    return value


def _optional_str(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_date(value) -> date | None:
    """Parse a date column value.

    Strings are sliced to their ``YYYY-MM-DD`` prefix, so timestamps are
    read as the calendar date they were written with.

    Args:
        value: ``date``, ``datetime`` or ISO string.

    Returns:
        date | None: Parsed date, or None for empty values.

    Raises:
        InvalidRowError: If the value is not a valid date.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as exc:
        raise InvalidRowError(f"Invalid date value: {value!r}") from exc


def _entry_type(raw) -> str:
    code = str(raw).strip().lower()
    if code in BACKEND_ENTRY_TYPES:
        return BACKEND_ENTRY_TYPES[code]
    if code in BACKEND_ENTRY_TYPES.values():
        return code
    raise InvalidRowError(f"Unknown entry type: {raw!r}")


def _amount(row: Mapping, column: str):
    value = _required(row, column)
    try:
        amount = coerce_decimal(value)
    except ValueError as exc:
        raise InvalidRowError(f"Invalid amount in '{column}': {value!r}") from exc
    if not amount.is_finite():
        raise InvalidRowError(f"Non-finite amount in '{column}': {value!r}")
    return amount


def map_ledger_entry(row) -> LedgerEntry:
    """Convert a ``transacoes`` row into a LedgerEntry."""
    data = _as_mapping(row)
    transaction_date = parse_date(_required(data, "data_transacao"))
    return LedgerEntry(
        id=str(_required(data, "id")),
        entry_type=_entry_type(_required(data, "tipo")),
        amount=_amount(data, "valor"),
        transaction_date=transaction_date,
        due_date=parse_date(data.get("data_vencimento")),
        category_id=_optional_str(data.get("id_categoria")),
        person_id=_optional_str(data.get("id_pessoa")),
        status=str(data.get("status") or "pendente").strip().lower(),
        description=str(data.get("descricao") or ""),
    )


def map_category(row) -> Category:
    """Convert a ``categorias`` row into a Category."""
    data = _as_mapping(row)
    raw_type = data.get("tipo")
    return Category(
        id=str(_required(data, "id")),
        name=str(data.get("nome") or ""),
        category_type=_entry_type(raw_type) if raw_type else "",
        dre_classification=_optional_str(data.get("classificacao_dre")),
    )


def map_person(row) -> Person:
    """Convert a ``pessoas`` row into a Person."""
    data = _as_mapping(row)
    return Person(
        id=str(_required(data, "id")),
        name=str(data.get("nome_razao_social") or ""),
    )


def map_sales_order(row) -> SalesOrder:
    """Convert a ``vendas`` row into a SalesOrder."""
    data = _as_mapping(row)
    sequence = data.get("id_sequencial")
    try:
        sequence_number = int(sequence) if sequence is not None else None
    except (TypeError, ValueError) as exc:
        raise InvalidRowError(f"Invalid sequence number: {sequence!r}") from exc
    return SalesOrder(
        id=str(_required(data, "id")),
        total=_amount(data, "total"),
        order_date=parse_date(_required(data, "data_venda")),
        status=str(data.get("status") or "").strip().lower(),
        sequence_number=sequence_number,
    )


def map_rows(
    rows: Iterable,
    mapper: Callable[[object], T],
    logger,
    table: str,
) -> list[T]:
    """Map rows with ``mapper``, logging and skipping invalid ones.

    Args:
        rows: Raw backend rows.
        mapper: Row conversion function.
        logger: Logger used for warnings.
        table: Table name used in log messages.

    Returns:
        list[T]: Converted records in row order.
    """
    records: list[T] = []
    for row in rows:
        try:
            records.append(mapper(row))
        except InvalidRowError as exc:
            logger.warning(f"Skipping invalid {table} row: {exc}")
    return records


__all__ = [
    "InvalidRowError",
    "parse_date",
    "map_ledger_entry",
    "map_category",
    "map_person",
    "map_sales_order",
    "map_rows",
]
