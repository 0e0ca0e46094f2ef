"""Supabase REST-backed repository for tenant-scoped ERP reads."""

from collections.abc import Callable, Sequence
from datetime import date

from postgrest.exceptions import APIError

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RepositoryError,
)
from src.domain.models import Category, LedgerEntry, Person, SalesOrder
from src.infrastructure.ledger_repository import BACKEND_TYPE_CODES
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.row_mapping import (
    map_category,
    map_ledger_entry,
    map_person,
    map_rows,
    map_sales_order,
)

PAGE_SIZE = 1000


def create_supabase_client(url: str, key: str):
    """Return a Supabase client for the project."""
    from supabase import create_client

    return create_client(url, key)


class SupabaseLedgerRepository(LedgerRepositoryPort):
    """Repository reading the ERP tables through the Supabase REST API.

    Every request filters on ``id_empresa`` in addition to the row-level
    security applied by the backend.
    """

    def __init__(self, client, logger=None, page_size: int = PAGE_SIZE) -> None:
        """Initialize the repository.

        Args:
            client: Supabase client (``supabase.Client``).
            logger: Optional logger compatible with logging.Logger-like API.
            page_size: Rows per request; the REST API caps responses at 1000.
        """
        self._client = client
        self._logger = logger or get_app_logger()
        self._page_size = page_size

    def fetch_entries_by_transaction_date(
        self,
        company_id: str,
        start_date: date,
        end_date: date,
        statuses: Sequence[str],
    ) -> list[LedgerEntry]:
        def build(query):
            return (
                query.eq("id_empresa", company_id)
                .in_("status", list(statuses))
                .gte("data_transacao", start_date.isoformat())
                .lte("data_transacao", end_date.isoformat())
            )

        rows = self._fetch_all("transacoes", build, order_col="data_transacao")
        return map_rows(rows, map_ledger_entry, self._logger, "transacoes")

    def fetch_entries_by_due_date(
        self,
        company_id: str,
        start_date: date | None,
        end_date: date | None,
        statuses: Sequence[str] | None = None,
        entry_type: str | None = None,
    ) -> list[LedgerEntry]:
        def build(query):
            query = query.eq("id_empresa", company_id)
            if start_date:
                query = query.gte("data_vencimento", start_date.isoformat())
            if end_date:
                query = query.lte("data_vencimento", end_date.isoformat())
            if entry_type:
                query = query.eq(
                    "tipo",
                    BACKEND_TYPE_CODES.get(entry_type, entry_type),
                )
            if statuses:
                query = query.in_("status", list(statuses))
            return query

        rows = self._fetch_all("transacoes", build, order_col="data_vencimento")
        return map_rows(rows, map_ledger_entry, self._logger, "transacoes")

    def fetch_categories(self, company_id: str) -> list[Category]:
        rows = self._fetch_all(
            "categorias",
            lambda query: query.eq("id_empresa", company_id).eq("ativo", True),
            order_col="nome",
        )
        return map_rows(rows, map_category, self._logger, "categorias")

    def fetch_people(self, company_id: str) -> list[Person]:
        rows = self._fetch_all(
            "pessoas",
            lambda query: query.eq("id_empresa", company_id).eq("ativo", True),
            order_col="nome_razao_social",
        )
        return map_rows(rows, map_person, self._logger, "pessoas")

    def fetch_sales_orders(
        self,
        company_id: str,
        start_date: date,
        end_date: date,
        statuses: Sequence[str],
    ) -> list[SalesOrder]:
        def build(query):
            return (
                query.eq("id_empresa", company_id)
                .eq("ativo", True)
                .in_("status", list(statuses))
                .gte("data_venda", start_date.isoformat())
                .lte("data_venda", end_date.isoformat())
            )

        rows = self._fetch_all("vendas", build, order_col="data_venda")
        return map_rows(rows, map_sales_order, self._logger, "vendas")

    def _fetch_all(
        self,
        table: str,
        build: Callable,
        order_col: str = "id",
    ) -> list[dict]:
        """Fetch every matching row, paginating past the response cap.

        Pages are ordered by ``order_col`` and then ``id`` so ties keep the
        same position across range requests.
        """
        rows: list[dict] = []
        offset = 0
        while True:
            try:
                query = build(self._client.table(table).select("*")).order(order_col)
                if order_col != "id":
                    query = query.order("id")
                response = query.range(
                    offset, offset + self._page_size - 1
                ).execute()
            except APIError as exc:
                raise RepositoryError(
                    f"Supabase query on {table} failed: {exc}"
                ) from exc
            batch = response.data or []
            rows.extend(batch)
            if len(batch) < self._page_size:
                break
            offset += self._page_size
        return rows


__all__ = ["SupabaseLedgerRepository", "create_supabase_client", "PAGE_SIZE"]
