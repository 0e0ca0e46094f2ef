"""SQLAlchemy-backed repository reading the ERP tables directly."""

from collections.abc import Sequence
from datetime import date

from sqlalchemy import bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RepositoryError,
)
from src.domain.constants import BACKEND_ENTRY_TYPES
from src.domain.models import Category, LedgerEntry, Person, SalesOrder
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.row_mapping import (
    map_category,
    map_ledger_entry,
    map_person,
    map_rows,
    map_sales_order,
)

BACKEND_TYPE_CODES = {value: key for key, value in BACKEND_ENTRY_TYPES.items()}

LEDGER_COLUMNS = """
    id, tipo, valor, data_transacao, data_vencimento,
    id_categoria, id_pessoa, status, descricao
"""


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository issuing tenant-scoped SQL against the backend Postgres."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ERP engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_entries_by_transaction_date(
        self,
        company_id: str,
        start_date: date,
        end_date: date,
        statuses: Sequence[str],
    ) -> list[LedgerEntry]:
        query = text(
            f"""
            SELECT {LEDGER_COLUMNS}
            FROM transacoes
            WHERE id_empresa = :company_id
              AND status IN :statuses
              AND data_transacao >= :start_date
              AND data_transacao <= :end_date
            ORDER BY data_transacao, id
            """
        ).bindparams(bindparam("statuses", expanding=True))
        params = {
            "company_id": company_id,
            "statuses": list(statuses),
            "start_date": start_date,
            "end_date": end_date,
        }
        rows = self._execute(query, params)
        return map_rows(rows, map_ledger_entry, self._logger, "transacoes")

    def fetch_entries_by_due_date(
        self,
        company_id: str,
        start_date: date | None,
        end_date: date | None,
        statuses: Sequence[str] | None = None,
        entry_type: str | None = None,
    ) -> list[LedgerEntry]:
        query, params = self._build_due_date_query(
            company_id,
            start_date,
            end_date,
            statuses,
            entry_type,
        )
        rows = self._execute(query, params)
        return map_rows(rows, map_ledger_entry, self._logger, "transacoes")

    def fetch_categories(self, company_id: str) -> list[Category]:
        query = text(
            """
            SELECT id, nome, tipo, classificacao_dre
            FROM categorias
            WHERE id_empresa = :company_id AND ativo = true
            ORDER BY nome
            """
        )
        rows = self._execute(query, {"company_id": company_id})
        return map_rows(rows, map_category, self._logger, "categorias")

    def fetch_people(self, company_id: str) -> list[Person]:
        query = text(
            """
            SELECT id, nome_razao_social
            FROM pessoas
            WHERE id_empresa = :company_id AND ativo = true
            ORDER BY nome_razao_social
            """
        )
        rows = self._execute(query, {"company_id": company_id})
        return map_rows(rows, map_person, self._logger, "pessoas")

    def fetch_sales_orders(
        self,
        company_id: str,
        start_date: date,
        end_date: date,
        statuses: Sequence[str],
    ) -> list[SalesOrder]:
        query = text(
            """
            SELECT id, id_sequencial, total, data_venda, status
            FROM vendas
            WHERE id_empresa = :company_id
              AND ativo = true
              AND status IN :statuses
              AND data_venda >= :start_date
              AND data_venda <= :end_date
            ORDER BY data_venda, id
            """
        ).bindparams(bindparam("statuses", expanding=True))
        params = {
            "company_id": company_id,
            "statuses": list(statuses),
            "start_date": start_date,
            "end_date": end_date,
        }
        rows = self._execute(query, params)
        return map_rows(rows, map_sales_order, self._logger, "vendas")

    def _execute(self, query, params: dict) -> list:
        engine = self._db_port.get_erp_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"ERP query failed: {exc}") from exc

    @staticmethod
    def _build_due_date_query(
        company_id: str,
        start_date: date | None,
        end_date: date | None,
        statuses: Sequence[str] | None,
        entry_type: str | None,
    ):
        base_sql = f"""
        SELECT {LEDGER_COLUMNS}
        FROM transacoes
        WHERE id_empresa = :company_id
        """
        params: dict = {"company_id": company_id}
        if start_date:
            base_sql += " AND data_vencimento >= :start_date"
            params["start_date"] = start_date
        if end_date:
            base_sql += " AND data_vencimento <= :end_date"
            params["end_date"] = end_date
        if entry_type:
            base_sql += " AND tipo = :entry_type"
            params["entry_type"] = BACKEND_TYPE_CODES.get(entry_type, entry_type)
        if statuses:
            base_sql += " AND status IN :statuses"
            params["statuses"] = list(statuses)
        base_sql += " ORDER BY data_vencimento, id"
        query = text(base_sql)
        if statuses:
            query = query.bindparams(bindparam("statuses", expanding=True))
        return query, params


__all__ = ["SqlAlchemyLedgerRepository", "BACKEND_TYPE_CODES"]
