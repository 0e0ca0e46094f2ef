"""Factory helpers to select the ledger repository backend."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ErpSettings
from src.infrastructure.supabase_repository import (
    SupabaseLedgerRepository,
    create_supabase_client,
)


def create_ledger_repository(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: ErpSettings | None = None,
) -> LedgerRepositoryPort:
    """Return a ledger repository implementation based on configuration.

    Args:
        db_port: Port providing access to the ERP engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override, read from the environment
            when omitted.

    Returns:
        LedgerRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the Supabase backend lacks credentials.
        ValueError: If the backend name is not supported.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or ErpSettings.from_env()
    backend = resolved_settings.backend

    if backend == "sqlalchemy":
        return SqlAlchemyLedgerRepository(db_port, logger=resolved_logger)

    if backend == "supabase":
        if not resolved_settings.supabase_url or not resolved_settings.supabase_key:
            raise RuntimeError(
                "Supabase backend requires SUPABASE_URL and SUPABASE_KEY."
            )
        client = create_supabase_client(
            resolved_settings.supabase_url,
            resolved_settings.supabase_key,
        )
        return SupabaseLedgerRepository(client, logger=resolved_logger)

    raise ValueError(
        "Unsupported ERP backend: "
        f"{backend}. Expected sqlalchemy or supabase."
    )


__all__ = ["create_ledger_repository"]
