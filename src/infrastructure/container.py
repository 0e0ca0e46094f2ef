"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository_factory import (
    create_ledger_repository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ErpSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_settings() -> ErpSettings:
    """Return settings read from the environment."""
    return ErpSettings.from_env()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: ErpSettings | None = None,
) -> LedgerRepositoryPort:
    """Return the configured ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return create_ledger_repository(
        resolved_db,
        logger=get_app_logger(),
        settings=settings or build_settings(),
    )


__all__ = [
    "build_database_adapter",
    "build_settings",
    "build_ledger_repository",
]
