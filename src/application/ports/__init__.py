"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort, RepositoryError

__all__ = ["DatabaseEnginePort", "LedgerRepositoryPort", "RepositoryError"]
