"""Database ports for the ERP dashboard.

This module defines the application-layer protocol for accessing the ERP
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine connected to the ERP backend database.

    Application code can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_erp_engine(self) -> Engine:
        """Get the engine for the ERP database.

        Returns:
            Engine: SQLAlchemy engine connected to the backend Postgres.
        """


__all__ = ["DatabaseEnginePort"]
