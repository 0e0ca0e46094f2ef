"""Simple CLI to validate the ERP backend connection.

This adapter is meant for local operations: it builds the database adapter
through the composition root and runs a basic health check against the ERP
Postgres database.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the configured database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    erp_engine = adapter.get_erp_engine()
    logger.info(f"ERP DB: {erp_engine.url}")

    with erp_engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("ERP connection is working.")


if __name__ == "__main__":
    main()
