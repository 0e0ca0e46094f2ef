"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.domain.models import TenantSession
from src.infrastructure.logging.logger import get_app_logger

SUPPORTED_BACKENDS = ("sqlalchemy", "supabase")


@dataclass(frozen=True)
class ErpSettings:
    """Settings for selecting the backend and the default tenant.

    Attributes:
        backend: Backend identifier (sqlalchemy or supabase).
        supabase_url: Project URL for the Supabase REST backend.
        supabase_key: API key for the Supabase REST backend.
        company_id: Default tenant for CLIs and the dashboard.
        user_id: Default user for CLIs and the dashboard.
        currency: Display currency code.
    """

    backend: str = "sqlalchemy"
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    company_id: Optional[str] = None
    user_id: Optional[str] = None
    currency: str = "BRL"

    @classmethod
    def from_env(cls) -> "ErpSettings":
        """Build settings from environment variables (and ``.env``).

        Returns:
            ErpSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("ERP_BACKEND", "sqlalchemy").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            get_app_logger().warning(
                f"Unknown ERP_BACKEND '{backend}'. "
                f"Expected one of {', '.join(SUPPORTED_BACKENDS)}."
            )
        return cls(
            backend=backend,
            supabase_url=cls._clean(os.getenv("SUPABASE_URL")),
            supabase_key=cls._clean(os.getenv("SUPABASE_KEY")),
            company_id=cls._clean(os.getenv("ERP_COMPANY_ID")),
            user_id=cls._clean(os.getenv("ERP_USER_ID")),
            currency=(os.getenv("ERP_CURRENCY") or "BRL").strip().upper(),
        )

    def default_session(self) -> TenantSession:
        """Return the tenant session configured for non-interactive use."""
        return TenantSession(user_id=self.user_id, company_id=self.company_id)

    @staticmethod
    def _clean(value: str | None) -> str | None:
        if value is None:
            return None
        cleaned = value.strip()
        return cleaned or None


__all__ = ["ErpSettings", "SUPPORTED_BACKENDS"]
