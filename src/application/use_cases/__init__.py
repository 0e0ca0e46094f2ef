"""Application use cases package."""

from .get_business_forecast import GetBusinessForecastUseCase
from .get_cash_position import GetCashPositionUseCase
from .get_cashflow import GetDailyCashflowUseCase
from .get_dre import GetDREUseCase
from .get_estimate import GetEstimateUseCase
from .get_overdue_indicators import GetOverdueIndicatorsUseCase
from .get_pending_accounts import GetPendingAccountsUseCase
from .period_data_loader import PeriodData, PeriodDataLoader
from .request_sequencer import RequestSequencer

__all__ = [
    "GetBusinessForecastUseCase",
    "GetCashPositionUseCase",
    "GetDailyCashflowUseCase",
    "GetDREUseCase",
    "GetEstimateUseCase",
    "GetOverdueIndicatorsUseCase",
    "GetPendingAccountsUseCase",
    "PeriodData",
    "PeriodDataLoader",
    "RequestSequencer",
]
