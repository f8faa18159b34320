"""Application use cases package."""

from .get_income_trend import (
    GetAllCompaniesIncomeUseCase,
    GetCompaniesUseCase,
    GetIncomeTrendUseCase,
)
from .get_pnl_report import GetPnlReportUseCase, PnlReport
from .get_report_periods import GetReportPeriodsUseCase, ReportPeriodsView
from .refresh_data import RefreshDataUseCase, RefreshOutcome
from .result_slots import LoadStatus, ResultSlot, SlotTicket, load_into_slot

__all__ = [
    "GetAllCompaniesIncomeUseCase",
    "GetCompaniesUseCase",
    "GetIncomeTrendUseCase",
    "GetPnlReportUseCase",
    "PnlReport",
    "GetReportPeriodsUseCase",
    "ReportPeriodsView",
    "RefreshDataUseCase",
    "RefreshOutcome",
    "LoadStatus",
    "ResultSlot",
    "SlotTicket",
    "load_into_slot",
]
