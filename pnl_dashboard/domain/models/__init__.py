"""Domain models package."""

from .finance import PnlReport, PnlSummary
from .income import IncomeObservation, IncomeTrend
from .reports import (
    Category,
    Company,
    LineItem,
    RawAmount,
    RefreshResult,
    ReportPeriod,
)

__all__ = [
    "Category",
    "Company",
    "IncomeObservation",
    "IncomeTrend",
    "LineItem",
    "PnlReport",
    "PnlSummary",
    "RawAmount",
    "RefreshResult",
    "ReportPeriod",
]
