"""Application ports package."""

from .income_api import IncomeApiPort
from .reporting_api import ReportingApiError, ReportingApiPort

__all__ = [
    "IncomeApiPort",
    "ReportingApiError",
    "ReportingApiPort",
]
