"""Domain package for business rules and core models."""

from .constants import (
    CATEGORY_TYPE_EXPENSE,
    CATEGORY_TYPE_INCOME,
    CATEGORY_TYPE_PROFIT,
    CATEGORY_TYPES,
)
from .models import (
    Category,
    Company,
    IncomeObservation,
    IncomeTrend,
    LineItem,
    PnlReport,
    PnlSummary,
    RefreshResult,
    ReportPeriod,
)
from .policies import (
    filter_periods_by_company,
    find_period,
    select_period,
    unique_companies,
)
from .services import (
    aggregate_pnl,
    average_growth_rate,
    group_by_year,
    growth_rate,
    latest_observation,
    previous_observation,
)

__all__ = [
    "CATEGORY_TYPE_EXPENSE",
    "CATEGORY_TYPE_INCOME",
    "CATEGORY_TYPE_PROFIT",
    "CATEGORY_TYPES",
    "Category",
    "Company",
    "IncomeObservation",
    "IncomeTrend",
    "LineItem",
    "PnlReport",
    "PnlSummary",
    "RefreshResult",
    "ReportPeriod",
    "aggregate_pnl",
    "average_growth_rate",
    "filter_periods_by_company",
    "find_period",
    "group_by_year",
    "growth_rate",
    "latest_observation",
    "previous_observation",
    "select_period",
    "unique_companies",
]
