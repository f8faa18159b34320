"""Domain policies package."""

from .period_filters import (
    filter_periods_by_company,
    find_period,
    period_label,
    select_period,
    unique_companies,
)

__all__ = [
    "filter_periods_by_company",
    "find_period",
    "period_label",
    "select_period",
    "unique_companies",
]
