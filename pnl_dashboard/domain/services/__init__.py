"""Domain services package."""

from .income import (
    available_years,
    average_growth_rate,
    group_by_year,
    growth_rate,
    income_amount,
    latest_observation,
    previous_observation,
    select_years,
    year_of,
)
from .normalization import normalize_category_name, normalize_company_name
from .pnl import aggregate_pnl, category_total, line_items_total

__all__ = [
    "aggregate_pnl",
    "available_years",
    "average_growth_rate",
    "category_total",
    "group_by_year",
    "growth_rate",
    "income_amount",
    "latest_observation",
    "line_items_total",
    "normalize_category_name",
    "normalize_company_name",
    "previous_observation",
    "select_years",
    "year_of",
]
