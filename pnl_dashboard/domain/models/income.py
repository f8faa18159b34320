"""Domain models for income trend analysis."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from pnl_dashboard.domain.models.reports import RawAmount


@dataclass(frozen=True)
class IncomeObservation:
    """A company's income for one sub-period."""

    period_start: date
    period_end: date
    income: RawAmount


@dataclass(frozen=True)
class IncomeTrend:
    """Income analytics for one company, ready for charting.

    Attributes:
        company_id: Company the observations belong to.
        observations: Observations as fetched.
        yearly_totals: Income summed per calendar year.
        available_years: Sorted years present in the data.
        selected_totals: Totals restricted to the selected years.
        latest: Most recent observation, if any.
        previous: Second most recent observation, if any.
        latest_growth: Growth rate from previous to latest, in percent.
        average_growth: Mean of consecutive growth rates, in percent.
    """

    company_id: int
    observations: list[IncomeObservation]
    yearly_totals: dict[int, Decimal]
    available_years: list[int]
    selected_totals: dict[int, Decimal]
    latest: IncomeObservation | None
    previous: IncomeObservation | None
    latest_growth: Decimal
    average_growth: Decimal


__all__ = ["IncomeObservation", "IncomeTrend"]
