"""Domain services for income trend analytics.

Ordering policy: observations are ordered by ``period_start`` with a stable
sort. ``latest_observation`` and ``previous_observation`` both read the same
descending order, so among tied start dates the observation that came first
in the input is the latest and the next one is the previous.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from pnl_dashboard.domain.models import IncomeObservation
from pnl_dashboard.utils.decimal_utils import parse_monetary_or_zero


def income_amount(observation: IncomeObservation) -> Decimal:
    """Return the parsed income of an observation (0 when malformed)."""
    return parse_monetary_or_zero(observation.income)


def year_of(observation: IncomeObservation) -> int:
    """Return the calendar year of an observation's start date."""
    return observation.period_start.year


def group_by_year(
    observations: Iterable[IncomeObservation],
) -> dict[int, Decimal]:
    """Sum income per calendar year of ``period_start``.

    Args:
        observations: Income observations in any order.

    Returns:
        dict[int, Decimal]: Year to summed income, ascending by year.
            Years without observations are absent.
    """
    totals: dict[int, Decimal] = {}
    for observation in observations:
        year = year_of(observation)
        totals[year] = totals.get(year, Decimal("0")) + income_amount(
            observation
        )
    return dict(sorted(totals.items()))


def available_years(observations: Iterable[IncomeObservation]) -> list[int]:
    """Return the sorted distinct years present in the observations."""
    return sorted({year_of(observation) for observation in observations})


def select_years(
    yearly_totals: dict[int, Decimal],
    years: Iterable[int],
) -> dict[int, Decimal]:
    """Restrict yearly totals to the selected years.

    Args:
        yearly_totals: Output of ``group_by_year``.
        years: Years selected for display.

    Returns:
        dict[int, Decimal]: Sorted selection, missing years mapped to 0.
    """
    return {
        year: yearly_totals.get(year, Decimal("0"))
        for year in sorted(set(years))
    }


def growth_rate(
    current: IncomeObservation,
    previous: IncomeObservation,
) -> Decimal:
    """Return the percentage growth from ``previous`` to ``current``.

    Returns:
        Decimal: Growth in percent, or 0 when the previous income is 0.
    """
    current_income = income_amount(current)
    previous_income = income_amount(previous)
    if previous_income == 0:
        return Decimal("0")
    return (current_income - previous_income) / previous_income * Decimal(
        "100"
    )


def sort_by_period_start(
    observations: Iterable[IncomeObservation],
    *,
    descending: bool = False,
) -> list[IncomeObservation]:
    """Return observations stably sorted by ``period_start``."""
    return sorted(
        observations,
        key=lambda observation: observation.period_start,
        reverse=descending,
    )


def average_growth_rate(
    observations: Iterable[IncomeObservation],
) -> Decimal:
    """Return the mean growth rate over consecutive observations.

    Args:
        observations: Observations in any order.

    Returns:
        Decimal: Mean of the n-1 consecutive growth rates, or 0 for fewer
            than two observations.
    """
    ordered = sort_by_period_start(observations)
    if len(ordered) < 2:
        return Decimal("0")
    rates = [
        growth_rate(ordered[index], ordered[index - 1])
        for index in range(1, len(ordered))
    ]
    return sum(rates, Decimal("0")) / Decimal(len(rates))


def latest_observation(
    observations: Sequence[IncomeObservation],
) -> IncomeObservation | None:
    """Return the observation with the most recent start date."""
    ordered = sort_by_period_start(observations, descending=True)
    return ordered[0] if ordered else None


def previous_observation(
    observations: Sequence[IncomeObservation],
) -> IncomeObservation | None:
    """Return the observation with the second most recent start date."""
    if len(observations) < 2:
        return None
    return sort_by_period_start(observations, descending=True)[1]


__all__ = [
    "available_years",
    "average_growth_rate",
    "group_by_year",
    "growth_rate",
    "income_amount",
    "latest_observation",
    "previous_observation",
    "select_years",
    "sort_by_period_start",
    "year_of",
]
