"""Selection rules for reporting periods and companies."""

from collections.abc import Iterable, Sequence

from pnl_dashboard.domain.models import Company, ReportPeriod


def unique_companies(periods: Iterable[ReportPeriod]) -> list[Company]:
    """Return the distinct companies of the periods, sorted by name.

    Args:
        periods: Periods with nested companies.

    Returns:
        list[Company]: One company per id (last occurrence wins).
    """
    by_id: dict[int, Company] = {}
    for period in periods:
        by_id[period.company.id] = period.company
    return sorted(by_id.values(), key=lambda company: company.name.lower())


def filter_periods_by_company(
    periods: Iterable[ReportPeriod],
    company_id: int | None,
) -> list[ReportPeriod]:
    """Return the periods of one company, or all when no id is given."""
    if company_id is None:
        return list(periods)
    return [period for period in periods if period.company.id == company_id]


def find_period(
    periods: Iterable[ReportPeriod],
    period_id: str | None,
) -> ReportPeriod | None:
    """Return the period with the given id, if any."""
    if not period_id:
        return None
    for period in periods:
        if period.id == period_id:
            return period
    return None


def select_period(
    periods: Sequence[ReportPeriod],
    period_id: str | None = None,
) -> ReportPeriod | None:
    """Return the requested period, falling back to the first one."""
    if not periods:
        return None
    return find_period(periods, period_id) or periods[0]


def period_label(period: ReportPeriod) -> str:
    """Return the selector label of a period."""
    return (
        f"{period.start_date.isoformat()} → {period.end_date.isoformat()}"
        f" - {period.company.name}"
    )


__all__ = [
    "unique_companies",
    "filter_periods_by_company",
    "find_period",
    "select_period",
    "period_label",
]
