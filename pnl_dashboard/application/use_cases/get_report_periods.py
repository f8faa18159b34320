"""Use case to list reporting periods and the companies they cover."""

from dataclasses import dataclass

from pnl_dashboard.application.ports.reporting_api import ReportingApiPort
from pnl_dashboard.domain.models import Company, ReportPeriod
from pnl_dashboard.domain.policies import (
    filter_periods_by_company,
    unique_companies,
)
from pnl_dashboard.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ReportPeriodsView:
    """Periods and companies for the selectors.

    Attributes:
        periods: Every period returned by the API.
        companies: Distinct companies, sorted by name.
        filtered_periods: Periods of the selected company (all when none).
    """

    periods: list[ReportPeriod]
    companies: list[Company]
    filtered_periods: list[ReportPeriod]


class GetReportPeriodsUseCase:
    """Fetch reporting periods and derive the company selector."""

    def __init__(self, reporting_api: ReportingApiPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            reporting_api: Port providing reporting periods.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._reporting_api = reporting_api
        self._logger = logger or get_app_logger()

    def execute(self, company_id: int | None = None) -> ReportPeriodsView:
        """Return periods, companies and the periods of ``company_id``."""
        periods = self._reporting_api.fetch_periods()
        companies = unique_companies(periods)
        self._logger.info(
            f"Fetched {len(periods)} periods for {len(companies)} companies"
        )
        return ReportPeriodsView(
            periods=periods,
            companies=companies,
            filtered_periods=filter_periods_by_company(periods, company_id),
        )


__all__ = ["GetReportPeriodsUseCase", "ReportPeriodsView"]
