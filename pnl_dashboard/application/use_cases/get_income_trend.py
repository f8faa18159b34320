"""Use cases for company income analytics."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from pnl_dashboard.application.ports.income_api import IncomeApiPort
from pnl_dashboard.domain.models import Company, IncomeTrend
from pnl_dashboard.domain.services import (
    available_years,
    average_growth_rate,
    group_by_year,
    growth_rate,
    latest_observation,
    previous_observation,
    select_years,
)
from pnl_dashboard.infrastructure.logging.logger import get_app_logger


class GetCompaniesUseCase:
    """Fetch the companies available for income analysis."""

    def __init__(self, income_api: IncomeApiPort, logger=None) -> None:
        self._income_api = income_api
        self._logger = logger or get_app_logger()

    def execute(self) -> list[Company]:
        """Return companies in API order."""
        companies = self._income_api.fetch_companies()
        self._logger.info(f"Fetched {len(companies)} companies")
        return companies


class GetIncomeTrendUseCase:
    """Compute yearly income and growth figures for one company."""

    def __init__(self, income_api: IncomeApiPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            income_api: Port providing income observations.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._income_api = income_api
        self._logger = logger or get_app_logger()

    def execute(
        self,
        company_id: int,
        selected_years: Iterable[int] | None = None,
    ) -> IncomeTrend:
        """Return the income trend of a company.

        Args:
            company_id: Company to analyse.
            selected_years: Years to keep in the selection; all available
                years when omitted.

        Returns:
            IncomeTrend: Yearly totals, selection and growth figures.
        """
        observations = self._income_api.fetch_company_income(company_id)
        self._logger.info(
            f"Fetched {len(observations)} income observations for "
            f"company {company_id}"
        )
        yearly_totals = group_by_year(observations)
        years = available_years(observations)
        selection = years if selected_years is None else selected_years
        latest = latest_observation(observations)
        previous = previous_observation(observations)
        latest_growth = (
            growth_rate(latest, previous)
            if latest is not None and previous is not None
            else Decimal("0")
        )
        return IncomeTrend(
            company_id=company_id,
            observations=observations,
            yearly_totals=yearly_totals,
            available_years=years,
            selected_totals=select_years(yearly_totals, selection),
            latest=latest,
            previous=previous,
            latest_growth=latest_growth,
            average_growth=average_growth_rate(observations),
        )


class GetAllCompaniesIncomeUseCase:
    """Compute yearly income totals for every company."""

    def __init__(self, income_api: IncomeApiPort, logger=None) -> None:
        self._income_api = income_api
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> dict[int, dict[int, Decimal]]:
        """Return yearly totals keyed by company id."""
        by_company = self._income_api.fetch_all_companies_income(
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched income for {len(by_company)} companies"
        )
        return {
            company_id: group_by_year(observations)
            for company_id, observations in by_company.items()
        }


__all__ = [
    "GetAllCompaniesIncomeUseCase",
    "GetCompaniesUseCase",
    "GetIncomeTrendUseCase",
    "IncomeTrend",
]
