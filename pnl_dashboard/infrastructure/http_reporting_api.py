"""REST adapters for the reporting and income ports."""

from datetime import date
from urllib.parse import quote

from pnl_dashboard.application.ports.income_api import IncomeApiPort
from pnl_dashboard.application.ports.reporting_api import ReportingApiPort
from pnl_dashboard.domain.models import (
    Category,
    Company,
    IncomeObservation,
    RefreshResult,
    ReportPeriod,
)
from pnl_dashboard.infrastructure.http_client import JsonHttpClient
from pnl_dashboard.infrastructure.logging.logger import get_app_logger
from pnl_dashboard.infrastructure.payloads import (
    to_categories,
    to_companies,
    to_income_by_company,
    to_income_observations,
    to_periods,
    to_refresh_result,
    unwrap_data,
)

REPORT_DATES_PATH = "/data/report-dates"
CATEGORIES_PATH = "/data/categories"
REFRESH_PATH = "/data/refresh"
COMPANIES_PATH = "/data/companies"
ALL_INCOME_PATH = "/income"


class HttpReportingApi(ReportingApiPort):
    """ReportingApiPort implementation backed by the REST API."""

    def __init__(self, client: JsonHttpClient, logger=None) -> None:
        """Initialize the adapter.

        Args:
            client: JSON client bound to the API base URL.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._client = client
        self._logger = logger or get_app_logger()

    def fetch_periods(self) -> list[ReportPeriod]:
        payload = self._client.get_json(REPORT_DATES_PATH)
        return to_periods(
            unwrap_data(payload, REPORT_DATES_PATH),
            self._logger,
        )

    def fetch_categories(self, period_id: str) -> list[Category]:
        path = f"{CATEGORIES_PATH}/{quote(str(period_id), safe='')}"
        payload = self._client.get_json(path)
        return to_categories(unwrap_data(payload, path), self._logger)

    def fetch_categories_by_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[Category]:
        payload = self._client.get_json(
            CATEGORIES_PATH,
            params={
                "startDate": start_date.isoformat(),
                "endDate": end_date.isoformat(),
            },
        )
        return to_categories(
            unwrap_data(payload, CATEGORIES_PATH),
            self._logger,
        )

    def refresh(self) -> RefreshResult:
        return to_refresh_result(self._client.post_json(REFRESH_PATH))


class HttpIncomeApi(IncomeApiPort):
    """IncomeApiPort implementation backed by the REST API."""

    def __init__(self, client: JsonHttpClient, logger=None) -> None:
        self._client = client
        self._logger = logger or get_app_logger()

    def fetch_companies(self) -> list[Company]:
        payload = self._client.get_json(COMPANIES_PATH)
        return to_companies(
            unwrap_data(payload, COMPANIES_PATH),
            self._logger,
        )

    def fetch_company_income(
        self,
        company_id: int,
    ) -> list[IncomeObservation]:
        path = f"{COMPANIES_PATH}/{int(company_id)}/income-by-year"
        payload = self._client.get_json(path)
        return to_income_observations(
            unwrap_data(payload, path),
            self._logger,
        )

    def fetch_all_companies_income(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> dict[int, list[IncomeObservation]]:
        params = {
            "startDate": start_date.isoformat() if start_date else "",
            "endDate": end_date.isoformat() if end_date else "",
        }
        payload = self._client.get_json(ALL_INCOME_PATH, params=params)
        return to_income_by_company(
            unwrap_data(payload, ALL_INCOME_PATH),
            self._logger,
        )


__all__ = ["HttpReportingApi", "HttpIncomeApi"]
