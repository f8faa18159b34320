"""Port for P&L reporting reads and the refresh trigger."""

from datetime import date
from typing import Protocol

from pnl_dashboard.domain.models import Category, RefreshResult, ReportPeriod


class ReportingApiError(RuntimeError):
    """Raised when the reporting API cannot be reached or answers badly.

    Attributes:
        endpoint: Endpoint path that failed.
        status: HTTP status when the server answered, else None.
    """

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status = status


class ReportingApiPort(Protocol):
    """Port exposing the reporting data needed by the P&L screens."""

    def fetch_periods(self) -> list[ReportPeriod]:
        """Return every reporting period with its company."""

    def fetch_categories(self, period_id: str) -> list[Category]:
        """Return the categories of one reporting period."""

    def fetch_categories_by_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[Category]:
        """Return consolidated categories across companies for a range."""

    def refresh(self) -> RefreshResult:
        """Ask the upstream source to reload its data."""


__all__ = ["ReportingApiError", "ReportingApiPort"]
