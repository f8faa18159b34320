"""Port for company income reads."""

from datetime import date
from typing import Protocol

from pnl_dashboard.domain.models import Company, IncomeObservation


class IncomeApiPort(Protocol):
    """Port exposing companies and their income series."""

    def fetch_companies(self) -> list[Company]:
        """Return all companies."""

    def fetch_company_income(
        self,
        company_id: int,
    ) -> list[IncomeObservation]:
        """Return the income observations of one company."""

    def fetch_all_companies_income(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> dict[int, list[IncomeObservation]]:
        """Return income observations keyed by company id."""


__all__ = ["IncomeApiPort"]
