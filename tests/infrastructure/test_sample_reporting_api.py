"""Tests for the built-in sample backend."""

from datetime import date
from decimal import Decimal

from pnl_dashboard.domain.services import aggregate_pnl, group_by_year
from pnl_dashboard.infrastructure.sample_reporting_api import (
    SampleIncomeApi,
    SampleReportingApi,
)


def test_sample_periods_and_categories() -> None:
    api = SampleReportingApi()

    periods = api.fetch_periods()
    summary = aggregate_pnl(api.fetch_categories("2020-01"))

    assert [p.id for p in periods][:2] == ["2020-01", "2020-02"]
    assert summary.total_income == Decimal("120000")
    assert summary.total_expenses == Decimal("70000")
    assert summary.net_income == Decimal("50000")
    assert api.fetch_categories("missing") == []


def test_sample_date_range_consolidates_periods() -> None:
    api = SampleReportingApi()

    january = api.fetch_categories_by_date_range(
        date(2020, 1, 1),
        date(2020, 1, 31),
    )
    everything = api.fetch_categories_by_date_range(
        date(2020, 1, 1),
        date(2020, 12, 31),
    )

    assert aggregate_pnl(january).total_income == Decimal("120000")
    assert len(everything) > len(january)


def test_sample_refresh_succeeds() -> None:
    assert SampleReportingApi().refresh().success is True


def test_sample_income_series() -> None:
    api = SampleIncomeApi()

    companies = api.fetch_companies()
    acme = group_by_year(api.fetch_company_income(companies[0].id))

    assert acme == {
        2021: Decimal("1000"),
        2022: Decimal("1500"),
        2023: Decimal("1800"),
    }
    assert api.fetch_company_income(999) == []
    assert set(api.fetch_all_companies_income()) == {c.id for c in companies}
