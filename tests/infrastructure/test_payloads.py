"""Tests for API payload mapping."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from pnl_dashboard.application.ports.reporting_api import ReportingApiError
from pnl_dashboard.infrastructure.payloads import (
    to_categories,
    to_companies,
    to_income_by_company,
    to_income_observations,
    to_periods,
    to_refresh_result,
    unwrap_data,
)


def test_unwrap_data_requires_envelope() -> None:
    assert unwrap_data({"data": []}, "/x") == []
    with pytest.raises(ReportingApiError):
        unwrap_data([], "/x")
    with pytest.raises(ReportingApiError):
        unwrap_data({"items": []}, "/x")


def test_to_periods_maps_nested_company() -> None:
    payload = [
        {
            "id": 7,
            "startDate": "2020-01-01T00:00:00.000Z",
            "endDate": "2020-01-31",
            "company": {"id": 1, "name": " Acme Corp "},
        }
    ]

    periods = to_periods(payload, MagicMock())

    assert len(periods) == 1
    assert periods[0].id == "7"
    assert periods[0].start_date == date(2020, 1, 1)
    assert periods[0].end_date == date(2020, 1, 31)
    assert periods[0].company.name == "Acme Corp"


def test_to_periods_skips_malformed_records() -> None:
    logger = MagicMock()
    payload = [
        {"id": 1, "startDate": "bad", "endDate": "2020-01-31",
         "company": {"id": 1, "name": "A"}},
        {"id": 2, "startDate": "2020-01-01", "endDate": "2020-01-31"},
        "not a record",
    ]

    assert to_periods(payload, logger) == []
    assert logger.warning.call_count == 2


def test_to_periods_keeps_inverted_range_with_warning() -> None:
    logger = MagicMock()
    payload = [
        {"id": "p", "startDate": "2020-02-01", "endDate": "2020-01-01",
         "company": {"id": 1, "name": "A"}},
    ]

    assert len(to_periods(payload, logger)) == 1
    logger.warning.assert_called_once()


def test_to_categories_maps_line_items() -> None:
    payload = [
        {
            "id": 3,
            "name": "cost_of_sales",
            "categoryType": "expense",
            "value": "1500.50",
            "isActive": True,
            "lineItems": [
                {
                    "id": 9,
                    "originalName": "Materials",
                    "name": "materials",
                    "value": "1500.50",
                    "accountId": "42",
                    "itemType": "expense",
                }
            ],
        },
        {"name": "no id"},
    ]

    categories = to_categories(payload, MagicMock())

    assert len(categories) == 1
    category = categories[0]
    assert category.category_type == "expense"
    assert category.value == "1500.50"
    item = category.line_items[0]
    assert item.name == "Materials"
    assert item.account_id == 42
    assert item.item_type == "expense"


def test_to_companies_skips_records_without_id() -> None:
    companies = to_companies(
        [{"id": 2, "name": "Globex"}, {"name": "Nameless"}],
        MagicMock(),
    )

    assert [c.id for c in companies] == [2]


def test_to_income_observations_defaults_period_end() -> None:
    logger = MagicMock()
    payload = [
        {"periodStart": "2021-01-01", "income": "1000"},
        {"periodStart": None, "income": "5"},
    ]

    observations = to_income_observations(payload, logger)

    assert len(observations) == 1
    assert observations[0].period_end == date(2021, 1, 1)
    assert observations[0].income == "1000"
    logger.warning.assert_called_once()


def test_to_income_by_company_converts_keys() -> None:
    payload = {
        "1": [{"periodStart": "2021-01-01", "income": "10"}],
        "x": [],
    }

    result = to_income_by_company(payload, MagicMock())

    assert list(result) == [1]
    assert to_income_by_company([], MagicMock()) == {}


def test_to_refresh_result_requires_literal_true() -> None:
    assert to_refresh_result({"success": True, "message": "ok"}).success
    assert to_refresh_result({"success": "true"}).success is False
    assert to_refresh_result(None).success is False
    assert to_refresh_result({"success": False}).message is None
