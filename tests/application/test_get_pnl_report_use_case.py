"""Tests for the GetPnlReportUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from pnl_dashboard.application.use_cases.get_pnl_report import (
    GetPnlReportUseCase,
)
from pnl_dashboard.domain.models import (
    Category,
    Company,
    RefreshResult,
    ReportPeriod,
)


class _FakeReportingApi:
    def __init__(self, categories: list[Category]) -> None:
        self._categories = categories
        self.calls: list[tuple] = []

    def fetch_periods(self) -> list[ReportPeriod]:
        return []

    def fetch_categories(self, period_id: str) -> list[Category]:
        self.calls.append(("period", period_id))
        return list(self._categories)

    def fetch_categories_by_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[Category]:
        self.calls.append(("range", start_date, end_date))
        return list(self._categories)

    def refresh(self) -> RefreshResult:
        return RefreshResult(success=True)


CATEGORIES = [
    Category(id=1, name="revenue", category_type="income", value="120000"),
    Category(id=2, name="rent", category_type="expense", value="70000"),
]


def test_execute_aggregates_categories_of_a_period() -> None:
    """Period report should carry totals and period dates."""
    api = _FakeReportingApi(CATEGORIES)
    period = ReportPeriod(
        id="2020-01",
        start_date=date(2020, 1, 1),
        end_date=date(2020, 1, 31),
        company=Company(id=1, name="Acme Corp"),
    )
    use_case = GetPnlReportUseCase(api, logger=MagicMock())

    report = use_case.execute("2020-01", period=period)

    assert api.calls == [("period", "2020-01")]
    assert report.summary.net_income == Decimal("50000")
    assert report.period is period
    assert report.start_date == date(2020, 1, 1)
    assert report.end_date == date(2020, 1, 31)


def test_execute_without_period_metadata() -> None:
    """Dates stay empty when no period metadata is given."""
    use_case = GetPnlReportUseCase(_FakeReportingApi([]), logger=MagicMock())

    report = use_case.execute("2020-01")

    assert report.period is None
    assert report.start_date is None
    assert report.summary.is_empty is True


def test_execute_for_date_range_uses_consolidated_endpoint() -> None:
    """Consolidated reports should query by date range."""
    api = _FakeReportingApi(CATEGORIES)
    logger = MagicMock()
    use_case = GetPnlReportUseCase(api, logger=logger)

    report = use_case.execute_for_date_range(date(2020, 1, 1), date(2020, 12, 31))

    assert api.calls == [("range", date(2020, 1, 1), date(2020, 12, 31))]
    assert report.summary.total_income == Decimal("120000")
    assert report.start_date == date(2020, 1, 1)
    assert report.end_date == date(2020, 12, 31)
    logger.warning.assert_not_called()


def test_execute_for_inverted_range_warns() -> None:
    """An inverted range is logged but still forwarded."""
    api = _FakeReportingApi([])
    logger = MagicMock()
    use_case = GetPnlReportUseCase(api, logger=logger)

    use_case.execute_for_date_range(date(2021, 1, 1), date(2020, 1, 1))

    logger.warning.assert_called_once()
    assert len(api.calls) == 1
