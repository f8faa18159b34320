"""In-memory adapters serving built-in demo data.

Selected with ``PNL_API_BACKEND=sample`` to run the dashboard without a
REST backend.
"""

from datetime import date
from decimal import Decimal

from pnl_dashboard.application.ports.income_api import IncomeApiPort
from pnl_dashboard.application.ports.reporting_api import ReportingApiPort
from pnl_dashboard.domain.models import (
    Category,
    Company,
    IncomeObservation,
    LineItem,
    RefreshResult,
    ReportPeriod,
)
from pnl_dashboard.utils.decimal_utils import coerce_decimal

ACME = Company(id=1, name="Acme Corp")
GLOBEX = Company(id=2, name="Globex")


def _category(
    category_id: int,
    name: str,
    category_type: str,
    details: list[tuple[str, str]],
) -> Category:
    items = tuple(
        LineItem(id=category_id * 100 + index, name=item_name, value=value)
        for index, (item_name, value) in enumerate(details, start=1)
    )
    total = sum(
        (coerce_decimal(value) for _name, value in details),
        Decimal("0"),
    )
    return Category(
        id=category_id,
        name=name,
        category_type=category_type,
        value=str(total),
        line_items=items,
    )


SAMPLE_PERIODS = [
    ReportPeriod(
        id="2020-01",
        start_date=date(2020, 1, 1),
        end_date=date(2020, 1, 31),
        company=ACME,
    ),
    ReportPeriod(
        id="2020-02",
        start_date=date(2020, 2, 1),
        end_date=date(2020, 2, 29),
        company=ACME,
    ),
    ReportPeriod(
        id="2020-02-globex",
        start_date=date(2020, 2, 1),
        end_date=date(2020, 2, 29),
        company=GLOBEX,
    ),
]

SAMPLE_CATEGORIES = {
    "2020-01": [
        _category(
            1,
            "revenue",
            "income",
            [("Product Sales", "80000"), ("Service Income", "40000")],
        ),
        _category(
            2,
            "expenses",
            "expense",
            [
                ("Salaries", "40000"),
                ("Rent", "15000"),
                ("Utilities", "15000"),
            ],
        ),
    ],
    "2020-02": [
        _category(
            3,
            "revenue",
            "income",
            [
                ("Product Sales", "60000"),
                ("Service Income", "30000"),
                ("Recurring Subscriptions", "10000"),
            ],
        ),
        _category(
            4,
            "expenses",
            "expense",
            [
                ("Salaries", "42000"),
                ("Rent", "15000"),
                ("Utilities", "16000"),
            ],
        ),
        _category(
            5,
            "other_income",
            "income",
            [("Interest", "500"), ("Misc", "250")],
        ),
    ],
    "2020-02-globex": [
        _category(6, "revenue", "income", [("Licensing", "25000")]),
        _category(7, "operating_costs", "expense", [("Hosting", "9000")]),
        _category(8, "gross_profit", "profit", [("Gross Profit", "16000")]),
    ],
}

SAMPLE_INCOME = {
    ACME.id: [
        IncomeObservation(date(2021, 1, 1), date(2021, 12, 31), "1000"),
        IncomeObservation(date(2022, 1, 1), date(2022, 12, 31), "1500"),
        IncomeObservation(date(2023, 1, 1), date(2023, 12, 31), "1800"),
    ],
    GLOBEX.id: [
        IncomeObservation(date(2022, 1, 1), date(2022, 6, 30), "400"),
        IncomeObservation(date(2022, 7, 1), date(2022, 12, 31), "600"),
        IncomeObservation(date(2023, 1, 1), date(2023, 6, 30), "700"),
    ],
}


class SampleReportingApi(ReportingApiPort):
    """Serve the demo periods and categories."""

    def fetch_periods(self) -> list[ReportPeriod]:
        return list(SAMPLE_PERIODS)

    def fetch_categories(self, period_id: str) -> list[Category]:
        return list(SAMPLE_CATEGORIES.get(period_id, []))

    def fetch_categories_by_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[Category]:
        categories: list[Category] = []
        for period in SAMPLE_PERIODS:
            if period.start_date >= start_date and period.end_date <= end_date:
                categories.extend(SAMPLE_CATEGORIES.get(period.id, []))
        return categories

    def refresh(self) -> RefreshResult:
        return RefreshResult(success=True, message="Sample data reloaded")


class SampleIncomeApi(IncomeApiPort):
    """Serve the demo companies and income series."""

    def fetch_companies(self) -> list[Company]:
        return [ACME, GLOBEX]

    def fetch_company_income(
        self,
        company_id: int,
    ) -> list[IncomeObservation]:
        return list(SAMPLE_INCOME.get(company_id, []))

    def fetch_all_companies_income(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> dict[int, list[IncomeObservation]]:
        return {
            company_id: [
                observation
                for observation in observations
                if (start_date is None or observation.period_start >= start_date)
                and (end_date is None or observation.period_start <= end_date)
            ]
            for company_id, observations in SAMPLE_INCOME.items()
        }


__all__ = ["SampleReportingApi", "SampleIncomeApi"]
