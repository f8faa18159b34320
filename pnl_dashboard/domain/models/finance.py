"""Domain models for financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from pnl_dashboard.domain.models.reports import Category, ReportPeriod


@dataclass(frozen=True)
class PnlSummary:
    """Profit & Loss summary derived from categories.

    Attributes:
        income_categories: Income categories in input order.
        expense_categories: Expense categories in input order.
        profit_categories: Profit categories in input order.
        total_income: Sum of income category values.
        total_expenses: Sum of expense category values.
        net_income: Income minus expenses.
    """

    income_categories: list[Category]
    expense_categories: list[Category]
    profit_categories: list[Category]
    total_income: Decimal
    total_expenses: Decimal
    net_income: Decimal

    @property
    def is_empty(self) -> bool:
        """Return True when no category landed in any bucket."""
        return not (
            self.income_categories
            or self.expense_categories
            or self.profit_categories
        )


@dataclass(frozen=True)
class PnlReport:
    """P&L summary with the period or date range it covers."""

    summary: PnlSummary
    period: ReportPeriod | None = None
    start_date: date | None = None
    end_date: date | None = None


__all__ = ["PnlSummary", "PnlReport"]
