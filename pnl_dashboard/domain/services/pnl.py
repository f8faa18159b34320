"""Domain services for Profit & Loss aggregation."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from pnl_dashboard.domain.constants import (
    CATEGORY_TYPE_EXPENSE,
    CATEGORY_TYPE_INCOME,
    CATEGORY_TYPE_PROFIT,
)
from pnl_dashboard.domain.models import Category, PnlSummary
from pnl_dashboard.utils.decimal_utils import parse_monetary_or_zero


def category_total(category: Category) -> Decimal:
    """Return the authoritative total of a category.

    Args:
        category: Category as received from the API.

    Returns:
        Decimal: Parsed category value; line items are ignored.
    """
    return parse_monetary_or_zero(category.value)


def line_items_total(category: Category) -> Decimal:
    """Return the sum of a category's line items, for display only."""
    return sum(
        (parse_monetary_or_zero(item.value) for item in category.line_items),
        Decimal("0"),
    )


def aggregate_pnl(
    categories: Iterable[Category],
    logger: Logger | None = None,
) -> PnlSummary:
    """Partition categories by type and derive P&L totals.

    Categories with an unknown type fall into no bucket. Profit categories
    are passed through and do not affect net income.

    Args:
        categories: Categories in display order; may be empty.
        logger: Optional logger for line item mismatches.

    Returns:
        PnlSummary: Buckets, totals and net income.
    """
    income: list[Category] = []
    expenses: list[Category] = []
    profit: list[Category] = []
    total_income = Decimal("0")
    total_expenses = Decimal("0")

    for category in categories:
        if category.category_type == CATEGORY_TYPE_INCOME:
            income.append(category)
            total_income += category_total(category)
        elif category.category_type == CATEGORY_TYPE_EXPENSE:
            expenses.append(category)
            total_expenses += category_total(category)
        elif category.category_type == CATEGORY_TYPE_PROFIT:
            profit.append(category)
        else:
            if logger is not None:
                logger.warning(
                    f"Ignoring category id={category.id} with unknown "
                    f"type {category.category_type!r}"
                )
            continue
        if logger is not None and category.line_items:
            details = line_items_total(category)
            if details != category_total(category):
                logger.debug(
                    f"Category id={category.id} total "
                    f"{category_total(category)} differs from line items "
                    f"{details}"
                )

    return PnlSummary(
        income_categories=income,
        expense_categories=expenses,
        profit_categories=profit,
        total_income=total_income,
        total_expenses=total_expenses,
        net_income=total_income - total_expenses,
    )


__all__ = ["aggregate_pnl", "category_total", "line_items_total"]
