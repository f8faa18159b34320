"""P&L table presentation logic for the Streamlit UI.

Pure transformations from a ``PnlSummary`` to display rows. Money is
rounded to two decimals here, at render time only; the summary keeps its
exact totals.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

from pnl_dashboard.domain.models import Category, PnlSummary
from pnl_dashboard.domain.services import (
    category_total,
    normalize_category_name,
)
from pnl_dashboard.utils.decimal_utils import parse_monetary_or_zero

RowKind = Literal["section", "category", "line_item", "total", "net"]

INCOME_SECTION = "Income"
EXPENSES_SECTION = "Expenses"
TOTAL_INCOME_LABEL = "Total Income"
TOTAL_EXPENSES_LABEL = "Total Expenses"
NET_INCOME_LABEL = "Net Income"
NO_DATA_MESSAGE = "No P&L data available."

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class PnlRow:
    """One display row of the P&L table."""

    kind: RowKind
    label: str
    amount: Decimal | None = None
    category_id: int | None = None


def format_money(value: Decimal, symbol: str = "$") -> str:
    """Format an amount with two decimals and thousands separators."""
    rounded = value.quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def _category_rows(
    category: Category,
    include_line_items: bool,
) -> list[PnlRow]:
    rows = [
        PnlRow(
            kind="category",
            label=normalize_category_name(category.name),
            amount=category_total(category),
            category_id=category.id,
        )
    ]
    if include_line_items:
        rows.extend(
            PnlRow(
                kind="line_item",
                label=item.name,
                amount=parse_monetary_or_zero(item.value),
                category_id=category.id,
            )
            for item in category.line_items
        )
    return rows


def build_pnl_rows(
    summary: PnlSummary,
    *,
    expanded: set[int] | frozenset[int] = frozenset(),
) -> list[PnlRow]:
    """Build the ordered rows of the P&L table.

    Sections without categories are omitted. Profit categories follow the
    expense section and the net income row always closes the table.

    Args:
        summary: Aggregated P&L summary.
        expanded: Category ids whose line items are shown.

    Returns:
        list[PnlRow]: Rows in display order; empty when there is no data.
    """
    if summary.is_empty:
        return []
    rows: list[PnlRow] = []
    if summary.income_categories:
        rows.append(PnlRow(kind="section", label=INCOME_SECTION))
        for category in summary.income_categories:
            rows.extend(_category_rows(category, category.id in expanded))
        rows.append(
            PnlRow(
                kind="total",
                label=TOTAL_INCOME_LABEL,
                amount=summary.total_income,
            )
        )
    if summary.expense_categories:
        rows.append(PnlRow(kind="section", label=EXPENSES_SECTION))
        for category in summary.expense_categories:
            rows.extend(_category_rows(category, category.id in expanded))
        rows.append(
            PnlRow(
                kind="total",
                label=TOTAL_EXPENSES_LABEL,
                amount=summary.total_expenses,
            )
        )
    for category in summary.profit_categories:
        rows.extend(_category_rows(category, category.id in expanded))
    rows.append(
        PnlRow(kind="net", label=NET_INCOME_LABEL, amount=summary.net_income)
    )
    return rows


def rows_to_table(rows: list[PnlRow]) -> list[dict[str, str]]:
    """Convert rows into dataframe-ready records."""
    data: list[dict[str, str]] = []
    for row in rows:
        label = row.label
        if row.kind == "line_item":
            label = f"    {label}"
        data.append(
            {
                "Category": label,
                "Total": (
                    format_money(row.amount) if row.amount is not None else ""
                ),
            }
        )
    return data


__all__ = [
    "PnlRow",
    "NO_DATA_MESSAGE",
    "build_pnl_rows",
    "format_money",
    "rows_to_table",
]
