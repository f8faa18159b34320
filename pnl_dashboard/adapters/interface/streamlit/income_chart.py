"""Income trend chart data and Altair chart builder."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Literal

from pnl_dashboard.domain.models import IncomeTrend

if TYPE_CHECKING:  # pragma: no cover
    import altair as alt

ChartType = Literal["line", "bar"]


def prepare_income_chart_data(
    trend: IncomeTrend,
) -> list[dict[str, str | float]]:
    """Return Altair-ready records for the selected years."""
    return [
        {
            "year": str(year),
            "income": float(amount),
            "income_label": format_income(amount),
        }
        for year, amount in trend.selected_totals.items()
    ]


def format_income(value: Decimal) -> str:
    """Format a yearly income for labels."""
    return f"${value:,.2f}"


def format_growth(value: Decimal) -> str:
    """Format a growth rate in percent."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def build_income_chart(
    data: list[dict[str, str | float]],
    chart_type: ChartType,
    company_name: str,
) -> "alt.Chart":
    """Build a line or bar chart of annual income.

    Args:
        data: Records from ``prepare_income_chart_data``.
        chart_type: "line" or "bar".
        company_name: Name used in the series title.

    Returns:
        alt.Chart: Chart ready for ``st.altair_chart``.
    """
    import altair as alt

    base = alt.Chart(alt.Data(values=data))
    if chart_type == "bar":
        marks = base.mark_bar(color="#4bc0c0", cornerRadiusEnd=4)
    else:
        marks = base.mark_line(color="#4bc0c0", point=True)
    return marks.encode(
        x=alt.X("year:O", title="Year"),
        y=alt.Y(
            "income:Q",
            title="Income",
            scale=alt.Scale(zero=True),
            axis=alt.Axis(format="$,.0f"),
        ),
        tooltip=[
            alt.Tooltip("year:O"),
            alt.Tooltip("income_label:N", title="Income"),
        ],
    ).properties(
        title=f"Annual Income Analysis - {company_name}",
        height=400,
    )


__all__ = [
    "ChartType",
    "build_income_chart",
    "format_growth",
    "format_income",
    "prepare_income_chart_data",
]
