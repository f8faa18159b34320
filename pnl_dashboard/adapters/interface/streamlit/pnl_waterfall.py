"""Plotly waterfall of a P&L summary."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Literal

from pnl_dashboard.domain.models import PnlSummary
from pnl_dashboard.domain.services import (
    category_total,
    normalize_category_name,
)

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


@dataclass(frozen=True)
class WaterfallStep:
    """Bar of the waterfall."""

    label: str
    value: Decimal
    measure: Literal["relative", "total"]


def build_waterfall_steps(summary: PnlSummary) -> list[WaterfallStep]:
    """Return income bars, negated expense bars and the net income total.

    Profit categories are display buckets and are not part of the walk.
    """
    steps = [
        WaterfallStep(
            label=normalize_category_name(category.name),
            value=category_total(category),
            measure="relative",
        )
        for category in summary.income_categories
    ]
    steps.extend(
        WaterfallStep(
            label=normalize_category_name(category.name),
            value=-category_total(category),
            measure="relative",
        )
        for category in summary.expense_categories
    )
    steps.append(
        WaterfallStep(
            label="Net Income",
            value=summary.net_income,
            measure="total",
        )
    )
    return steps


def build_waterfall_figure(steps: list[WaterfallStep]) -> "go.Figure":
    """Build a Plotly waterfall figure from precomputed steps."""
    import plotly.graph_objects as go

    fig = go.Figure(
        go.Waterfall(
            orientation="v",
            measure=[step.measure for step in steps],
            x=[step.label for step in steps],
            y=[float(step.value) for step in steps],
            connector=dict(line=dict(color="rgba(0,0,0,0.25)", width=1)),
            increasing=dict(marker=dict(color="#2e7d32")),
            decreasing=dict(marker=dict(color="#e76f51")),
            totals=dict(marker=dict(color="#1b9aaa")),
        )
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=420,
        showlegend=False,
    )
    return fig


__all__ = [
    "WaterfallStep",
    "build_waterfall_steps",
    "build_waterfall_figure",
]
