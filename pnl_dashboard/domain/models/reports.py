"""Domain models for reporting entities received from the API."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

RawAmount = Decimal | str | int | float | None


@dataclass(frozen=True)
class Company:
    """Reporting entity. Identity is the id; the name is for display."""

    id: int
    name: str


@dataclass(frozen=True)
class ReportPeriod:
    """Reporting interval belonging to one company."""

    id: str
    start_date: date
    end_date: date
    company: Company


@dataclass(frozen=True)
class LineItem:
    """Single financial entry under a category.

    Attributes:
        id: Line item identifier.
        name: Display name.
        value: Raw monetary value as transported by the API.
        is_active: Upstream activity flag.
        account_id: Optional upstream account reference.
        item_type: Optional upstream item type.
    """

    id: int
    name: str
    value: RawAmount
    is_active: bool = True
    account_id: int | None = None
    item_type: str | None = None


@dataclass(frozen=True)
class Category:
    """Named grouping of line items tagged with a category type.

    Attributes:
        id: Category identifier.
        name: Machine-ish name, e.g. "cost_of_sales".
        category_type: "income", "expense" or "profit"; other values are
            kept as received.
        value: Raw authoritative category total.
        line_items: Presentational detail, never re-aggregated.
        is_active: Upstream activity flag.
    """

    id: int
    name: str
    category_type: str
    value: RawAmount
    line_items: tuple[LineItem, ...] = field(default_factory=tuple)
    is_active: bool = True


@dataclass(frozen=True)
class RefreshResult:
    """Response of the upstream refresh trigger."""

    success: bool
    message: str | None = None


__all__ = [
    "RawAmount",
    "Company",
    "ReportPeriod",
    "LineItem",
    "Category",
    "RefreshResult",
]
