"""Mapping of camelCase API payloads to domain models.

Monetary values are kept raw on the models; they are parsed permissively
by the domain services. Records without the fields needed to place them
(an id, a valid date) are dropped with a warning.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pnl_dashboard.application.ports.reporting_api import ReportingApiError
from pnl_dashboard.domain.models import (
    Category,
    Company,
    IncomeObservation,
    LineItem,
    RefreshResult,
    ReportPeriod,
)
from pnl_dashboard.domain.services import normalize_company_name
from pnl_dashboard.utils.decimal_utils import parse_iso_date


def unwrap_data(payload: Any, endpoint: str) -> Any:
    """Return the ``data`` member of a response envelope.

    Raises:
        ReportingApiError: If the payload is not an envelope.
    """
    if not isinstance(payload, Mapping) or "data" not in payload:
        raise ReportingApiError(
            f"Missing 'data' envelope in response from {endpoint}",
            endpoint=endpoint,
        )
    return payload["data"]


def _as_records(payload: Any) -> list[Mapping[str, Any]]:
    if not isinstance(payload, Iterable) or isinstance(payload, (str, bytes)):
        return []
    return [record for record in payload if isinstance(record, Mapping)]


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def to_company(record: Mapping[str, Any]) -> Company | None:
    """Map a company record."""
    company_id = _as_int(record.get("id"))
    if company_id is None:
        return None
    return Company(
        id=company_id,
        name=normalize_company_name(record.get("name")),
    )


def to_companies(payload: Any, logger) -> list[Company]:
    """Map a list of company records, skipping invalid ones."""
    companies: list[Company] = []
    for record in _as_records(payload):
        company = to_company(record)
        if company is None:
            logger.warning(f"Skipping company without id: {dict(record)}")
            continue
        companies.append(company)
    return companies


def to_periods(payload: Any, logger) -> list[ReportPeriod]:
    """Map report-date records with their nested company."""
    periods: list[ReportPeriod] = []
    for record in _as_records(payload):
        start_date = parse_iso_date(record.get("startDate"))
        end_date = parse_iso_date(record.get("endDate"))
        raw_company = record.get("company")
        company = (
            to_company(raw_company)
            if isinstance(raw_company, Mapping)
            else None
        )
        if (
            record.get("id") is None
            or start_date is None
            or end_date is None
            or company is None
        ):
            logger.warning(f"Skipping malformed period: {dict(record)}")
            continue
        if start_date > end_date:
            logger.warning(
                f"Period {record['id']} ends before it starts: "
                f"{start_date} > {end_date}"
            )
        periods.append(
            ReportPeriod(
                id=str(record["id"]),
                start_date=start_date,
                end_date=end_date,
                company=company,
            )
        )
    return periods


def to_line_item(record: Mapping[str, Any]) -> LineItem:
    """Map a line item record."""
    return LineItem(
        id=_as_int(record.get("id")) or 0,
        name=str(record.get("originalName") or record.get("name") or ""),
        value=record.get("value"),
        is_active=bool(record.get("isActive", True)),
        account_id=_as_int(record.get("accountId")),
        item_type=record.get("itemType"),
    )


def to_categories(payload: Any, logger) -> list[Category]:
    """Map category records with their nested line items."""
    categories: list[Category] = []
    for record in _as_records(payload):
        category_id = _as_int(record.get("id"))
        if category_id is None:
            logger.warning(f"Skipping category without id: {dict(record)}")
            continue
        categories.append(
            Category(
                id=category_id,
                name=str(record.get("name") or ""),
                category_type=str(record.get("categoryType") or ""),
                value=record.get("value"),
                line_items=tuple(
                    to_line_item(item)
                    for item in _as_records(record.get("lineItems") or [])
                ),
                is_active=bool(record.get("isActive", True)),
            )
        )
    return categories


def to_income_observations(payload: Any, logger) -> list[IncomeObservation]:
    """Map income data points; points without a start date are dropped."""
    observations: list[IncomeObservation] = []
    for record in _as_records(payload):
        period_start = parse_iso_date(record.get("periodStart"))
        if period_start is None:
            logger.warning(
                f"Skipping income point with invalid periodStart: "
                f"{dict(record)}"
            )
            continue
        period_end = parse_iso_date(record.get("periodEnd")) or period_start
        observations.append(
            IncomeObservation(
                period_start=period_start,
                period_end=period_end,
                income=record.get("income"),
            )
        )
    return observations


def to_income_by_company(
    payload: Any,
    logger,
) -> dict[int, list[IncomeObservation]]:
    """Map a ``{companyId: [points]}`` object."""
    if not isinstance(payload, Mapping):
        return {}
    by_company: dict[int, list[IncomeObservation]] = {}
    for raw_id, points in payload.items():
        company_id = _as_int(raw_id)
        if company_id is None:
            logger.warning(f"Skipping income for invalid company id {raw_id}")
            continue
        by_company[company_id] = to_income_observations(points, logger)
    return by_company


def to_refresh_result(payload: Any) -> RefreshResult:
    """Map the refresh response ``{success, message?}``."""
    if not isinstance(payload, Mapping):
        return RefreshResult(success=False, message=None)
    message = payload.get("message")
    return RefreshResult(
        success=payload.get("success") is True,
        message=str(message) if message is not None else None,
    )


__all__ = [
    "unwrap_data",
    "to_company",
    "to_companies",
    "to_periods",
    "to_line_item",
    "to_categories",
    "to_income_observations",
    "to_income_by_company",
    "to_refresh_result",
]
