"""Composition root for wiring infrastructure adapters."""

from pnl_dashboard.application.ports.income_api import IncomeApiPort
from pnl_dashboard.application.ports.reporting_api import ReportingApiPort
from pnl_dashboard.infrastructure.http_client import JsonHttpClient
from pnl_dashboard.infrastructure.http_reporting_api import (
    HttpIncomeApi,
    HttpReportingApi,
)
from pnl_dashboard.infrastructure.logging.logger import get_app_logger
from pnl_dashboard.infrastructure.sample_reporting_api import (
    SampleIncomeApi,
    SampleReportingApi,
)
from pnl_dashboard.infrastructure.settings import (
    SUPPORTED_BACKENDS,
    ApiSettings,
)


def _resolve_settings(settings: ApiSettings | None) -> ApiSettings:
    resolved = settings or ApiSettings.from_env()
    if resolved.backend not in SUPPORTED_BACKENDS:
        raise ValueError(
            "Unsupported API backend: "
            f"{resolved.backend}. Expected http or sample."
        )
    return resolved


def build_http_client(settings: ApiSettings | None = None) -> JsonHttpClient:
    """Return a JSON client for the configured base URL."""
    resolved = settings or ApiSettings.from_env()
    if not resolved.base_url:
        raise RuntimeError(
            "HTTP backend requires a PNL_API_BASE_URL value."
        )
    return JsonHttpClient(
        resolved.base_url,
        timeout=resolved.timeout,
        logger=get_app_logger(),
    )


def build_reporting_api(
    settings: ApiSettings | None = None,
) -> ReportingApiPort:
    """Return the configured reporting API adapter."""
    resolved = _resolve_settings(settings)
    if resolved.backend == "sample":
        return SampleReportingApi()
    return HttpReportingApi(
        build_http_client(resolved),
        logger=get_app_logger(),
    )


def build_income_api(settings: ApiSettings | None = None) -> IncomeApiPort:
    """Return the configured income API adapter."""
    resolved = _resolve_settings(settings)
    if resolved.backend == "sample":
        return SampleIncomeApi()
    return HttpIncomeApi(
        build_http_client(resolved),
        logger=get_app_logger(),
    )


__all__ = [
    "build_http_client",
    "build_reporting_api",
    "build_income_api",
]
