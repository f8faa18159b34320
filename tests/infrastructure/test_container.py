"""Tests for the composition root."""

import pytest

from pnl_dashboard.infrastructure import container as container_module
from pnl_dashboard.infrastructure.http_reporting_api import (
    HttpIncomeApi,
    HttpReportingApi,
)
from pnl_dashboard.infrastructure.sample_reporting_api import (
    SampleIncomeApi,
    SampleReportingApi,
)
from pnl_dashboard.infrastructure.settings import ApiSettings


class _FakeLogger:
    def __getattr__(self, name):
        return lambda *args, **kwargs: None


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch):
    monkeypatch.setattr(container_module, "get_app_logger", _FakeLogger)


def test_sample_backend_returns_sample_adapters() -> None:
    settings = ApiSettings(backend="sample")

    assert isinstance(
        container_module.build_reporting_api(settings),
        SampleReportingApi,
    )
    assert isinstance(
        container_module.build_income_api(settings),
        SampleIncomeApi,
    )


def test_http_backend_wires_client_with_settings() -> None:
    settings = ApiSettings(
        backend="http",
        base_url="http://api.test",
        timeout=5.0,
    )

    reporting_api = container_module.build_reporting_api(settings)
    income_api = container_module.build_income_api(settings)
    client = container_module.build_http_client(settings)

    assert isinstance(reporting_api, HttpReportingApi)
    assert isinstance(income_api, HttpIncomeApi)
    assert client.base_url == "http://api.test"


def test_http_backend_requires_base_url() -> None:
    with pytest.raises(RuntimeError, match="PNL_API_BASE_URL"):
        container_module.build_reporting_api(ApiSettings(backend="http"))


def test_unsupported_backend_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported API backend"):
        container_module.build_income_api(ApiSettings(backend="graphql"))
