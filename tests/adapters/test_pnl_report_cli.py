"""Tests for the pnl_report_cli adapter."""

from unittest.mock import MagicMock

import pytest

from pnl_dashboard.adapters import pnl_report_cli
from pnl_dashboard.application.ports.reporting_api import ReportingApiError
from pnl_dashboard.infrastructure.sample_reporting_api import (
    SampleReportingApi,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "PNL_REPORT_PERIOD_ID",
        "PNL_REPORT_START_DATE",
        "PNL_REPORT_END_DATE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(pnl_report_cli, "get_app_logger", MagicMock)


def test_main_requires_a_selection(monkeypatch):
    """Without period or range the CLI exits with usage code 2."""
    monkeypatch.setenv("PNL_REPORT_START_DATE", "2020-01-01")
    monkeypatch.setenv("PNL_REPORT_END_DATE", "not-a-date")

    assert pnl_report_cli.main() == 2


def test_main_prints_period_report(monkeypatch, capsys):
    """Rows of the period report are printed."""
    monkeypatch.setenv("PNL_REPORT_PERIOD_ID", "2020-01")
    monkeypatch.setattr(
        pnl_report_cli,
        "build_reporting_api",
        SampleReportingApi,
    )

    assert pnl_report_cli.main() == 0

    out = capsys.readouterr().out
    assert "P&L report for period 2020-01" in out
    assert "Total Income" in out
    assert "$120,000.00" in out
    assert "$50,000.00" in out


def test_main_prints_consolidated_report(monkeypatch, capsys):
    """A date range selects the consolidated report."""
    monkeypatch.setenv("PNL_REPORT_START_DATE", "2020-01-01")
    monkeypatch.setenv("PNL_REPORT_END_DATE", "2020-01-31")
    monkeypatch.setattr(
        pnl_report_cli,
        "build_reporting_api",
        SampleReportingApi,
    )

    assert pnl_report_cli.main() == 0

    out = capsys.readouterr().out
    assert "Consolidated P&L report 2020-01-01 -> 2020-01-31" in out
    assert "$50,000.00" in out


def test_main_prints_no_data_message(monkeypatch, capsys):
    """An unknown period prints the no-data message."""
    monkeypatch.setenv("PNL_REPORT_PERIOD_ID", "1999-01")
    monkeypatch.setattr(
        pnl_report_cli,
        "build_reporting_api",
        SampleReportingApi,
    )

    assert pnl_report_cli.main() == 0
    assert "No P&L data available." in capsys.readouterr().out


def test_main_handles_api_errors(monkeypatch, capsys):
    """API failures exit with code 1."""
    api = MagicMock()
    api.fetch_categories.side_effect = ReportingApiError("down")
    monkeypatch.setenv("PNL_REPORT_PERIOD_ID", "2020-01")
    monkeypatch.setattr(pnl_report_cli, "build_reporting_api", lambda: api)

    assert pnl_report_cli.main() == 1
    assert "Failed to load P&L data." in capsys.readouterr().out
