"""CLI adapter printing a P&L report.

The report is selected with environment variables:
``PNL_REPORT_PERIOD_ID`` for a single period, or ``PNL_REPORT_START_DATE``
and ``PNL_REPORT_END_DATE`` for the consolidated view.
"""

from datetime import date
import os
import sys

from pnl_dashboard.adapters.interface.streamlit.pnl_table import (
    NO_DATA_MESSAGE,
    build_pnl_rows,
    rows_to_table,
)
from pnl_dashboard.application.ports.reporting_api import ReportingApiError
from pnl_dashboard.application.use_cases.get_pnl_report import (
    GetPnlReportUseCase,
)
from pnl_dashboard.infrastructure.container import build_reporting_api
from pnl_dashboard.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> int:
    """Print the requested P&L report."""
    logger = get_app_logger()
    period_id = os.getenv("PNL_REPORT_PERIOD_ID")
    start_date = _parse_date(os.getenv("PNL_REPORT_START_DATE"), logger)
    end_date = _parse_date(os.getenv("PNL_REPORT_END_DATE"), logger)
    if not period_id and (start_date is None or end_date is None):
        logger.warning(
            "Set PNL_REPORT_PERIOD_ID or both PNL_REPORT_START_DATE and "
            "PNL_REPORT_END_DATE."
        )
        return 2

    use_case = GetPnlReportUseCase(
        reporting_api=build_reporting_api(),
        logger=logger,
    )
    try:
        if period_id:
            report = use_case.execute(period_id)
            print(f"P&L report for period {period_id}")
        else:
            report = use_case.execute_for_date_range(start_date, end_date)
            print(f"Consolidated P&L report {start_date} -> {end_date}")
    except ReportingApiError as exc:
        logger.error(f"Failed to load P&L data: {exc}")
        print("Failed to load P&L data.")
        return 1

    rows = rows_to_table(build_pnl_rows(report.summary))
    if not rows:
        print(NO_DATA_MESSAGE)
        return 0
    width = max(len(row["Category"]) for row in rows)
    for row in rows:
        print(f"{row['Category']:<{width}}  {row['Total']:>16}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
