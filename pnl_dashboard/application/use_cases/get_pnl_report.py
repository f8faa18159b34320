"""Use case to build a Profit & Loss report."""

from datetime import date

from pnl_dashboard.application.ports.reporting_api import ReportingApiPort
from pnl_dashboard.domain.models import PnlReport, ReportPeriod
from pnl_dashboard.domain.services import aggregate_pnl
from pnl_dashboard.infrastructure.logging.logger import get_app_logger


class GetPnlReportUseCase:
    """Compute P&L totals for a period or a consolidated date range."""

    def __init__(self, reporting_api: ReportingApiPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            reporting_api: Port providing categories.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._reporting_api = reporting_api
        self._logger = logger or get_app_logger()

    def execute(
        self,
        period_id: str,
        period: ReportPeriod | None = None,
    ) -> PnlReport:
        """Return the P&L report of one reporting period.

        Args:
            period_id: Identifier of the reporting period.
            period: Optional period metadata to attach to the report.

        Returns:
            PnlReport: Aggregated summary and its period.
        """
        categories = self._reporting_api.fetch_categories(period_id)
        self._logger.info(
            f"Fetched {len(categories)} categories for period {period_id}"
        )
        summary = aggregate_pnl(categories, logger=self._logger)
        self._log_totals(summary)
        return PnlReport(
            summary=summary,
            period=period,
            start_date=period.start_date if period else None,
            end_date=period.end_date if period else None,
        )

    def execute_for_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> PnlReport:
        """Return the consolidated P&L report for a date range.

        Args:
            start_date: First day of the range.
            end_date: Last day of the range.

        Returns:
            PnlReport: Aggregated summary across companies.
        """
        if start_date > end_date:
            self._logger.warning(
                f"Consolidated range starts after it ends: "
                f"{start_date} > {end_date}"
            )
        categories = self._reporting_api.fetch_categories_by_date_range(
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched {len(categories)} consolidated categories for "
            f"{start_date} - {end_date}"
        )
        summary = aggregate_pnl(categories, logger=self._logger)
        self._log_totals(summary)
        return PnlReport(
            summary=summary,
            start_date=start_date,
            end_date=end_date,
        )

    def _log_totals(self, summary) -> None:
        self._logger.info(
            f"P&L totals computed: income={summary.total_income}, "
            f"expenses={summary.total_expenses}, net={summary.net_income}"
        )


__all__ = ["GetPnlReportUseCase", "PnlReport"]
