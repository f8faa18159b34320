"""Use case to trigger an upstream data refresh."""

from dataclasses import dataclass

from pnl_dashboard.application.ports.reporting_api import ReportingApiPort
from pnl_dashboard.domain.models import ReportPeriod
from pnl_dashboard.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RefreshOutcome:
    """Result of a refresh run.

    Attributes:
        success: Whether the upstream source accepted the refresh.
        message: Optional upstream message.
        periods: Reloaded periods on success, else None.
    """

    success: bool
    message: str | None
    periods: list[ReportPeriod] | None = None


class RefreshDataUseCase:
    """Trigger a refresh and reload the period list when it succeeds."""

    def __init__(self, reporting_api: ReportingApiPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            reporting_api: Port exposing the refresh trigger and periods.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._reporting_api = reporting_api
        self._logger = logger or get_app_logger()

    def execute(self) -> RefreshOutcome:
        """Run the refresh.

        Returns:
            RefreshOutcome: Upstream answer and the reloaded periods.
        """
        result = self._reporting_api.refresh()
        if not result.success:
            self._logger.warning(
                f"Refresh rejected by upstream source: {result.message}"
            )
            return RefreshOutcome(success=False, message=result.message)

        periods = self._reporting_api.fetch_periods()
        self._logger.info(
            f"Refresh succeeded, reloaded {len(periods)} periods"
        )
        return RefreshOutcome(
            success=True,
            message=result.message,
            periods=periods,
        )


__all__ = ["RefreshDataUseCase", "RefreshOutcome"]
