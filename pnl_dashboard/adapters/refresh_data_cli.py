"""CLI adapter to trigger an upstream data refresh.

This module wires the RefreshDataUseCase to the configured reporting API
and prints how many periods are available afterwards.
"""

import sys

from pnl_dashboard.application.ports.reporting_api import ReportingApiError
from pnl_dashboard.application.use_cases.refresh_data import RefreshDataUseCase
from pnl_dashboard.infrastructure.container import build_reporting_api
from pnl_dashboard.infrastructure.logging.logger import get_app_logger


def main() -> int:
    """Run the refresh use case.

    Returns:
        int: Process exit code.
    """
    logger = get_app_logger()
    use_case = RefreshDataUseCase(
        reporting_api=build_reporting_api(),
        logger=logger,
    )
    try:
        outcome = use_case.execute()
    except ReportingApiError as exc:
        logger.error(f"Failed to refresh data: {exc}")
        print("Failed to refresh data.")
        return 1

    if not outcome.success:
        print(f"Refresh rejected: {outcome.message or 'no message'}")
        return 1
    print(
        f"Data refreshed successfully; "
        f"{len(outcome.periods or [])} periods available."
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
