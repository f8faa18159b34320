"""Simple CLI to validate the reporting API connection.

This adapter is meant for local operations: it builds the configured API
adapters and fetches periods and companies once.
"""

from pnl_dashboard.infrastructure.container import (
    build_income_api,
    build_reporting_api,
)
from pnl_dashboard.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run basic connectivity checks against the configured API."""
    logger = get_app_logger()
    reporting_api = build_reporting_api()
    income_api = build_income_api()

    periods = reporting_api.fetch_periods()
    logger.info(f"Reporting API: {len(periods)} periods")
    companies = income_api.fetch_companies()
    logger.info(f"Income API: {len(companies)} companies")

    logger.info("API connection is working.")


if __name__ == "__main__":
    main()
