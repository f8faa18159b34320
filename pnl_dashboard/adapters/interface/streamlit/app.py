"""Streamlit dashboard entry point."""

from dataclasses import replace
from datetime import date
import importlib

import streamlit as st

from pnl_dashboard.adapters.interface.streamlit.income_chart import (
    build_income_chart,
    format_growth,
    format_income,
    prepare_income_chart_data,
)
from pnl_dashboard.adapters.interface.streamlit.pnl_table import (
    NO_DATA_MESSAGE,
    build_pnl_rows,
    format_money,
    rows_to_table,
)
from pnl_dashboard.adapters.interface.streamlit.pnl_waterfall import (
    build_waterfall_figure,
    build_waterfall_steps,
)
from pnl_dashboard.application.ports.income_api import IncomeApiPort
from pnl_dashboard.application.ports.reporting_api import (
    ReportingApiError,
    ReportingApiPort,
)
from pnl_dashboard.application.use_cases.get_income_trend import (
    GetCompaniesUseCase,
    GetIncomeTrendUseCase,
)
from pnl_dashboard.application.use_cases.get_pnl_report import (
    GetPnlReportUseCase,
)
from pnl_dashboard.application.use_cases.get_report_periods import (
    GetReportPeriodsUseCase,
    ReportPeriodsView,
)
from pnl_dashboard.application.use_cases.refresh_data import (
    RefreshDataUseCase,
    RefreshOutcome,
)
from pnl_dashboard.application.use_cases.result_slots import (
    LoadStatus,
    ResultSlot,
    load_into_slot,
)
from pnl_dashboard.domain.models import Company, IncomeTrend, PnlReport
from pnl_dashboard.domain.policies import (
    filter_periods_by_company,
    find_period,
    period_label,
    unique_companies,
)
from pnl_dashboard.domain.services import income_amount, select_years
from pnl_dashboard.infrastructure.container import (
    build_income_api,
    build_reporting_api,
)
from pnl_dashboard.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

PAGES = ["P&L Reports", "Income Dashboard"]


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy/pandas are usable for Altair charts."""
    numpy = importlib.import_module("numpy")
    if not hasattr(numpy, "ndarray"):
        return False, (
            "numpy is installed but incomplete (missing ndarray); "
            "reinstall numpy to render income charts."
        )
    pandas = importlib.import_module("pandas")
    if not hasattr(pandas, "Timestamp"):
        return False, (
            "pandas is installed but incomplete (missing Timestamp); "
            "reinstall pandas to render income charts."
        )
    return True, None


def _reporting_api() -> ReportingApiPort:
    """Build the reporting adapter, reporting wiring errors as API errors."""
    try:
        return build_reporting_api()
    except (RuntimeError, ValueError) as exc:
        raise ReportingApiError(
            f"Reporting API is not configured: {exc}"
        ) from exc


def _income_api() -> IncomeApiPort:
    """Build the income adapter, reporting wiring errors as API errors."""
    try:
        return build_income_api()
    except (RuntimeError, ValueError) as exc:
        raise ReportingApiError(
            f"Income API is not configured: {exc}"
        ) from exc


def _fetch_periods(company_id: int | None = None) -> ReportPeriodsView:
    """Fetch reporting periods through the configured API."""
    use_case = GetReportPeriodsUseCase(reporting_api=_reporting_api())
    return use_case.execute(company_id=company_id)


def _fetch_pnl_report(period_id: str, period=None) -> PnlReport:
    """Fetch and aggregate the P&L of one period."""
    use_case = GetPnlReportUseCase(reporting_api=_reporting_api())
    return use_case.execute(period_id, period=period)


def _fetch_consolidated_report(start_date: date, end_date: date) -> PnlReport:
    """Fetch and aggregate the consolidated P&L of a date range."""
    use_case = GetPnlReportUseCase(reporting_api=_reporting_api())
    return use_case.execute_for_date_range(start_date, end_date)


def _fetch_companies() -> list[Company]:
    """Fetch the companies of the income dashboard."""
    use_case = GetCompaniesUseCase(income_api=_income_api())
    return use_case.execute()


def _fetch_income_trend(
    company_id: int,
    selected_years: list[int] | None,
) -> IncomeTrend:
    """Fetch and analyse the income series of one company."""
    use_case = GetIncomeTrendUseCase(income_api=_income_api())
    return use_case.execute(company_id, selected_years=selected_years)


def _run_refresh() -> RefreshOutcome:
    """Trigger an upstream refresh."""
    use_case = RefreshDataUseCase(reporting_api=_reporting_api())
    return use_case.execute()


def _get_slot(name: str) -> ResultSlot:
    """Return the session slot for a dashboard section."""
    key = f"slot_{name}"
    if key not in st.session_state:
        st.session_state[key] = ResultSlot(name=name)
    return st.session_state[key]


def _load_section(
    slot: ResultSlot,
    key,
    loader,
    error_message: str,
) -> None:
    """Load a section unless the result for ``key`` is already stored."""
    if slot.holds(key):
        return
    load_into_slot(slot, key, loader, error_message)


def _render_slot_error(slot: ResultSlot) -> bool:
    """Show the slot error, returning True when one was shown."""
    if slot.status == LoadStatus.ERROR:
        st.error(slot.error)
        return True
    return False


def _render_pnl_report(report: PnlReport) -> None:
    """Render the P&L table, headline metrics and waterfall."""
    summary = report.summary
    st.subheader("Profit & Loss Report")
    if report.start_date and report.end_date:
        st.caption(f"Period: {report.start_date} → {report.end_date}")
    rows = build_pnl_rows(summary)
    if not rows:
        st.info(NO_DATA_MESSAGE)
        return

    income_col, expenses_col, net_col = st.columns(3)
    income_col.metric("Total Income", format_money(summary.total_income))
    expenses_col.metric(
        "Total Expenses",
        format_money(summary.total_expenses),
    )
    net_col.metric("Net Income", format_money(summary.net_income))

    expanded = {
        category.id
        for category in (
            *summary.income_categories,
            *summary.expense_categories,
            *summary.profit_categories,
        )
        if category.line_items
    }
    show_details = st.toggle("Show line items", value=False)
    table_rows = build_pnl_rows(
        summary,
        expanded=expanded if show_details else frozenset(),
    )
    st.dataframe(
        rows_to_table(table_rows),
        width="stretch",
        hide_index=True,
    )
    st.plotly_chart(
        build_waterfall_figure(build_waterfall_steps(summary)),
        width="stretch",
    )


def _reset_period_selection() -> None:
    """Clear the selected period when the company changes."""
    st.session_state["period_id"] = None


def _handle_refresh(periods_slot: ResultSlot) -> None:
    """Run a refresh and reset the period selection on success."""
    logger = get_app_logger()
    try:
        outcome = _run_refresh()
    except ReportingApiError as exc:
        logger.error(f"Refresh failed: {exc}")
        st.error("Failed to refresh data")
        return
    if not outcome.success:
        st.error("Failed to refresh data")
        return
    periods = outcome.periods or []
    ticket = periods_slot.begin("all")
    periods_slot.resolve(
        ticket,
        ReportPeriodsView(
            periods=periods,
            companies=unique_companies(periods),
            filtered_periods=periods,
        ),
    )
    _reset_period_selection()
    _get_slot("pnl").reset()
    st.toast("Data refreshed successfully")


def _render_pnl_page() -> None:
    """Render the P&L reports page."""
    header_col, refresh_col = st.columns([4, 1])
    header_col.header("Profit & Loss Reports")
    periods_slot = _get_slot("periods")
    if refresh_col.button("Refresh"):
        with st.spinner("Refreshing data..."):
            _handle_refresh(periods_slot)

    _load_section(
        periods_slot,
        "all",
        _fetch_periods,
        "Failed to load period dates",
    )
    if _render_slot_error(periods_slot):
        return
    view: ReportPeriodsView | None = periods_slot.value
    periods = view.periods if view else []
    if not periods:
        st.info("No reporting periods available.")
        return

    consolidated = st.sidebar.checkbox("Consolidated view (all companies)")
    pnl_slot = _get_slot("pnl")
    if consolidated:
        start_date = min(period.start_date for period in periods)
        end_date = max(period.end_date for period in periods)
        selected_range = st.sidebar.date_input(
            "Date range",
            value=(start_date, end_date),
        )
        if not isinstance(selected_range, tuple) or len(selected_range) != 2:
            st.info("Please select a start and an end date.")
            return
        range_start, range_end = selected_range
        _load_section(
            pnl_slot,
            ("range", range_start, range_end),
            lambda: _fetch_consolidated_report(range_start, range_end),
            "Failed to load consolidated P&L data",
        )
    else:
        company = st.selectbox(
            "Company",
            options=[None, *view.companies],
            format_func=lambda c: "Select a company" if c is None else c.name,
            on_change=_reset_period_selection,
        )
        if company is None:
            st.info("Please select a company to view available periods")
            return
        company_periods = filter_periods_by_company(periods, company.id)
        period_ids = [None, *(period.id for period in company_periods)]
        period_id = st.selectbox(
            "Period",
            options=period_ids,
            format_func=lambda pid: (
                "Select a period"
                if pid is None
                else period_label(find_period(company_periods, pid))
            ),
            key="period_id",
        )
        if period_id is None:
            st.info("Please select a period to view P&L data")
            return
        period = find_period(company_periods, period_id)
        _load_section(
            pnl_slot,
            ("period", period_id),
            lambda: _fetch_pnl_report(period_id, period=period),
            "Failed to load P&L data for the selected periods",
        )

    if _render_slot_error(pnl_slot):
        return
    if isinstance(pnl_slot.value, PnlReport):
        _render_pnl_report(pnl_slot.value)


def _render_income_page() -> None:
    """Render the income trend page."""
    st.header("Income Trend Analysis")
    companies_slot = _get_slot("companies")
    _load_section(
        companies_slot,
        "all",
        _fetch_companies,
        "Failed to fetch companies",
    )
    if _render_slot_error(companies_slot):
        return
    companies: list[Company] = companies_slot.value or []
    if not companies:
        st.info("No companies available.")
        return

    company_col, chart_col = st.columns(2)
    company = company_col.selectbox(
        "Select Company",
        options=companies,
        format_func=lambda c: c.name,
    )
    chart_type = chart_col.selectbox(
        "Chart Type",
        options=["line", "bar"],
        format_func=lambda value: f"{value.title()} Chart",
    )

    income_slot = _get_slot("income")
    _load_section(
        income_slot,
        ("company", company.id),
        lambda: _fetch_income_trend(company.id, None),
        "Failed to fetch income data",
    )
    if _render_slot_error(income_slot):
        return
    trend: IncomeTrend | None = income_slot.value
    if trend is None or not trend.available_years:
        st.info("No income data available for this company.")
        return

    selected_years = st.multiselect(
        "Years",
        options=trend.available_years,
        default=trend.available_years,
    )
    trend = replace(
        trend,
        selected_totals=select_years(trend.yearly_totals, selected_years),
    )

    latest_col, growth_col, average_col = st.columns(3)
    latest_col.metric(
        "Latest Income",
        format_income(income_amount(trend.latest)) if trend.latest else "—",
    )
    growth_col.metric("Latest Growth", format_growth(trend.latest_growth))
    average_col.metric(
        "Average Growth",
        format_growth(trend.average_growth),
    )

    ok, message = _check_altair_dependencies()
    if ok:
        st.altair_chart(
            build_income_chart(
                prepare_income_chart_data(trend),
                chart_type,
                company.name,
            ),
            width="stretch",
        )
    else:
        st.warning(message)

    cards = st.columns(max(len(trend.selected_totals), 1))
    for card, (year, amount) in zip(cards, trend.selected_totals.items()):
        card.metric(str(year), format_income(amount))


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="P&L Dashboard", layout="wide")
    st.title("P&L Dashboard")

    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"page_view page={page}")
    if page == PAGES[0]:
        _render_pnl_page()
    else:
        _render_income_page()


if __name__ == "__main__":  # pragma: no cover
    main()
