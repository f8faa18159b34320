"""Tests for the income analytics service."""

from datetime import date
from decimal import Decimal
from itertools import permutations

from pnl_dashboard.domain.models import IncomeObservation
from pnl_dashboard.domain.services.income import (
    available_years,
    average_growth_rate,
    group_by_year,
    growth_rate,
    latest_observation,
    previous_observation,
    select_years,
    year_of,
)


def _obs(start: str, income) -> IncomeObservation:
    period_start = date.fromisoformat(start)
    return IncomeObservation(
        period_start=period_start,
        period_end=period_start,
        income=income,
    )


def test_group_by_year_sums_within_a_year() -> None:
    observations = [_obs("2020-01-15", "1000"), _obs("2020-06-15", "3000")]

    assert group_by_year(observations) == {2020: Decimal("4000")}


def test_group_by_year_omits_missing_years_and_sorts_keys() -> None:
    observations = [
        _obs("2023-03-01", "5"),
        _obs("2020-01-01", "1"),
        _obs("2023-09-01", "5"),
    ]

    result = group_by_year(observations)

    assert result == {2020: Decimal("1"), 2023: Decimal("10")}
    assert list(result) == [2020, 2023]
    assert 2021 not in result


def test_group_by_year_is_order_independent() -> None:
    observations = [
        _obs("2021-01-01", "100"),
        _obs("2021-07-01", "250.50"),
        _obs("2022-01-01", "75"),
    ]
    expected = group_by_year(observations)

    for ordering in permutations(observations):
        assert group_by_year(list(ordering)) == expected


def test_group_by_year_treats_malformed_income_as_zero() -> None:
    observations = [_obs("2020-01-01", "abc"), _obs("2020-02-01", "10")]

    assert group_by_year(observations) == {2020: Decimal("10")}


def test_growth_rate_between_two_years() -> None:
    previous = _obs("2021-01-01", "1000")
    current = _obs("2022-01-01", "1500")

    assert growth_rate(current, previous) == Decimal("50")


def test_growth_rate_with_zero_previous_is_zero() -> None:
    previous = _obs("2021-01-01", "0")

    assert growth_rate(_obs("2022-01-01", "1500"), previous) == 0
    assert growth_rate(_obs("2022-01-01", "-3"), previous) == 0
    assert growth_rate(_obs("2022-01-01", "abc"), _obs("2021-01-01", "x")) == 0


def test_growth_rate_with_malformed_current_is_minus_hundred() -> None:
    previous = _obs("2021-01-01", "200")

    assert growth_rate(_obs("2022-01-01", "abc"), previous) == Decimal("-100")


def test_average_growth_rate_needs_two_points() -> None:
    assert average_growth_rate([]) == 0
    assert average_growth_rate([_obs("2021-01-01", "1000")]) == 0


def test_average_growth_rate_of_two_points_equals_growth_rate() -> None:
    first = _obs("2021-01-01", "1000")
    second = _obs("2022-01-01", "1500")

    assert average_growth_rate([second, first]) == growth_rate(second, first)
    assert average_growth_rate([first, second]) == Decimal("50")


def test_average_growth_rate_sorts_before_averaging() -> None:
    observations = [
        _obs("2023-01-01", "150"),
        _obs("2021-01-01", "100"),
        _obs("2022-01-01", "200"),
    ]

    # 100 -> 200 is +100%, 200 -> 150 is -25%.
    assert average_growth_rate(observations) == Decimal("37.5")


def test_latest_and_previous_use_start_dates() -> None:
    observations = [
        _obs("2021-01-01", "1"),
        _obs("2023-01-01", "3"),
        _obs("2022-01-01", "2"),
    ]

    assert latest_observation(observations).income == "3"
    assert previous_observation(observations).income == "2"


def test_latest_and_previous_agree_on_ties() -> None:
    """Tied start dates keep input order: first is latest, second previous."""
    first = _obs("2023-01-01", "first")
    second = _obs("2023-01-01", "second")
    older = _obs("2022-01-01", "older")

    observations = [older, first, second]

    assert latest_observation(observations) is first
    assert previous_observation(observations) is second


def test_latest_and_previous_with_too_few_points() -> None:
    single = _obs("2023-01-01", "1")

    assert latest_observation([]) is None
    assert previous_observation([]) is None
    assert latest_observation([single]) is single
    assert previous_observation([single]) is None


def test_year_helpers() -> None:
    observations = [
        _obs("2022-05-01", "1"),
        _obs("2020-01-01", "1"),
        _obs("2022-01-01", "1"),
    ]

    assert year_of(observations[0]) == 2022
    assert available_years(observations) == [2020, 2022]


def test_select_years_fills_missing_with_zero() -> None:
    yearly = {2020: Decimal("10"), 2022: Decimal("30")}

    assert select_years(yearly, [2022, 2021]) == {
        2021: Decimal("0"),
        2022: Decimal("30"),
    }
    assert select_years(yearly, []) == {}


def test_income_helpers_never_overflow_on_huge_values() -> None:
    observations = [
        _obs("2022-01-01", "9e999999"),
        _obs("2022-06-01", "9e999999"),
        _obs("2023-01-01", "100"),
    ]

    assert group_by_year(observations) == {
        2022: Decimal("0"),
        2023: Decimal("100"),
    }
    assert growth_rate(observations[2], observations[1]) == 0
    assert average_growth_rate(observations) == 0
