"""Tests for week-of-year resolution."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from timewizard.domain.errors import InvalidArgumentError
from timewizard.domain.weeks import first_monday, get_week

UTC_PLUS_2 = timezone(timedelta(hours=2))


class TestFirstMonday:
    def test_thursday_new_year(self) -> None:
        assert first_monday(1970) == date(1969, 12, 29)

    def test_monday_new_year(self) -> None:
        """2018-01-01 was a Monday, so no stepping back."""
        assert first_monday(2018) == date(2018, 1, 1)

    def test_year_one(self) -> None:
        assert first_monday(1) == date(1, 1, 1)


class TestGetWeek:
    def test_week_one_1970(self) -> None:
        assert get_week(1970, 1) == datetime(1969, 12, 29)

    def test_week_zero_matches_week_one(self) -> None:
        assert get_week(1970, 0) == get_week(1970, 1)

    def test_negative_week_behaves_like_zero(self) -> None:
        assert get_week(2021, -4) == get_week(2021, 0)

    def test_week_one_2021(self) -> None:
        assert get_week(2021, 1) == datetime(2020, 12, 28)

    def test_week_two_2021(self) -> None:
        assert get_week(2021, 2) == datetime(2021, 1, 4)

    def test_not_iso_numbering(self) -> None:
        """ISO week 1 of 2021 starts on 2021-01-04; here that is week 2."""
        assert get_week(2021, 1).date() != date.fromisocalendar(2021, 1, 1)

    def test_attaches_timezone(self) -> None:
        result = get_week(2021, 10, tz=UTC_PLUS_2)
        assert result.tzinfo is UTC_PLUS_2
        assert (result.hour, result.minute, result.second) == (0, 0, 0)

    def test_naive_without_timezone(self) -> None:
        assert get_week(2021, 10).tzinfo is None

    @pytest.mark.parametrize("year", range(1995, 2031))
    def test_always_monday_midnight(self, year: int) -> None:
        for week_number in range(0, 54):
            result = get_week(year, week_number)
            assert result.weekday() == 0
            assert result.time() == datetime.min.time()

    @pytest.mark.parametrize("year", range(1995, 2031))
    def test_week_zero_within_six_days_of_new_year(self, year: int) -> None:
        gap = (date(year, 1, 1) - get_week(year, 0).date()).days
        assert 0 <= gap <= 6

    def test_consecutive_weeks_are_seven_days_apart(self) -> None:
        for week_number in range(1, 53):
            delta = get_week(2021, week_number + 1) - get_week(2021, week_number)
            assert delta == timedelta(days=7)


class TestGetWeekValidation:
    @pytest.mark.parametrize("year", ["2021", 2021.0, None, True])
    def test_rejects_non_integer_year(self, year: object) -> None:
        with pytest.raises(InvalidArgumentError, match="year"):
            get_week(year, 1)  # type: ignore[arg-type]

    @pytest.mark.parametrize("week_number", ["1", 1.5, None, False])
    def test_rejects_non_integer_week(self, week_number: object) -> None:
        with pytest.raises(InvalidArgumentError, match="weekNumber"):
            get_week(2021, week_number)  # type: ignore[arg-type]

    def test_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            get_week("2021", 1)  # type: ignore[arg-type]

    @pytest.mark.parametrize("year", [0, -1, 10000])
    def test_rejects_unrepresentable_year(self, year: int) -> None:
        with pytest.raises(InvalidArgumentError):
            get_week(year, 1)

    def test_rejects_week_past_year_9999(self) -> None:
        with pytest.raises(InvalidArgumentError):
            get_week(9999, 60)

    def test_rejects_huge_week(self) -> None:
        with pytest.raises(InvalidArgumentError):
            get_week(2021, 10**9)

    def test_rejects_monday_before_utc_range(self) -> None:
        """0001-01-01 at +05:00 is still year 0 in UTC."""
        with pytest.raises(InvalidArgumentError, match="out of range"):
            get_week(1, 1, tz=timezone(timedelta(hours=5)))

    def test_year_one_west_of_utc(self) -> None:
        result = get_week(1, 1, tz=timezone(timedelta(hours=-5)))
        assert result.date() == date(1, 1, 1)
