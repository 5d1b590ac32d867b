"""Tests for the calendar helpers used by the trend engine."""

import datetime

import pytest

from app.trends.dates import add_months, add_years, month_start, quarter_start, week_start, year_start

D = datetime.date


class TestAddMonths:
    @pytest.mark.parametrize(
        "day, months, expected",
        [
            (D(2024, 1, 15), 1, D(2024, 2, 15)),
            (D(2024, 1, 31), 1, D(2024, 2, 29)),
            (D(2023, 1, 31), 1, D(2023, 2, 28)),
            (D(2024, 3, 31), -1, D(2024, 2, 29)),
            (D(2024, 12, 5), 1, D(2025, 1, 5)),
            (D(2024, 1, 5), -1, D(2023, 12, 5)),
            (D(2024, 4, 1), -3, D(2024, 1, 1)),
            (D(2024, 6, 15), 0, D(2024, 6, 15)),
        ],
    )
    def test_shift(self, day, months, expected):
        assert add_months(day, months) == expected

    def test_add_years_leap_day(self):
        assert add_years(D(2024, 2, 29), -1) == D(2023, 2, 28)
        assert add_years(D(2024, 6, 15), -1) == D(2023, 6, 15)

    def test_does_not_mutate(self):
        day = D(2024, 1, 31)
        add_months(day, 1)
        assert day == D(2024, 1, 31)


class TestPeriodStarts:
    @pytest.mark.parametrize(
        "day, expected",
        [
            (D(2024, 6, 16), D(2024, 6, 16)),  # Sunday
            (D(2024, 6, 12), D(2024, 6, 9)),  # Wednesday
            (D(2024, 6, 15), D(2024, 6, 9)),  # Saturday
            (D(2024, 6, 1), D(2024, 5, 26)),  # crosses month
        ],
    )
    def test_week_start_is_sunday(self, day, expected):
        assert week_start(day) == expected
        assert week_start(day).isoweekday() == 7

    @pytest.mark.parametrize(
        "day, expected",
        [
            (D(2024, 1, 1), D(2024, 1, 1)),
            (D(2024, 3, 31), D(2024, 1, 1)),
            (D(2024, 4, 1), D(2024, 4, 1)),
            (D(2024, 6, 15), D(2024, 4, 1)),
            (D(2024, 12, 31), D(2024, 10, 1)),
        ],
    )
    def test_quarter_start(self, day, expected):
        assert quarter_start(day) == expected

    def test_month_and_year_start(self):
        assert month_start(D(2024, 6, 15)) == D(2024, 6, 1)
        assert year_start(D(2024, 6, 15)) == D(2024, 1, 1)
