"""Tests for session date scheduling."""

from __future__ import annotations

from datetime import date

import pytest

from program_engine.planning.schedule import (
    format_date,
    generate_dates,
    session_spacing_days,
)


class TestSpacing:
    @pytest.mark.parametrize(
        ("days_per_week", "expected"),
        [(1, 7), (2, 4), (3, 3), (4, 2), (5, 2), (6, 2), (7, 1)],
    )
    def test_ceil_of_seven_over_frequency(self, days_per_week, expected) -> None:
        assert session_spacing_days(days_per_week) == expected

    def test_zero_frequency_rejected(self) -> None:
        with pytest.raises(ValueError):
            session_spacing_days(0)


class TestGenerateDates:
    def test_three_days_from_monday(self, start_date) -> None:
        dates = generate_dates(3, 5, start_date)
        assert dates == [
            date(2026, 10, 19),
            date(2026, 10, 22),
            date(2026, 10, 26),  # Sunday 10/25 pushed to Monday
            date(2026, 10, 29),
            date(2026, 11, 2),
        ]

    def test_four_days_from_monday(self, start_date) -> None:
        dates = generate_dates(4, 7, start_date)
        assert dates == [
            date(2026, 10, 19),
            date(2026, 10, 21),
            date(2026, 10, 23),
            date(2026, 10, 26),
            date(2026, 10, 28),
            date(2026, 10, 30),
            date(2026, 11, 2),
        ]

    def test_weekly(self, start_date) -> None:
        dates = generate_dates(1, 3, start_date)
        assert dates == [date(2026, 10, 19), date(2026, 10, 26), date(2026, 11, 2)]

    def test_daily_uses_consecutive_weekdays(self, start_date) -> None:
        dates = generate_dates(7, 6, start_date)
        assert [d.day for d in dates] == [19, 20, 21, 22, 23, 26]

    def test_weekend_start_moves_to_monday(self) -> None:
        dates = generate_dates(3, 1, date(2026, 10, 17))
        assert dates == [date(2026, 10, 19)]

    @pytest.mark.parametrize("days_per_week", [1, 2, 3, 4, 5, 6, 7])
    def test_dates_are_increasing_weekdays(self, start_date, days_per_week) -> None:
        dates = generate_dates(days_per_week, 12, start_date)
        assert len(dates) == 12
        assert all(d.weekday() < 5 for d in dates)
        assert all(a < b for a, b in zip(dates, dates[1:]))

    def test_defaults_to_today(self) -> None:
        first = generate_dates(3, 1)[0]
        assert first >= date.today()
        assert first.weekday() < 5


class TestFormatDate:
    def test_weekday_month_day(self) -> None:
        assert format_date(date(2026, 11, 2)) == "Monday, November 2"
