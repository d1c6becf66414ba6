"""Session scheduling: spread N sessions over weekdays at a weekly frequency."""

from __future__ import annotations

import math
from datetime import date, timedelta

_SATURDAY = 5  # date.weekday(): Monday=0 ... Sunday=6


def _skip_weekend(day: date) -> date:
    """Return *day*, or the following Monday if it falls on a weekend."""
    while day.weekday() >= _SATURDAY:
        day += timedelta(days=1)
    return day


def session_spacing_days(days_per_week: int) -> int:
    """Calendar days between consecutive sessions: ceil(7 / days_per_week)."""
    if days_per_week < 1:
        raise ValueError(f"days_per_week must be at least 1, got {days_per_week}")
    return math.ceil(7 / days_per_week)


def generate_dates(
    days_per_week: int,
    count: int,
    start: date | None = None,
) -> list[date]:
    """Generate *count* strictly increasing weekday session dates.

    Starts at *start* (default: today), pushed forward past a weekend.
    Every following date is ``ceil(7 / days_per_week)`` days after the
    previous one, again pushed past any weekend landing.

    Args:
        days_per_week: Requested training frequency (>= 1).
        count: Number of dates to produce.
        start: First candidate date.

    Returns:
        List of ``count`` dates, all Monday-Friday.
    """
    step = timedelta(days=session_spacing_days(days_per_week))
    current = _skip_weekend(start or date.today())

    dates: list[date] = []
    for _ in range(count):
        dates.append(current)
        current = _skip_weekend(current + step)
    return dates


def format_date(day: date) -> str:
    """Render a date for display, e.g. 'Monday, October 19'."""
    return f"{day:%A}, {day:%B} {day.day}"
