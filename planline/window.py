# planline/window.py
"""Range resolution and navigation for the planner's visible window.

A window is always a whole number of calendar months (or a whole year),
resolved from a cursor date and a granularity. Both ends are inclusive.
"""

from __future__ import annotations

import calendar
import datetime as dt
from dataclasses import dataclass
from typing import Any, List

from .model import GRANULARITIES, Window, days_between
from .util.timeparse import parse_date_yyyy_mm_dd


class ConfigurationError(ValueError):
    """Raised for invalid navigation state (granularity or cursor date)."""


MONTH_NAMES_DE = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
)
MONTH_SHORT_DE = (
    "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
    "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
)

# Months per navigation step.
_STEP_MONTHS = {"month": 1, "quarter": 3, "half": 6, "year": 12}


def normalize_granularity(granularity: Any) -> str:
    g = granularity.strip().lower() if isinstance(granularity, str) else ""
    if g not in GRANULARITIES:
        raise ConfigurationError(
            f"Unknown granularity: {granularity!r} (expected one of {', '.join(GRANULARITIES)})"
        )
    return g


def coerce_cursor(cursor: Any) -> dt.date:
    """Accept a date, a datetime (date part) or a YYYY-MM-DD string."""
    if isinstance(cursor, dt.datetime):
        return cursor.date()
    if isinstance(cursor, dt.date):
        return cursor
    if isinstance(cursor, str):
        try:
            return parse_date_yyyy_mm_dd(cursor)
        except ValueError as e:
            raise ConfigurationError(f"Invalid cursor date: {cursor!r}") from e
    raise ConfigurationError(f"Invalid cursor date: {cursor!r}")


def _last_of_month(year: int, month: int) -> dt.date:
    return dt.date(year, month, calendar.monthrange(year, month)[1])


def resolve_window(cursor: Any, granularity: Any) -> Window:
    """Resolve `cursor` + `granularity` into a concrete inclusive Window."""
    g = normalize_granularity(granularity)
    d = coerce_cursor(cursor)
    y = d.year
    m0 = d.month - 1  # zero-based month

    if g == "month":
        first_m0, last_m0 = m0, m0
    elif g == "quarter":
        first_m0 = (m0 // 3) * 3
        last_m0 = first_m0 + 2
    elif g == "half":
        first_m0 = 0 if m0 < 6 else 6
        last_m0 = first_m0 + 5
    else:
        first_m0, last_m0 = 0, 11

    start = dt.date(y, first_m0 + 1, 1)
    end = _last_of_month(y, last_m0 + 1)
    return Window(start=start, end=end, total_days=days_between(start, end) + 1, granularity=g)


def window_label(window: Window) -> str:
    """German header label: "März 2024", "Q2 2024", "H1 2024", "2024"."""
    s = window.start
    g = window.granularity
    if g == "month":
        return f"{MONTH_NAMES_DE[s.month - 1]} {s.year}"
    if g == "quarter":
        return f"Q{(s.month - 1) // 3 + 1} {s.year}"
    if g == "half":
        return f"{'H1' if s.month <= 6 else 'H2'} {s.year}"
    return str(s.year)


def step_cursor(cursor: Any, granularity: Any, steps: int = 1) -> dt.date:
    """Move the cursor by whole windows (negative steps go back).

    The result lands on the first day of a month (Jan 1 for "year"), so that
    repeated stepping never drifts on short months.
    """
    g = normalize_granularity(granularity)
    d = coerce_cursor(cursor)
    total = d.year * 12 + (d.month - 1) + _STEP_MONTHS[g] * int(steps)
    if g == "year":
        total -= total % 12
    try:
        return dt.date(total // 12, total % 12 + 1, 1)
    except ValueError as e:
        raise ConfigurationError(f"Cursor out of range after stepping {steps} {g} window(s)") from e


@dataclass(frozen=True)
class Column:
    date: dt.date
    label: str
    shaded: bool


def window_columns(window: Window) -> List[Column]:
    """Header columns: days for a month window, months otherwise."""
    cols: List[Column] = []
    if window.granularity == "month":
        d = window.start
        while d <= window.end:
            cols.append(Column(date=d, label=str(d.day), shaded=d.weekday() >= 5))
            d += dt.timedelta(days=1)
        return cols

    y, m = window.start.year, window.start.month
    i = 0
    while dt.date(y, m, 1) <= window.end:
        cols.append(Column(date=dt.date(y, m, 1), label=MONTH_SHORT_DE[m - 1], shaded=i % 2 == 1))
        i += 1
        m += 1
        if m > 12:
            y, m = y + 1, 1
    return cols


__all__ = [
    "Column",
    "ConfigurationError",
    "coerce_cursor",
    "normalize_granularity",
    "resolve_window",
    "step_cursor",
    "window_columns",
    "window_label",
]
