# planline/coords.py
from __future__ import annotations

import datetime as dt
from typing import Optional, Tuple

from .model import TodayMarker, Window, days_between


def project(clipped_start: dt.date, clipped_end: dt.date, window: Window) -> Tuple[float, float]:
    """(left_pct, width_pct) of an inclusive day range inside `window`.

    Values are not clamped; callers decide on any minimum visual width.
    """
    total = window.total_days
    left_pct = days_between(window.start, clipped_start) / total * 100
    width_pct = (days_between(clipped_start, clipped_end) + 1) / total * 100
    return left_pct, width_pct


def today_marker(today: Optional[dt.date], window: Window) -> Optional[TodayMarker]:
    if today is None or window.degenerate or not window.contains(today):
        return None
    left_pct = days_between(window.start, today) / window.total_days * 100
    return TodayMarker(date=today, left_pct=left_pct)
