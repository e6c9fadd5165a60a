# planline/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .palette import is_light

# Status flags carried by a TimelineItem.
STATUS_NORMAL = "normal"
STATUS_COMPLETE = "complete"
STATUS_OVERDUE = "overdue"
STATUS_FLAGS = (STATUS_NORMAL, STATUS_COMPLETE, STATUS_OVERDUE)

# Window granularities, in navigation order.
GRANULARITIES = ("month", "quarter", "half", "year")


def days_between(a: dt.date, b: dt.date) -> int:
    """Whole calendar days from `a` to `b` (negative when b < a)."""
    return (b - a).days


@dataclass(frozen=True)
class TimelineItem:
    id: str
    start_date: dt.date
    end_date: dt.date
    color: str
    title: str
    subtitle: str = ""
    status_flag: str = STATUS_NORMAL

    normalized: bool = False  # end_date < start_date was repaired upstream

    def __post_init__(self) -> None:
        if self.status_flag not in STATUS_FLAGS:
            object.__setattr__(self, "status_flag", STATUS_NORMAL)
        # Abnormal ranges are repaired, not rejected.
        if self.end_date < self.start_date:
            object.__setattr__(self, "end_date", self.start_date)
            object.__setattr__(self, "normalized", True)


@dataclass(frozen=True)
class Window:
    start: dt.date
    end: dt.date
    total_days: int   # inclusive
    granularity: str

    @property
    def degenerate(self) -> bool:
        """True when the window holds no day to project onto."""
        return self.end < self.start or self.total_days <= 0

    @property
    def label(self) -> str:
        from .window import window_label

        return window_label(self)

    def contains(self, d: dt.date) -> bool:
        return self.start <= d <= self.end

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "total_days": self.total_days,
            "granularity": self.granularity,
            "label": self.label,
        }


@dataclass(frozen=True)
class LaidOutItem:
    item: TimelineItem
    clipped_start: dt.date
    clipped_end: dt.date
    left_pct: float
    width_pct: float
    lane: int
    variant: str

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def overdue(self) -> bool:
        return self.item.status_flag == STATUS_OVERDUE

    @property
    def complete(self) -> bool:
        return self.item.status_flag == STATUS_COMPLETE

    def to_dict(self) -> Dict[str, Any]:
        it = self.item
        return {
            "id": it.id,
            "title": it.title,
            "subtitle": it.subtitle,
            "color": it.color,
            "light": is_light(it.color),
            "lane": self.lane,
            "left_pct": self.left_pct,
            "width_pct": self.width_pct,
            "clipped_start": self.clipped_start.isoformat(),
            "clipped_end": self.clipped_end.isoformat(),
            "start_date": it.start_date.isoformat(),
            "end_date": it.end_date.isoformat(),
            "variant": self.variant,
            "overdue": self.overdue,
            "complete": self.complete,
            "normalized": it.normalized,
        }


@dataclass(frozen=True)
class TodayMarker:
    date: dt.date
    left_pct: float


@dataclass(frozen=True)
class TimelineLayout:
    window: Window
    items: Tuple[LaidOutItem, ...]
    rows_count: int
    today: Optional[TodayMarker] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "window": self.window.to_dict(),
            "rows_count": self.rows_count,
            "items": [x.to_dict() for x in self.items],
            "today": (
                None
                if self.today is None
                else {"date": self.today.date.isoformat(), "left_pct": self.today.left_pct}
            ),
        }


__all__ = [
    "GRANULARITIES",
    "STATUS_COMPLETE",
    "STATUS_FLAGS",
    "STATUS_NORMAL",
    "STATUS_OVERDUE",
    "LaidOutItem",
    "TimelineItem",
    "TimelineLayout",
    "TodayMarker",
    "Window",
    "days_between",
]
