# planline/lanes.py
"""Greedy interval partitioning of visible items into lanes.

Items are clipped to the window, sorted by clipped start (ties by title
collation, then raw title, then id) and each one goes to the lowest lane whose
last occupant ends strictly before it starts. End dates are inclusive, so an
item ending on the day another starts shares no lane with it.
"""

from __future__ import annotations

import datetime as dt
import unicodedata
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .model import TimelineItem, Window


@dataclass(frozen=True)
class LanePlacement:
    item: TimelineItem
    clipped_start: dt.date
    clipped_end: dt.date
    lane: int


def title_collation_key(title: str) -> str:
    """Locale-style sort key: case-insensitive, accents folded ("Äpfel" ~ "Apfel")."""
    decomposed = unicodedata.normalize("NFKD", title or "")
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold()


def clip(item: TimelineItem, window: Window) -> Tuple[dt.date, dt.date]:
    return max(item.start_date, window.start), min(item.end_date, window.end)


def pack_lanes(items: Iterable[TimelineItem], window: Window) -> Tuple[List[LanePlacement], int]:
    """Assign each item a lane. Returns (placements in sorted order, rows_count)."""
    clipped = []
    for it in items:
        s, e = clip(it, window)
        clipped.append((s, e, it))
    clipped.sort(key=lambda x: (x[0], title_collation_key(x[2].title), x[2].title, x[1], x[2].id))

    lanes_end: List[dt.date] = []
    out: List[LanePlacement] = []
    for s, e, it in clipped:
        lane = -1
        for i, lane_end in enumerate(lanes_end):
            if lane_end < s:
                lane = i
                break
        if lane < 0:
            lane = len(lanes_end)
            lanes_end.append(e)
        else:
            lanes_end[lane] = e
        out.append(LanePlacement(item=it, clipped_start=s, clipped_end=e, lane=lane))

    return out, max(1, len(lanes_end))
