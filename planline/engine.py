# planline/engine.py
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Iterable, List, Optional

from .coords import project, today_marker
from .density import classify_density
from .lanes import pack_lanes
from .model import LaidOutItem, TimelineItem, TimelineLayout, Window
from .normalize import normalize_items
from .visibility import filter_visible
from .window import resolve_window


def _as_date(v: Optional[dt.date]) -> Optional[dt.date]:
    if isinstance(v, dt.datetime):
        return v.date()
    return v


def layout_timeline(
    items: Iterable[TimelineItem],
    window: Window,
    search: Optional[str] = None,
    today: Optional[dt.date] = None,
) -> TimelineLayout:
    """Lay out `items` inside `window`.

    Pure function of its inputs: filter -> pack -> project -> classify, plus
    the independent today marker. Items come back in packing order.
    """
    if window.degenerate:
        return TimelineLayout(window=window, items=(), rows_count=1, today=None)

    visible = filter_visible(items, window, search)
    placements, rows_count = pack_lanes(visible, window)

    laid: List[LaidOutItem] = []
    for p in placements:
        left_pct, width_pct = project(p.clipped_start, p.clipped_end, window)
        laid.append(
            LaidOutItem(
                item=p.item,
                clipped_start=p.clipped_start,
                clipped_end=p.clipped_end,
                left_pct=left_pct,
                width_pct=width_pct,
                lane=p.lane,
                variant=classify_density(width_pct),
            )
        )

    return TimelineLayout(
        window=window,
        items=tuple(laid),
        rows_count=rows_count,
        today=today_marker(_as_date(today), window),
    )


def layout_rows(
    rows: Iterable[Dict[str, Any]],
    cursor: Any,
    granularity: Any,
    search: Optional[str] = None,
    today: Optional[dt.date] = None,
) -> TimelineLayout:
    """Convenience: item-source rows + navigation state -> layout.

    Raises ConfigurationError for invalid navigation state.
    """
    window = resolve_window(cursor, granularity)
    d_today = _as_date(today)
    return layout_timeline(normalize_items(rows, today=d_today), window, search, d_today)
