# planline/visibility.py
from __future__ import annotations

from typing import Iterable, List, Optional

from .model import TimelineItem, Window
from .util.viewkey import normalize_search


def overlaps(item: TimelineItem, window: Window) -> bool:
    return item.end_date >= window.start and item.start_date <= window.end


def matches_search(item: TimelineItem, search: Optional[str]) -> bool:
    """Case-insensitive substring match on title or subtitle. Blank search matches all."""
    q = normalize_search(search)
    if not q:
        return True
    return q in (item.title or "").lower() or q in (item.subtitle or "").lower()


def filter_visible(
    items: Iterable[TimelineItem],
    window: Window,
    search: Optional[str] = None,
) -> List[TimelineItem]:
    """Items overlapping `window` and matching `search`, in input order."""
    q = normalize_search(search)
    return [it for it in items if overlaps(it, window) and matches_search(it, q)]
