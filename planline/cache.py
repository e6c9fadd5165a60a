# planline/cache.py
from __future__ import annotations

import datetime as dt
import os
import threading
from collections import OrderedDict
from typing import Iterable, Optional

from .engine import _as_date, layout_timeline
from .model import TimelineItem, TimelineLayout, Window
from .util.console import obs
from .util.viewkey import make_layout_key


def _default_maxsize() -> int:
    raw = (os.getenv("PLANLINE_CACHE_SIZE", "64") or "").strip()
    try:
        v = int(raw)
        if v > 0:
            return v
    except ValueError:
        pass
    return 64


class LayoutCache:
    """LRU memoization of layout_timeline keyed by (items_revision, window, search, today).

    `items_revision` is the caller's token for "this item list"; bump it
    whenever the list changes. The cache never inspects `items` for the key.
    """

    def __init__(self, maxsize: Optional[int] = None) -> None:
        self.maxsize = max(1, int(maxsize)) if maxsize is not None else _default_maxsize()
        self.hits = 0
        self.misses = 0
        self._data: "OrderedDict[str, TimelineLayout]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self.hits = 0
            self.misses = 0

    def get(
        self,
        items_revision: object,
        items: Iterable[TimelineItem],
        window: Window,
        search: Optional[str] = None,
        today: Optional[dt.date] = None,
    ) -> TimelineLayout:
        today = _as_date(today)
        key = make_layout_key(items_revision, window.start, window.end, window.granularity, search, today)
        with self._lock:
            hit = self._data.get(key)
            if hit is not None:
                self._data.move_to_end(key)
                self.hits += 1
                obs("cache", f"hit key={key[:12]}")
                return hit
            self.misses += 1

        # Concurrent misses on one key may both compute; the results are equal.
        layout = layout_timeline(items, window, search, today)
        obs("cache", f"miss key={key[:12]} items={len(layout.items)}")

        with self._lock:
            self._data[key] = layout
            self._data.move_to_end(key)
            while len(self._data) > self.maxsize:
                self._data.popitem(last=False)
        return layout
