# planline/util/viewkey.py
from __future__ import annotations

import datetime as dt
import hashlib
from typing import Optional


def normalize_search(search: Optional[str]) -> str:
    return (search or "").strip().lower()


def make_layout_key(
    items_revision: object,
    start: dt.date,
    end: dt.date,
    granularity: str,
    search: Optional[str] = None,
    today: Optional[dt.date] = None,
) -> str:
    """Return a stable key used for layout memoization.

    The key is cheap and deterministic. Search is normalized the same way the
    visibility filter normalizes it, so "Müller " and "müller" share a slot.
    The revision enters by repr, so 1 and "1" are different item lists.
    """
    raw = "|".join(
        [
            repr(items_revision),
            start.isoformat(),
            end.isoformat(),
            granularity,
            normalize_search(search),
            today.isoformat() if today is not None else "-",
        ]
    )
    return hashlib.sha1(raw.encode("utf-8")).hexdigest()
