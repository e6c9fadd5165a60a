# planline/normalize.py
from __future__ import annotations

import datetime as dt
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .model import STATUS_COMPLETE, STATUS_NORMAL, STATUS_OVERDUE, TimelineItem
from .util.console import obs
from .util.timeparse import parse_iso_date

DEFAULT_COLOR = "#3b82f6"
DEFAULT_TITLE = "—"

_DONE_STATUSES = {"done", "complete", "completed"}


def _status_flag(raw_status: Any, end_date: dt.date, today: Optional[dt.date]) -> str:
    st = str(raw_status or "").strip().lower()
    if st in _DONE_STATUSES:
        return STATUS_COMPLETE
    if st == STATUS_OVERDUE:
        return STATUS_OVERDUE
    if today is not None and end_date < today:
        return STATUS_OVERDUE
    return STATUS_NORMAL


def normalize_item(row: Dict[str, Any], today: Optional[dt.date] = None) -> Optional[TimelineItem]:
    """Convert one item-source row into a TimelineItem.

    Returns None when the row cannot be placed at all (no id, no usable start).
    A missing/unparsable end collapses to the start day; end < start is
    repaired the same way. Both cases mark the item `normalized`.
    """
    if not isinstance(row, dict):
        return None

    raw_id = row.get("id")
    item_id = "" if raw_id is None else str(raw_id).strip()
    if not item_id:
        obs("normalize", "WARN: dropping row without id")
        return None

    start_raw = row.get("start_date")
    start = parse_iso_date(start_raw)
    if start is None:
        obs("normalize", f"WARN: dropping row with invalid start_date id={item_id!r} value={start_raw!r}")
        return None

    end_raw = row.get("end_date")
    end = parse_iso_date(end_raw)
    repaired = False
    if end is None:
        obs("normalize", f"WARN: invalid end_date id={item_id!r} value={end_raw!r}; using start_date")
        end = start
        repaired = True
    elif end < start:
        obs("normalize", f"WARN: end_date before start_date id={item_id!r}; collapsing to one day")
        end = start
        repaired = True

    subtitle = row.get("subtitle")
    if subtitle is None:
        subtitle = row.get("customer")

    color = row.get("color")
    return TimelineItem(
        id=item_id,
        start_date=start,
        end_date=end,
        color=color.strip() if isinstance(color, str) and color.strip() else DEFAULT_COLOR,
        title=str(row.get("title") or DEFAULT_TITLE),
        subtitle=str(subtitle or ""),
        status_flag=_status_flag(row.get("status"), end, today),
        normalized=repaired,
    )


def normalize_items(rows: Iterable[Any], today: Optional[dt.date] = None) -> List[TimelineItem]:
    out: List[TimelineItem] = []
    for row in rows:
        it = normalize_item(row, today=today)
        if it is not None:
            out.append(it)
    return out


def load_items_json(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Load item-source rows from a JSON file holding a list of objects."""
    p = Path(path)
    obj = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    if not isinstance(obj, list):
        raise ValueError(f"items JSON must be a list of objects; got {type(obj).__name__}")
    return obj
