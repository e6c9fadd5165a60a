# planline/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re
from typing import Any, Optional

_COMPACT_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})T\d{6}Z$")  # e.g. 20240305T083000Z


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s.strip(), "%Y-%m-%d").date()


def parse_iso_date(v: Any) -> Optional[dt.date]:
    """Best-effort date extraction from an item-source value.

    Accepts date/datetime objects, "YYYY-MM-DD", full ISO 8601 datetimes
    (the calendar date part is used as written, no timezone shift) and the
    compact "YYYYMMDDTHHMMSSZ" form. Returns None for anything else.
    """
    if isinstance(v, dt.datetime):
        return v.date()
    if isinstance(v, dt.date):
        return v
    if not isinstance(v, str):
        return None
    s = v.strip()
    if not s:
        return None

    m = _COMPACT_RE.match(s)
    if m:
        try:
            return dt.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        except ValueError:
            return None

    if len(s) >= 10 and s[4] == "-" and s[7] == "-":
        try:
            return parse_date_yyyy_mm_dd(s[:10])
        except ValueError:
            return None
    return None
