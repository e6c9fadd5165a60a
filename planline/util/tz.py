from __future__ import annotations

import datetime as dt
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def normalize_tz_name(name: Optional[str]) -> str:
    """Blank -> "local"; "utc"/"gmt"/"z" in any case -> "UTC"; anything else verbatim."""
    s = (name or "").strip()
    if not s or s.lower() == "local":
        return "local"
    if s.lower() in ("utc", "gmt", "z"):
        return "UTC"
    return s


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """tzinfo used to decide which calendar day "today" is.

    Accepts "local", "UTC", IANA names ("Europe/Berlin") and fixed offsets
    ("+02:00", "-0530"). Raises ValueError for anything else.
    """
    tz_name = normalize_tz_name(name)
    if tz_name == "local":
        return dt.datetime.now().astimezone().tzinfo or dt.timezone.utc
    if tz_name == "UTC":
        return dt.timezone.utc

    if tz_name[0] in "+-":
        try:
            return dt.datetime.strptime(tz_name, "%z").tzinfo
        except ValueError as ex:
            raise ValueError(f"Invalid timezone offset: {tz_name!r}") from ex

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as ex:
        raise ValueError(f"Invalid timezone identifier: {tz_name!r}") from ex


def today_date(tz: dt.tzinfo) -> dt.date:
    return dt.datetime.now(tz=tz).date()
