# planline/io.py
from __future__ import annotations

import json
from typing import Any, Dict

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

from .model import TimelineLayout


def dump_layout_json(layout: TimelineLayout, *, pretty: bool = False) -> str:
    """Serialize a layout to JSON text (orjson when available)."""
    if not isinstance(layout, TimelineLayout):
        raise TypeError(f"layout must be TimelineLayout, got {type(layout).__name__}")
    return dump_json(layout.to_dict(), pretty=pretty)


def dump_json(obj: Dict[str, Any], *, pretty: bool = False) -> str:
    if orjson is not None:
        opts = orjson.OPT_INDENT_2 if pretty else 0
        return orjson.dumps(obj, option=opts).decode("utf-8")
    if pretty:
        return json.dumps(obj, ensure_ascii=False, indent=2)
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))
