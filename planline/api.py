"""planline.api

Stable *library* entrypoint for planline.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from planline.cache import LayoutCache
from planline.coords import project, today_marker
from planline.density import VARIANTS, classify_density
from planline.engine import layout_rows, layout_timeline
from planline.io import dump_layout_json
from planline.lanes import LanePlacement, pack_lanes
from planline.model import (
    GRANULARITIES,
    LaidOutItem,
    TimelineItem,
    TimelineLayout,
    TodayMarker,
    Window,
    days_between,
)
from planline.normalize import load_items_json, normalize_item, normalize_items
from planline.palette import is_light
from planline.visibility import filter_visible, matches_search
from planline.window import (
    Column,
    ConfigurationError,
    resolve_window,
    step_cursor,
    window_columns,
    window_label,
)

_PUBLIC_EXPORTS = (
    "Column",
    "ConfigurationError",
    "GRANULARITIES",
    "LaidOutItem",
    "LanePlacement",
    "LayoutCache",
    "TimelineItem",
    "TimelineLayout",
    "TodayMarker",
    "VARIANTS",
    "Window",
    "classify_density",
    "days_between",
    "dump_layout_json",
    "filter_visible",
    "is_light",
    "layout_rows",
    "layout_timeline",
    "load_items_json",
    "matches_search",
    "normalize_item",
    "normalize_items",
    "pack_lanes",
    "project",
    "resolve_window",
    "step_cursor",
    "today_marker",
    "window_columns",
    "window_label",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
