from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .engine import layout_rows
from .io import dump_layout_json
from .model import GRANULARITIES
from .normalize import load_items_json
from .util.timeparse import parse_date_yyyy_mm_dd
from .util.tz import resolve_tz, today_date
from .window import ConfigurationError


def _die(msg: str, rc: int = 2) -> int:
    print(f"[planline] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="planline",
        description="Lay out project-plan items into timeline lanes for a month/quarter/half/year window.",
    )
    ap.add_argument("--items", required=True, help="JSON file with a list of item rows {id, start_date, end_date, ...}")
    ap.add_argument(
        "--granularity",
        default="month",
        help=f"Window granularity: {', '.join(GRANULARITIES)} (default: month)",
    )
    ap.add_argument("--cursor", default=None, help="Cursor date YYYY-MM-DD (default: today in --tz)")
    ap.add_argument("--search", default=None, help="Case-insensitive search on title/subtitle")
    ap.add_argument("--today", default=None, help="Override today YYYY-MM-DD (default: today in --tz)")
    ap.add_argument(
        "--tz",
        default=os.getenv("PLANLINE_TZ", "local"),
        help="Timezone used to resolve today (default: env PLANLINE_TZ or 'local')",
    )
    ap.add_argument("--out", default=None, help="Output layout JSON path (default: stdout)")
    ap.add_argument("--pretty", action="store_true", help="Pretty JSON output")
    ns = ap.parse_args(argv)

    if ns.today:
        try:
            today = parse_date_yyyy_mm_dd(ns.today)
        except ValueError:
            return _die(f"Invalid --today value: {ns.today!r}")
    else:
        try:
            today = today_date(resolve_tz(ns.tz))
        except ValueError as e:
            return _die(f"Invalid --tz value: {e}")

    p = Path(ns.items)
    if not p.exists():
        return _die(f"Missing items file: {p}")
    try:
        rows = load_items_json(p)
    except Exception as e:
        return _die(f"Failed to parse items JSON: {p} ({e})")

    try:
        layout = layout_rows(rows, ns.cursor or today, ns.granularity, ns.search, today)
    except ConfigurationError as e:
        return _die(str(e), rc=3)

    txt = dump_layout_json(layout, pretty=bool(ns.pretty))
    if ns.out:
        out_path = Path(ns.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(txt + "\n", encoding="utf-8", newline="\n")
        print(str(out_path))
    else:
        sys.stdout.write(txt + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
