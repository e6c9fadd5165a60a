#!/usr/bin/env python3
from __future__ import annotations

import argparse
import datetime as dt
import random
import statistics
import sys
import time
from typing import List, Tuple

from planline.cache import LayoutCache
from planline.engine import layout_timeline
from planline.model import GRANULARITIES, TimelineItem
from planline.window import ConfigurationError, resolve_window

_COLORS = ("#3b82f6", "#10b981", "#f59e0b", "#ef4444", "#a855f7", "#e2e8f0")
_NAMES = ("Müller", "Schmidt", "Schneider", "Fischer", "Weber", "Meyer", "Wagner", "Becker")
_JOBS = ("Bad", "Dach", "Küche", "Fassade", "Heizung", "Garten")


def _die(msg: str, rc: int = 2) -> int:
    print(f"[planline-bench] ERROR: {msg}", file=sys.stderr)
    return rc


def _now_ns() -> int:
    return time.perf_counter_ns()


def _time_one(fn, *, repeats: int, warmup: int) -> Tuple[float, float, float]:
    for _ in range(max(0, warmup)):
        fn()

    samples_ms: List[float] = []
    for _ in range(max(1, repeats)):
        t0 = _now_ns()
        fn()
        t1 = _now_ns()
        samples_ms.append((t1 - t0) / 1_000_000.0)

    return (min(samples_ms), statistics.fmean(samples_ms), max(samples_ms))


def make_items(n: int, *, year: int, seed: int = 1) -> List[TimelineItem]:
    """Deterministic synthetic plan items spread over `year` (some spill over the edges)."""
    rng = random.Random(seed)
    base = dt.date(year, 1, 1) - dt.timedelta(days=20)
    out: List[TimelineItem] = []
    for i in range(max(0, n)):
        start = base + dt.timedelta(days=rng.randrange(400))
        end = start + dt.timedelta(days=rng.randrange(45))
        out.append(
            TimelineItem(
                id=f"bench-{i:06d}",
                start_date=start,
                end_date=end,
                color=_COLORS[i % len(_COLORS)],
                title=f"{_NAMES[rng.randrange(len(_NAMES))]} {_JOBS[rng.randrange(len(_JOBS))]}",
                subtitle=f"Projekt {i}",
            )
        )
    return out


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="planline-bench", description="Micro-benchmark the timeline layout engine.")
    ap.add_argument("--n", type=int, default=500, help="Number of synthetic items")
    ap.add_argument("--seed", type=int, default=1, help="RNG seed for item generation")
    ap.add_argument("--repeats", type=int, default=1, help="Measurement repeats (min/avg/max over repeats)")
    ap.add_argument("--warmup", type=int, default=0, help="Warmup runs per step before measuring")
    ap.add_argument("--granularity", default="year", help=f"Window granularity: {', '.join(GRANULARITIES)}")
    ap.add_argument("--cursor", default="2024-06-15", help="Cursor date YYYY-MM-DD")
    ap.add_argument("--search", default=None, help="Optional search term")
    ns = ap.parse_args(argv)

    if int(ns.n) < 0:
        return _die("--n must be >= 0")

    try:
        window = resolve_window(ns.cursor, ns.granularity)
    except ConfigurationError as e:
        return _die(str(e), rc=3)

    items = make_items(int(ns.n), year=window.start.year, seed=int(ns.seed))
    print(
        f"[planline-bench] n={ns.n} seed={ns.seed} repeats={ns.repeats} warmup={ns.warmup} "
        f"window={window.start.isoformat()}..{window.end.isoformat()}"
    )

    rows = [0]

    def _layout() -> None:
        rows[0] = layout_timeline(items, window, ns.search).rows_count

    mn, av, mx = _time_one(_layout, repeats=int(ns.repeats), warmup=int(ns.warmup))
    print(f"[planline-bench] layout:  {mn:.2f}/{av:.2f}/{mx:.2f} ms (min/avg/max) rows={rows[0]}")

    cache = LayoutCache(maxsize=4)
    cache.get(1, items, window, ns.search)

    def _cached() -> None:
        cache.get(1, items, window, ns.search)

    mn, av, mx = _time_one(_cached, repeats=int(ns.repeats), warmup=int(ns.warmup))
    print(f"[planline-bench] cached:  {mn:.2f}/{av:.2f}/{mx:.2f} ms (min/avg/max) hits={cache.hits}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
