from __future__ import annotations

import datetime as dt
import unittest

from planline.coords import project, today_marker
from planline.engine import layout_timeline
from planline.model import GRANULARITIES
from planline.window import resolve_window

from _items import d, item

EPS = 1e-9


class TestCoordinateProjectorContract(unittest.TestCase):
    def test_march_example(self) -> None:
        w = resolve_window("2024-03-01", "month")
        left, width = project(d("2024-03-05"), d("2024-03-10"), w)
        self.assertAlmostEqual(left, 12.90, places=2)
        self.assertAlmostEqual(width, 19.35, places=2)

    def test_full_window_is_exactly_one_hundred(self) -> None:
        for g in GRANULARITIES:
            with self.subTest(granularity=g):
                w = resolve_window("2024-05-15", g)
                left, width = project(w.start, w.end, w)
                self.assertEqual(left, 0.0)
                self.assertAlmostEqual(width, 100.0, places=9)

    def test_single_day_width(self) -> None:
        w = resolve_window("2024-01-10", "year")
        _, width = project(d("2024-07-01"), d("2024-07-01"), w)
        self.assertAlmostEqual(width, 100 / 366)

    def test_bounds_hold_for_every_granularity(self) -> None:
        items = [
            item("before", "2023-06-01", "2024-01-03"),
            item("after", "2024-12-30", "2025-03-01"),
            item("span", "2020-01-01", "2030-01-01"),
            item("mid", "2024-05-15", "2024-05-15"),
            item("tail", "2024-06-30", "2024-07-01"),
        ]
        for g in GRANULARITIES:
            for cursor in ("2024-01-01", "2024-05-15", "2024-06-30", "2024-07-01", "2024-12-31"):
                w = resolve_window(cursor, g)
                layout = layout_timeline(items, w)
                for x in layout.items:
                    with self.subTest(granularity=g, cursor=cursor, id=x.id):
                        self.assertGreaterEqual(x.left_pct, 0.0)
                        self.assertGreater(x.width_pct, 0.0)
                        self.assertLessEqual(x.left_pct + x.width_pct, 100.0 + EPS)


class TestTodayMarkerContract(unittest.TestCase):
    def test_marker_inside_window(self) -> None:
        w = resolve_window("2024-03-01", "month")
        m = today_marker(d("2024-03-01"), w)
        self.assertIsNotNone(m)
        self.assertEqual(m.left_pct, 0.0)
        last = today_marker(d("2024-03-31"), w)
        self.assertAlmostEqual(last.left_pct, 30 / 31 * 100)
        self.assertEqual(last.date, d("2024-03-31"))

    def test_marker_absent_outside_window(self) -> None:
        w = resolve_window("2024-03-01", "month")
        self.assertIsNone(today_marker(d("2024-04-01"), w))
        self.assertIsNone(today_marker(d("2024-02-29"), w))
        self.assertIsNone(today_marker(None, w))

    def test_layout_accepts_datetime_today(self) -> None:
        w = resolve_window("2024-03-01", "month")
        layout = layout_timeline([], w, today=dt.datetime(2024, 3, 16, 18, 45))
        self.assertEqual(layout.today.date, d("2024-03-16"))
        self.assertAlmostEqual(layout.today.left_pct, 15 / 31 * 100)


if __name__ == "__main__":
    unittest.main(verbosity=2)
