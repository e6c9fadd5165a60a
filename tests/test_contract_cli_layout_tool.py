from __future__ import annotations

import io
import json
import subprocess
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from planline import cli

REPO_ROOT = Path(__file__).resolve().parents[1]

ROWS = [
    {"id": "a", "start_date": "2024-03-01", "end_date": "2024-03-10", "title": "Müller Bad",
     "customer": "Familie Müller", "color": "#3b82f6", "status": "open"},
    {"id": "b", "start_date": "2024-03-05", "end_date": "2024-03-15", "title": "Schmidt Dach",
     "customer": "Schmidt GmbH", "color": "#e2e8f0", "status": "done"},
]


def _write_rows(d: Path) -> Path:
    p = d / "rows.json"
    p.write_text(json.dumps(ROWS, ensure_ascii=False), encoding="utf-8")
    return p


class TestCliLayoutToolContract:
    def test_module_writes_layout_json(self, tmp_path: Path):
        rows = _write_rows(tmp_path)
        out_json = tmp_path / "out" / "layout.json"
        cmd = [
            sys.executable, "-m", "planline.cli",
            "--items", str(rows),
            "--granularity", "month",
            "--cursor", "2024-03-20",
            "--today", "2024-03-12",
            "--out", str(out_json),
        ]
        p = subprocess.run(cmd, cwd=str(REPO_ROOT), capture_output=True, text=True)
        combined = (p.stdout or "") + "\n" + (p.stderr or "")
        assert p.returncode == 0, combined

        out = json.loads(out_json.read_text(encoding="utf-8"))
        assert out["rows_count"] == 2
        assert out["window"]["label"] == "März 2024"
        lanes = {x["id"]: x["lane"] for x in out["items"]}
        assert lanes == {"a": 0, "b": 1}
        flags = {x["id"]: (x["overdue"], x["complete"]) for x in out["items"]}
        assert flags == {"a": (True, False), "b": (False, True)}
        assert out["today"]["date"] == "2024-03-12"

    def test_module_search_to_stdout(self, tmp_path: Path):
        rows = _write_rows(tmp_path)
        cmd = [
            sys.executable, "-m", "planline.cli",
            "--items", str(rows), "--cursor", "2024-03-01", "--today", "2024-01-01",
            "--search", "müller",
        ]
        p = subprocess.run(cmd, cwd=str(REPO_ROOT), capture_output=True, text=True, encoding="utf-8")
        assert p.returncode == 0, p.stderr
        out = json.loads(p.stdout)
        assert [x["id"] for x in out["items"]] == ["a"]
        assert out["today"] is None


class TestCliErrorsContract(unittest.TestCase):
    def _run(self, argv: list[str]) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            rc = cli.main(argv)
        return rc, out.getvalue(), err.getvalue()

    def test_invalid_granularity_exits_3(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            rows = _write_rows(Path(td))
            rc, _, err = self._run(["--items", str(rows), "--granularity", "week", "--today", "2024-03-01"])
        self.assertEqual(rc, 3)
        self.assertIn("[planline] ERROR: Unknown granularity", err)

    def test_invalid_cursor_exits_3(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            rows = _write_rows(Path(td))
            rc, _, err = self._run(["--items", str(rows), "--cursor", "2024-02-31", "--today", "2024-03-01"])
        self.assertEqual(rc, 3)
        self.assertIn("Invalid cursor date", err)

    def test_missing_items_file(self) -> None:
        rc, _, err = self._run(["--items", "/nonexistent/rows.json", "--today", "2024-03-01"])
        self.assertEqual(rc, 2)
        self.assertIn("Missing items file", err)

    def test_items_must_be_a_list(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "rows.json"
            p.write_text("{}", encoding="utf-8")
            rc, _, err = self._run(["--items", str(p), "--today", "2024-03-01"])
        self.assertEqual(rc, 2)
        self.assertIn("Failed to parse items JSON", err)

    def test_invalid_tz_reports_user_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            rows = _write_rows(Path(td))
            rc, _, err = self._run(["--items", str(rows), "--tz", "No/Such_Zone"])
        self.assertEqual(rc, 2)
        self.assertIn("Invalid --tz value", err)

    def test_cursor_defaults_to_today(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            rows = _write_rows(Path(td))
            rc, out, _ = self._run(["--items", str(rows), "--today", "2024-03-07", "--granularity", "quarter"])
        self.assertEqual(rc, 0)
        data = json.loads(out)
        self.assertEqual(data["window"]["start"], "2024-01-01")
        self.assertEqual(data["window"]["label"], "Q1 2024")


if __name__ == "__main__":
    unittest.main(verbosity=2)
