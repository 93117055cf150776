"""
Tests for the CLI entry point.

These tests focus on:
- the full pipeline on a small sample calendar (tests/data/sample.ics)
- exit codes for invalid options and unreadable or broken calendars
- nothing being printed to stdout when the run fails
"""

import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from itinerary.cli import main

SAMPLE = Path(__file__).resolve().parent / "data" / "sample.ics"


def _run(argv: list[str]) -> tuple[int, str]:
    out = io.StringIO()
    err = io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        try:
            main(argv)
        except SystemExit as exc:
            return exc.code, out.getvalue()
    raise AssertionError("main() did not exit")


class TestCLI(unittest.TestCase):
    def test_end_to_end_itinerary(self) -> None:
        code, out = _run(["--start=2022/3/1", "--end=2022/3/10", f"--file={SAMPLE}"])

        self.assertEqual(code, 0)
        self.assertEqual(
            out,
            "March 02, 2022\n"
            "--------------\n"
            " 2:30 PM to  3:30 PM: Book club {{Library}}\n"
            "\n"
            "March 01, 2022\n"
            "--------------\n"
            " 9:00 AM to 10:00 AM: Standup {{Room 1}}\n"
            "\n"
            "March 08, 2022\n"
            "--------------\n"
            " 9:00 AM to 10:00 AM: Standup {{Room 1}}\n",
        )
        self.assertEqual(out.count("March 01, 2022"), 1)
        self.assertFalse(out.endswith("\n\n"))

    def test_empty_window_prints_nothing(self) -> None:
        code, out = _run(["--start=2023/1/1", "--end=2023/1/31", f"--file={SAMPLE}"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "")

    def test_missing_option_exits_nonzero(self) -> None:
        code, out = _run(["--start=2022/3/1", f"--file={SAMPLE}"])
        self.assertNotEqual(code, 0)
        self.assertEqual(out, "")

    def test_invalid_date_exits_nonzero(self) -> None:
        code, out = _run(["--start=03/01/2022", "--end=2022/3/10", f"--file={SAMPLE}"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_start_after_end_exits_nonzero(self) -> None:
        code, _ = _run(["--start=2022/3/10", "--end=2022/3/1", f"--file={SAMPLE}"])
        self.assertEqual(code, 1)

    def test_missing_file_exits_nonzero(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            code, out = _run(["--start=2022/3/1", "--end=2022/3/10", f"--file={Path(d) / 'nope.ics'}"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_malformed_record_exits_nonzero(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "broken.ics"
            p.write_text("BEGIN:VEVENT\nDTSTART:20220301T090000\nSUMMARY Lunch\nEND:VEVENT\n", encoding="utf-8")
            code, out = _run(["--start=2022/3/1", "--end=2022/3/10", f"--file={p}"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_max_events_limit(self) -> None:
        code, out = _run(["--start=2022/3/1", "--end=2022/3/10", f"--file={SAMPLE}", "--max-events=2"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_strict_recurrence_cap(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "weekly.ics"
            p.write_text(
                "BEGIN:VEVENT\n"
                "DTSTART:20220301T090000\n"
                "DTEND:20220301T100000\n"
                "RRULE:FREQ=WEEKLY;WKST=MO;UNTIL=20220401T000000\n"
                "SUMMARY:Standup\n"
                "END:VEVENT\n",
                encoding="utf-8",
            )
            args = ["--start=2022/3/1", "--end=2022/4/1", f"--file={p}"]

            code, out = _run(args)
            self.assertEqual(code, 0)
            self.assertEqual(out.count("Standup"), 5)

            code, out = _run(args + ["--strict"])
            self.assertEqual(code, 1)
            self.assertEqual(out, "")


if __name__ == "__main__":
    unittest.main()
