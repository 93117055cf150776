"""
Unit tests for reading calendar lines from files and URLs.

Network access is never used: requests.get is patched.
"""

import tempfile
import unittest
from pathlib import Path
from unittest import mock

import requests

from itinerary.errors import InputFileUnreadable
from itinerary.source import read_lines


class TestReadLinesFromFile(unittest.TestCase):
    def test_reads_local_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "cal.ics"
            p.write_text("BEGIN:VEVENT\nEND:VEVENT\n", encoding="utf-8")
            self.assertEqual(read_lines(p), ["BEGIN:VEVENT\n", "END:VEVENT\n"])

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(InputFileUnreadable):
                read_lines(Path(d) / "missing.ics")

    def test_directory_raises(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(InputFileUnreadable):
                read_lines(d)


class TestReadLinesFromUrl(unittest.TestCase):
    def test_downloads_url(self) -> None:
        resp = mock.Mock()
        resp.text = "BEGIN:VEVENT\r\nEND:VEVENT\r\n"
        with mock.patch("itinerary.source.requests.get", return_value=resp) as get:
            lines = read_lines("https://example.com/cal.ics")

        get.assert_called_once_with("https://example.com/cal.ics", timeout=30)
        resp.raise_for_status.assert_called_once_with()
        self.assertEqual(lines, ["BEGIN:VEVENT\r\n", "END:VEVENT\r\n"])

    def test_http_error_raises(self) -> None:
        resp = mock.Mock()
        resp.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        with mock.patch("itinerary.source.requests.get", return_value=resp):
            with self.assertRaises(InputFileUnreadable):
                read_lines("http://example.com/missing.ics")

    def test_connection_error_raises(self) -> None:
        with mock.patch("itinerary.source.requests.get", side_effect=requests.ConnectionError("refused")):
            with self.assertRaises(InputFileUnreadable):
                read_lines("https://example.com/cal.ics")


if __name__ == "__main__":
    unittest.main()
