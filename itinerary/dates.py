"""
Date and clock helpers.

- normalize_date:    '2022/2/5'  -> '20220205'   (command line dates)
- format_clock:      '143000'    -> ' 2:30 PM'   (DTSTART/DTEND time part)
- format_header:     20220205    -> 'February 05, 2022'

All values are handled as text or YYYYMMDD integers. No datetime objects are
involved, so no time zone or calendar rules apply.
"""

from __future__ import annotations

from itinerary.errors import InvalidArgument, MalformedRecord


MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


# ---------------------------------------------------------------------------
# Date normalizer
# ---------------------------------------------------------------------------


def normalize_date(text: str) -> str:
    """
    Rewrite a '/'-separated date with 1-2 digit month/day into 8 digits.

    '2022/2/5' -> '20220205', '2022/12/25' -> '20221225'.
    Raises InvalidArgument for anything else.
    """
    parts = text.strip().split("/")
    if len(parts) != 3:
        raise InvalidArgument(f"Invalid date {text!r}, expected YYYY/M/D")

    year, month, day = parts
    if len(year) != 4 or not year.isdigit():
        raise InvalidArgument(f"Invalid year in date {text!r}")
    for comp in (month, day):
        if not (1 <= len(comp) <= 2) or not comp.isdigit():
            raise InvalidArgument(f"Invalid month/day in date {text!r}")

    return year + month.zfill(2) + day.zfill(2)


def parse_date_option(text: str) -> int:
    """
    Normalize a command line date and return it as a YYYYMMDD integer.
    """
    return int(normalize_date(text))


# ---------------------------------------------------------------------------
# Clock formatter
# ---------------------------------------------------------------------------


def format_clock(fragment: str) -> str:
    """
    Convert 'HHMMSS' into an 8 character 12-hour display string.

    Seconds and any trailing flags (e.g. 'Z') are dropped.
    Hours 13-23 become 1-11 PM right-aligned, 12 stays '12:MM PM'.
    Morning hours keep their value with a leading zero blanked, which
    makes midnight display as ' 0:00 AM'.
    """
    hh = fragment[0:2]
    mm = fragment[2:4]
    if len(hh) != 2 or len(mm) != 2 or not (hh + mm).isdigit():
        raise MalformedRecord(f"Invalid time {fragment!r}, expected HHMMSS")

    hour = int(hh)
    if hour > 23 or int(mm) > 59:
        raise MalformedRecord(f"Invalid time value {fragment!r}")

    if hour >= 12:
        if hour > 12:
            hh = f"{hour - 12:2d}"
        suffix = "PM"
    else:
        if hh[0] == "0":
            hh = " " + hh[1]
        suffix = "AM"

    return f"{hh}:{mm} {suffix}"


# ---------------------------------------------------------------------------
# Header dates
# ---------------------------------------------------------------------------


def split_date(date: int) -> tuple[int, int, int]:
    """
    Split a YYYYMMDD integer into (year, month, day).
    """
    return date // 10000, (date // 100) % 100, date % 100


def format_header(date: int) -> str:
    """
    Render a YYYYMMDD integer as 'Month DD, YYYY' (day always two digits).
    """
    year, month, day = split_date(date)
    if not (1 <= month <= 12):
        raise MalformedRecord(f"Invalid month in date {date}")
    return f"{MONTH_NAMES[month]} {day:02d}, {year}"
