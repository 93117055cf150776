"""
Parsing (iCalendar text -> Event objects).

- Scans the calendar line by line for BEGIN:VEVENT / END:VEVENT records
- Turns EACH record into exactly ONE Event
- Collects the events, in file order, into a bounded EventStore

Important rules:
- Only DTSTART, DTEND, LOCATION, SUMMARY and weekly RRULE are understood,
  every other property is ignored
- Every non-empty line inside a record must be KEYWORD:value
- No time zones, no line folding, no escaping
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, Tuple

from itinerary.dates import format_clock
from itinerary.errors import MalformedRecord
from itinerary.model import MAX_EVENTS, Event, EventStore


logger = logging.getLogger(__name__)

BEGIN_MARKER = "BEGIN:VEVENT"
END_MARKER = "END:VEVENT"

_DATE_PREFIX = re.compile(r"(\d{8})")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def split_property(line: str) -> Tuple[str, str]:
    """
    Split 'KEYWORD;PARAM=x:value' into ('KEYWORD', 'value').

    The split happens on the first ':' so values may contain colons.
    Parameters after ';' in the keyword are dropped.
    """
    if ":" not in line:
        raise MalformedRecord(f"Missing ':' in line {line!r}")

    key, value = line.split(":", 1)
    name = key.split(";", 1)[0].strip().upper()
    if not name:
        raise MalformedRecord(f"Missing keyword in line {line!r}")
    return name, value


def _parse_date(text: str, what: str) -> int:
    # numeric prefix only, anything after the 8 digits is ignored
    match = _DATE_PREFIX.match(text)
    if not match:
        raise MalformedRecord(f"Invalid {what} date {text!r}, expected YYYYMMDD")

    date = int(match.group(1))
    month = (date // 100) % 100
    if not (1 <= month <= 12):
        raise MalformedRecord(f"Invalid month in {what} date {text!r}")
    return date


def parse_datetime(value: str, what: str) -> Tuple[int, str]:
    """
    Split 'YYYYMMDDTHHMMSS[flags]' into (YYYYMMDD, clock display).
    """
    if "T" not in value:
        raise MalformedRecord(f"Invalid {what} value {value!r}, expected YYYYMMDDTHHMMSS")

    date_part, time_part = value.split("T", 1)
    return _parse_date(date_part, what), format_clock(time_part)


def parse_weekly_until(value: str) -> int:
    """
    Return the UNTIL date of a weekly RRULE, or 0 for any other frequency.
    """
    parts = {}
    for comp in value.split(";"):
        k, sep, v = comp.partition("=")
        if sep:
            parts[k.strip().upper()] = v.strip()

    if parts.get("FREQ", "").upper() != "WEEKLY":
        return 0

    until = parts.get("UNTIL")
    if not until:
        raise MalformedRecord(f"Weekly RRULE without UNTIL: {value!r}")

    # strip the time and flags, e.g. 20220401T235959Z -> 20220401
    return _parse_date(until.split("T", 1)[0], "UNTIL")


# ---------------------------------------------------------------------------
# Event parsing (CORE LOGIC)
# ---------------------------------------------------------------------------


def parse_event(lines: Iterator[str]) -> Event:
    """
    Consume one record from `lines` (positioned right after BEGIN:VEVENT)
    up to and including END:VEVENT, and return the populated Event.
    """
    event = Event()
    has_rrule = False

    for raw in lines:
        line = raw.rstrip("\r\n")

        if line == END_MARKER:
            if event.is_recurring and not event.is_active:
                raise MalformedRecord(f"Recurring event {event.summary!r} has no DTSTART")
            if not event.is_active:
                logger.debug("Record without DTSTART will not be shown: %r", event.summary)
            if has_rrule and not event.is_recurring:
                logger.debug("Ignoring non-weekly RRULE on %r", event.summary)
            return event

        if not line.strip():
            continue

        keyword, value = split_property(line)

        if keyword == "DTSTART":
            event.start_date, event.start_clock = parse_datetime(value, "DTSTART")
            event.is_active = True
        elif keyword == "DTEND":
            event.end_date, event.end_clock = parse_datetime(value, "DTEND")
        elif keyword == "LOCATION":
            event.location = value
        elif keyword == "SUMMARY":
            event.summary = value
        elif keyword == "RRULE":
            has_rrule = True
            event.repeat_until = parse_weekly_until(value)

    raise MalformedRecord(f"Calendar ended inside a record (missing {END_MARKER})")


# ---------------------------------------------------------------------------
# Record reader
# ---------------------------------------------------------------------------


def read_events(lines: Iterable[str], capacity: int = MAX_EVENTS) -> EventStore:
    """
    Scan all lines and parse every VEVENT record, in file order.

    Raises CapacityExceeded as soon as the file holds more than `capacity`
    records.
    """
    store = EventStore(capacity)
    stream = iter(lines)

    for raw in stream:
        if raw.rstrip("\r\n") == BEGIN_MARKER:
            store.append(parse_event(stream))

    logger.debug("Read %d event records", len(store))
    return store
