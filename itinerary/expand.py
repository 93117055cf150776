"""
Window filtering and weekly recurrence expansion.

Given events and an inclusive [start, end] window (YYYYMMDD integers):
- plain events stay active only if their start date lies in the window
- recurring events get one occurrence per weekly step that lands in the window,
  and stay active only if they got at least one

The weekly step is integer addition on the YYYYMMDD encoding (see
itinerary.model.WEEKLY_STEP), so repetitions crossing a month boundary produce
dates such as 20220336 instead of rolling over into April.
"""

from __future__ import annotations

import logging
from typing import Iterable

from itinerary.errors import CapacityExceeded
from itinerary.model import MAX_OCCURRENCES, WEEKLY_STEP, Event


logger = logging.getLogger(__name__)


def expand_weekly(event: Event, start: int, end: int, strict: bool = False) -> int:
    """
    Fill `event.occurrence_dates` with its weekly dates inside the window.

    Starts from scratch on every call, so repeated runs never accumulate.
    At most MAX_OCCURRENCES dates are kept. Any further in-window date is
    dropped with a warning, or raises CapacityExceeded when `strict` is set.
    Returns the number of dates kept.
    """
    event.occurrence_dates = []

    # no in-window date can exist past `end`
    last = min(event.repeat_until, end)
    current = event.start_date
    while current <= last:
        if current >= start:
            if len(event.occurrence_dates) >= MAX_OCCURRENCES:
                if strict:
                    raise CapacityExceeded(
                        f"Event {event.summary!r} has more than {MAX_OCCURRENCES} occurrences "
                        f"between {start} and {end}"
                    )
                logger.warning(
                    "Event %r has more than %d occurrences in the window, showing the first %d",
                    event.summary,
                    MAX_OCCURRENCES,
                    MAX_OCCURRENCES,
                )
                break
            event.occurrence_dates.append(current)
        current += WEEKLY_STEP

    return len(event.occurrence_dates)


def filter_events(events: Iterable[Event], start: int, end: int, strict: bool = False) -> int:
    """
    Deactivate events with nothing to show in [start, end] and expand the
    recurring ones in place.

    Returns the total number of visible occurrences: 1 per kept plain event
    plus the occurrence count of every recurring event.
    """
    count = 0
    for event in events:
        if not event.is_active:
            continue

        if event.is_recurring:
            found = expand_weekly(event, start, end, strict=strict)
            event.is_active = found > 0
            count += found
        elif start <= event.start_date <= end:
            count += 1
        else:
            event.is_active = False

    logger.debug("Window %d-%d: %d visible occurrences", start, end, count)
    return count
