"""
Plain text itinerary output.

Layout:

    March 01, 2022
    --------------
     9:00 AM to 10:00 AM: Standup {{Room 1}}

    March 08, 2022
    --------------
     9:00 AM to 10:00 AM: Standup {{Room 1}}

A date header is printed once per run of occurrences sharing a date, groups
are separated by one blank line, and no blank line follows the last entry.
"""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO

from itinerary.dates import format_header
from itinerary.model import Event, Occurrence


def _header(date: int) -> List[str]:
    title = format_header(date)
    return [title + "\n", "-" * len(title) + "\n"]


def format_occurrence(occ: Occurrence) -> str:
    ev = occ.event
    return f"{ev.start_clock} to {ev.end_clock}: {ev.summary} {{{{{ev.location}}}}}"


def render_itinerary(events: Iterable[Event], count: int) -> str:
    """
    Render all active events, in storage order, as itinerary text.

    `count` is the visible-occurrence total returned by filter_events; every
    occurrence line is terminated while that counter is still positive.
    """
    out: List[str] = []
    last_date: Optional[int] = None
    remaining = count

    for event in events:
        if not event.is_active:
            continue

        for occ in event.occurrences():
            if occ.date != last_date:
                if last_date is not None:
                    out.append("\n")
                out.extend(_header(occ.date))
                last_date = occ.date

            out.append(format_occurrence(occ))
            if remaining > 0:
                out.append("\n")
            remaining -= 1

    return "".join(out)


def print_itinerary(events: Iterable[Event], count: int, out: Optional[TextIO] = None) -> None:
    stream = out if out is not None else sys.stdout
    stream.write(render_itinerary(events, count))
