"""
Central data model definitions used across the project.

This module defines the canonical structure of Event objects and the bounded
container that holds them, so that:
- parser, filter and presenter share the same field names
- the fixed capacity limits live in exactly one place
- the presenter never has to mutate an event to show its repeated dates

Dates are plain YYYYMMDD integers. They are ordered and compared as numbers and
are never checked against a real calendar.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from itinerary.errors import CapacityExceeded


# ---------------------------------------------------------------------------
# Capacity limits
# ---------------------------------------------------------------------------

# Maximum number of VEVENT records accepted from one calendar file.
MAX_EVENTS = 500

# Maximum number of occurrences materialized for one recurring event.
MAX_OCCURRENCES = 5

# "One week later" on the YYYYMMDD encoding. Plain integer addition, so it is
# only correct inside a month: 20220329 + 7 == 20220336.
WEEKLY_STEP = 7


@dataclass
class Event:
    """
    Represents one VEVENT record.

    `is_active` starts False, is set once DTSTART has been seen, and is cleared
    again by the filter when the event has nothing to show in the window.
    `repeat_until == 0` means the event does not repeat.
    """

    is_active: bool = False
    start_date: int = 0
    end_date: int = 0
    start_clock: str = ""
    end_clock: str = ""
    location: str = ""
    summary: str = ""
    repeat_until: int = 0
    occurrence_dates: List[int] = field(default_factory=list)

    @property
    def is_recurring(self) -> bool:
        return self.repeat_until != 0

    def occurrences(self) -> List["Occurrence"]:
        """
        Return the concrete appearances of this event.

        A plain event has exactly one (its start date); a recurring event has
        one per materialized weekly date.
        """
        if not self.is_recurring:
            return [Occurrence(date=self.start_date, event=self)]
        return [Occurrence(date=d, event=self) for d in self.occurrence_dates[:MAX_OCCURRENCES]]


@dataclass(frozen=True)
class Occurrence:
    """
    One displayed appearance of an event on a specific date.
    """

    date: int
    event: Event


class EventStore:
    """
    Ordered, fixed-capacity collection of events.

    Index order is file order. Events are never removed or reordered; the
    filter only flips `is_active` and fills `occurrence_dates` in place.
    """

    def __init__(self, capacity: int = MAX_EVENTS) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._events: List[Event] = []

    def append(self, event: Event) -> None:
        if len(self._events) >= self.capacity:
            raise CapacityExceeded(f"calendar holds more than {self.capacity} events")
        self._events.append(event)

    def active(self) -> List[Event]:
        return [ev for ev in self._events if ev.is_active]

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __getitem__(self, index: int) -> Event:
        return self._events[index]
