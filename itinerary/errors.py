"""
Error kinds raised by the itinerary pipeline.

Library code raises these; only the CLI catches them, reports the kind and a
short message, and exits non-zero.
"""

from __future__ import annotations


class ItineraryError(Exception):
    """
    Base class for every error the pipeline reports to the user.
    """

    @property
    def kind(self) -> str:
        return type(self).__name__


class InputFileUnreadable(ItineraryError):
    """The calendar file (or URL) could not be read."""


class MalformedRecord(ItineraryError):
    """A VEVENT record or one of its properties could not be parsed."""


class CapacityExceeded(ItineraryError):
    """More events, or more occurrences of one event, than the fixed limits allow."""


class InvalidArgument(ItineraryError, ValueError):
    """A command line option could not be interpreted."""
