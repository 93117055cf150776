"""
CLI (Command Line Interface).

Prints the events of an iCalendar file that fall into a date window:

    itinerary --start=2022/3/1 --end=2022/3/31 --file=calendar.ics

Weekly repeating events are listed once per week inside the window (at most
5 times per event). Dates may omit zero padding (2022/3/1).

Exit codes:
- 0  itinerary printed
- 1  the calendar could not be read or processed
- 2  invalid command line (argparse)
"""

from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from itinerary.dates import parse_date_option
from itinerary.errors import InvalidArgument, ItineraryError
from itinerary.expand import filter_events
from itinerary.model import MAX_EVENTS
from itinerary.parse import read_events
from itinerary.render import print_itinerary
from itinerary.source import read_lines


logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """
    Send log records to stderr through rich; stdout stays reserved for the itinerary.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _report(exc: ItineraryError) -> None:
    err_console.print(f"[bold red]error[/bold red]: {exc.kind}: {escape(str(exc))}")


def _run(args: argparse.Namespace) -> int:
    """
    Read, filter and print. Raises ItineraryError on any failure, before
    anything has been written to stdout.
    """
    start = parse_date_option(args.start)
    end = parse_date_option(args.end)
    if start > end:
        raise InvalidArgument(f"--start {args.start} is after --end {args.end}")

    lines = read_lines(args.file)
    events = read_events(lines, capacity=args.max_events)
    count = filter_events(events, start, end, strict=args.strict)

    logger.debug("Printing %d occurrences from %d events", count, len(events))
    print_itinerary(events, count)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser.
    """
    parser = argparse.ArgumentParser(prog="itinerary", description="Print calendar events within a date window")
    parser.add_argument("--start", required=True, type=str, help="First day of the window (e.g. 2022/3/1)")
    parser.add_argument("--end", required=True, type=str, help="Last day of the window (e.g. 2022/3/31)")
    parser.add_argument("--file", required=True, type=str, help="Calendar .ics file path or http(s) URL")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of truncating when a weekly event repeats more than 5 times in the window",
    )
    parser.add_argument(
        "--max-events", type=int, default=MAX_EVENTS, help=f"Maximum number of events (default {MAX_EVENTS})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr")
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, runs the pipeline,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_events < 1:
        parser.error("--max-events must be at least 1")

    _configure_logging(args.verbose)

    try:
        code = _run(args)
    except ItineraryError as exc:
        _report(exc)
        raise SystemExit(1)

    raise SystemExit(code)
