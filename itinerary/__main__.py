"""
Package entry point.

Allows running the application via:

    python -m itinerary --start=2022/3/1 --end=2022/3/31 --file=calendar.ics

This simply forwards execution to itinerary.cli.main().
"""

from itinerary.cli import main

if __name__ == "__main__":
    main()
