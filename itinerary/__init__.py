"""
itinerary – turn an iCalendar file into a plain-text, date-grouped itinerary.
"""
