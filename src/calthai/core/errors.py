class CalthaiError(Exception):
    """Base error."""

class StateError(CalthaiError):
    """Raised for malformed configuration or an event the reducer does not know."""

class ParseError(CalthaiError, ValueError):
    """Base of all string decoding failures."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"{reason}: {value!r}")
        self.value = value
        self.reason = reason

class StructuralParseError(ParseError):
    """Wrong length, wrong separators, or a non-digit in a numeric field."""

class CalendarRangeError(ParseError):
    """Month outside 1..12 or day outside 1..31."""

class CalendarExistenceError(ParseError):
    """Well-formed fields that name a date the Gregorian calendar does not have."""

class TimeRangeError(ParseError):
    """Hour outside 0..23 or minute outside 0..59."""

class PlausibilityError(ParseError):
    """Typed year too far from the current year to be anything but a typo."""
