import datetime
import re

MINUTES_PER_DAY = 24 * 60

# H:MMam / H:MMpm, hour 1-12, minute with one or two ASCII digits
CLOCK_TIME_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{1,2})(am|pm)$", re.IGNORECASE)


class ParseError(ValueError):
    """Base class for values that could not be parsed."""


class MalformedTimeError(ParseError):
    """
    Raised when a clock value does not match the 12-hour ``H:MMam`` pattern.
    The offending value is kept on ``value`` so callers can report it.
    """

    def __init__(self, value, field=None):
        self.value = value
        self.field = field
        label = f"{field} " if field else ""
        super().__init__(f"Invalid {label}time format: {value!r}")


def parse_clock_time(time_str, field=None):
    """
    Parses a 12-hour clock value (e.g. "7:20pm") into minutes since midnight.

    "12:00am" is midnight (0) and "12:00pm" is noon (720).
    Raises MalformedTimeError if the value does not match the pattern.
    """
    if not isinstance(time_str, str):
        raise MalformedTimeError(time_str, field)

    match = CLOCK_TIME_PATTERN.match(time_str.strip())
    if not match:
        raise MalformedTimeError(time_str, field)

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = match.group(3).lower()

    if not 1 <= hours <= 12 or minutes > 59:
        raise MalformedTimeError(time_str, field)

    if period == "pm" and hours != 12:
        hours += 12
    if period == "am" and hours == 12:
        hours = 0

    return hours * 60 + minutes


def format_clock_time(total_minutes):
    """Formats minutes since midnight as a 12-hour clock value, e.g. 1160 -> "7:20pm"."""
    if not isinstance(total_minutes, int) or not 0 <= total_minutes < MINUTES_PER_DAY:
        raise ValueError(f"Minutes since midnight out of range: {total_minutes!r}")

    hours, minutes = divmod(total_minutes, 60)
    period = "pm" if hours >= 12 else "am"
    display_hour = hours % 12 or 12
    return f"{display_hour}:{minutes:02d}{period}"


def minutes_since_midnight(moment):
    """Returns the minute of day for a datetime.datetime or datetime.time."""
    if isinstance(moment, datetime.datetime):
        moment = moment.time()
    return moment.hour * 60 + moment.minute
