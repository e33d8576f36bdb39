# This module resolves which prayer interval a moment of the day falls in.
from dataclasses import dataclass
from typing import Dict, Mapping, Tuple, Union

from ..utils.constants import PRAYER_NAMES
from ..utils.time_utils import MINUTES_PER_DAY, parse_clock_time


@dataclass(frozen=True)
class DailySchedule:
    """
    The five daily prayer boundaries as minutes since midnight, in the fixed
    order Fajr, Dhuhr, Asr, Maghrib, Isha.
    """
    boundaries: Tuple[Tuple[str, int], ...]

    def __post_init__(self):
        names = tuple(name for name, _ in self.boundaries)
        if names != PRAYER_NAMES:
            raise ValueError(f"Schedule boundaries must be {', '.join(PRAYER_NAMES)} in order, got {names!r}")
        for name, minutes in self.boundaries:
            if isinstance(minutes, bool) or not isinstance(minutes, int) \
                    or not 0 <= minutes < MINUTES_PER_DAY:
                raise ValueError(f"{name} boundary out of range: {minutes!r}")

    @classmethod
    def from_minutes(cls, boundaries: Mapping[str, int]) -> 'DailySchedule':
        """Builds a schedule from minutes since midnight keyed by prayer name."""
        missing = [name for name in PRAYER_NAMES if name not in boundaries]
        if missing:
            raise ValueError(f"Schedule is missing boundaries: {', '.join(missing)}")
        return cls(tuple((name, boundaries[name]) for name in PRAYER_NAMES))

    @classmethod
    def from_mapping(cls, times: Mapping[str, str]) -> 'DailySchedule':
        """
        Parses textual clock values keyed by prayer name. Keys are matched
        case-insensitively, so both "Fajr" and "fajr" are accepted.
        Raises MalformedTimeError on the first value that does not parse.
        """
        by_lower = {str(key).lower(): value for key, value in times.items()}
        parsed = {}
        for name in PRAYER_NAMES:
            key = name.lower()
            if key not in by_lower:
                raise ValueError(f"Schedule is missing boundary: {name}")
            parsed[name] = parse_clock_time(by_lower[key], field=key)
        return cls.from_minutes(parsed)

    def minutes_for(self, name: str) -> int:
        for boundary_name, minutes in self.boundaries:
            if boundary_name == name:
                return minutes
        raise KeyError(name)

    def is_strictly_increasing(self) -> bool:
        values = [minutes for _, minutes in self.boundaries]
        return all(earlier < later for earlier, later in zip(values, values[1:]))

    def as_dict(self) -> Dict[str, int]:
        return dict(self.boundaries)


@dataclass(frozen=True)
class ResolvedWindow:
    current_prayer: str
    next_prayer: str
    minutes_until_next: int

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {
            "currentPrayer": self.current_prayer,
            "nextPrayer": self.next_prayer,
            "minutesUntilNext": self.minutes_until_next,
        }


def resolve_window(schedule: Union[DailySchedule, Mapping[str, str]], query_minutes: int) -> ResolvedWindow:
    """
    Determines the current prayer, the next prayer and the minutes until the
    next one for a moment of the day.

    Args:
        schedule: A DailySchedule, or a mapping of prayer name to a 12-hour
                  clock value which is parsed before anything is resolved.
        query_minutes: The moment to resolve, as minutes since midnight.

    Returns:
        A ResolvedWindow. Before Fajr the current prayer is Isha of the
        previous day; at or after Isha the next prayer wraps to Fajr.
    """
    if not isinstance(schedule, DailySchedule):
        schedule = DailySchedule.from_mapping(schedule)

    if isinstance(query_minutes, bool) or not isinstance(query_minutes, int) \
            or not 0 <= query_minutes < MINUTES_PER_DAY:
        raise ValueError(f"Query time must be minutes since midnight in [0, 1439], got {query_minutes!r}")

    boundaries = schedule.boundaries
    first_name, first_minutes = boundaries[0]

    current_prayer = boundaries[-1][0]
    for name, minutes in reversed(boundaries):
        if query_minutes >= minutes:
            current_prayer = name
            break

    upcoming = next(((name, minutes) for name, minutes in boundaries if minutes > query_minutes), None)
    if upcoming:
        next_prayer, next_minutes = upcoming
        minutes_until_next = next_minutes - query_minutes
    else:
        next_prayer = first_name
        minutes_until_next = (MINUTES_PER_DAY - query_minutes) + first_minutes

    return ResolvedWindow(
        current_prayer=current_prayer,
        next_prayer=next_prayer,
        minutes_until_next=minutes_until_next % MINUTES_PER_DAY,
    )
