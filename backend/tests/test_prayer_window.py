# backend/tests/test_prayer_window.py

import dataclasses

import pytest

from hingad.services.prayer_window import DailySchedule, ResolvedWindow, resolve_window
from hingad.utils.time_utils import MalformedTimeError

SCHEDULE_TEXT = {
    "Fajr": "5:00am",      # 300
    "Dhuhr": "12:15pm",    # 735
    "Asr": "4:30pm",       # 990
    "Maghrib": "7:05pm",   # 1145
    "Isha": "8:20pm",      # 1220
}

@pytest.fixture
def schedule():
    return DailySchedule.from_mapping(SCHEDULE_TEXT)


def test_from_mapping_parses_all_boundaries_in_order(schedule):
    assert schedule.boundaries == (
        ("Fajr", 300), ("Dhuhr", 735), ("Asr", 990), ("Maghrib", 1145), ("Isha", 1220),
    )
    assert schedule.minutes_for("Asr") == 990
    assert schedule.is_strictly_increasing()

def test_from_mapping_accepts_lowercase_keys(schedule):
    lowered = {key.lower(): value for key, value in SCHEDULE_TEXT.items()}
    assert DailySchedule.from_mapping(lowered) == schedule

def test_from_mapping_requires_all_five_boundaries():
    incomplete = dict(SCHEDULE_TEXT)
    del incomplete["Asr"]
    with pytest.raises(ValueError, match="Asr"):
        DailySchedule.from_mapping(incomplete)

def test_daily_schedule_is_immutable(schedule):
    with pytest.raises(dataclasses.FrozenInstanceError):
        schedule.boundaries = ()
    assert hash(schedule) == hash(DailySchedule.from_mapping(SCHEDULE_TEXT))

def test_daily_schedule_rejects_out_of_range_minutes():
    with pytest.raises(ValueError):
        DailySchedule.from_minutes({"Fajr": 300, "Dhuhr": 735, "Asr": 990, "Maghrib": 1145, "Isha": 1440})

def test_daily_schedule_rejects_boundaries_out_of_prayer_order():
    with pytest.raises(ValueError, match="in order"):
        DailySchedule((("Dhuhr", 735), ("Fajr", 300), ("Asr", 990), ("Maghrib", 1145), ("Isha", 1220)))


def test_morning_after_fajr(schedule):
    window = resolve_window(schedule, 360)  # 6:00am
    assert window == ResolvedWindow(current_prayer="Fajr", next_prayer="Dhuhr", minutes_until_next=375)

def test_exactly_on_a_boundary_makes_it_current(schedule):
    window = resolve_window(schedule, 735)  # 12:15pm
    assert window.current_prayer == "Dhuhr"
    assert window.next_prayer == "Asr"
    assert window.minutes_until_next == 255

def test_before_fajr_carries_isha_over_from_previous_day(schedule):
    window = resolve_window(schedule, 240)  # 4:00am
    assert window.current_prayer == "Isha"
    assert window.next_prayer == "Fajr"
    # Fajr is still ahead on the same day
    assert window.minutes_until_next == 60

def test_midnight_is_before_fajr(schedule):
    window = resolve_window(schedule, 0)
    assert (window.current_prayer, window.next_prayer, window.minutes_until_next) == ("Isha", "Fajr", 300)

def test_exactly_at_isha_wraps_to_next_fajr(schedule):
    window = resolve_window(schedule, 1220)  # 8:20pm
    assert window.current_prayer == "Isha"
    assert window.next_prayer == "Fajr"
    assert window.minutes_until_next == (1440 - 1220) + 300

def test_last_minute_of_the_day(schedule):
    window = resolve_window(schedule, 1439)
    assert (window.current_prayer, window.next_prayer, window.minutes_until_next) == ("Isha", "Fajr", 301)

def test_one_minute_before_a_boundary(schedule):
    window = resolve_window(schedule, 1144)
    assert (window.current_prayer, window.next_prayer, window.minutes_until_next) == ("Asr", "Maghrib", 1)

def test_accepts_textual_mapping_directly():
    window = resolve_window(SCHEDULE_TEXT, 1000)
    assert (window.current_prayer, window.next_prayer, window.minutes_until_next) == ("Asr", "Maghrib", 145)

def test_is_idempotent(schedule):
    assert resolve_window(schedule, 900) == resolve_window(schedule, 900)

def test_to_dict_uses_api_field_names(schedule):
    assert resolve_window(schedule, 360).to_dict() == {
        "currentPrayer": "Fajr",
        "nextPrayer": "Dhuhr",
        "minutesUntilNext": 375,
    }

def test_every_minute_of_the_day_resolves_within_bounds(schedule):
    names = {"Fajr", "Dhuhr", "Asr", "Maghrib", "Isha"}
    for minutes in range(1440):
        window = resolve_window(schedule, minutes)
        assert window.current_prayer in names
        assert window.next_prayer in names
        assert 0 <= window.minutes_until_next <= 1439


def test_malformed_boundary_fails_before_any_result():
    broken = dict(SCHEDULE_TEXT, Maghrib="25:99xm")
    with pytest.raises(MalformedTimeError) as excinfo:
        resolve_window(broken, 360)
    assert excinfo.value.value == "25:99xm"
    assert excinfo.value.field == "maghrib"

@pytest.mark.parametrize("query", [-1, 1440, 12.5, "360", None, True])
def test_rejects_query_outside_the_day(schedule, query):
    with pytest.raises(ValueError):
        resolve_window(schedule, query)


def test_collapsed_schedule_still_terminates():
    collapsed = DailySchedule.from_minutes({name: 600 for name in ("Fajr", "Dhuhr", "Asr", "Maghrib", "Isha")})
    assert not collapsed.is_strictly_increasing()

    at_value = resolve_window(collapsed, 600)
    assert (at_value.current_prayer, at_value.next_prayer, at_value.minutes_until_next) == ("Isha", "Fajr", 0)

    before = resolve_window(collapsed, 500)
    assert (before.current_prayer, before.next_prayer, before.minutes_until_next) == ("Isha", "Fajr", 100)

    after = resolve_window(collapsed, 700)
    assert (after.current_prayer, after.next_prayer, after.minutes_until_next) == ("Isha", "Fajr", 1340)

def test_non_monotonic_schedule_stays_in_range():
    shuffled = DailySchedule.from_minutes({"Fajr": 900, "Dhuhr": 300, "Asr": 990, "Maghrib": 1145, "Isha": 100})
    for minutes in range(1440):
        assert 0 <= resolve_window(shuffled, minutes).minutes_until_next <= 1439
