# -*- coding: utf-8 -*-
"""
Service for storing and loading the shared daily prayer schedule.

The application keeps a single active schedule. This module is the boundary
where the stored 12-hour clock strings are turned into a parsed DailySchedule,
so request handlers never parse them again and never see a half-written row.

Key rules:
- Writes replace all five boundaries at once and leave exactly one active row.
- A schedule is only accepted if every value parses and the boundaries are
  strictly increasing (Fajr < Dhuhr < Asr < Maghrib < Isha).
- Readers must check for an active schedule before resolving anything.
"""

from typing import Any, Dict, List, Mapping, Tuple

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from .. import db
from ..metrics import MALFORMED_TIME_VALUES_TOTAL, PRAYER_SCHEDULE_WRITES_TOTAL
from ..models import PrayerSchedule
from ..utils.time_utils import MalformedTimeError
from .prayer_window import DailySchedule


class NoActiveScheduleError(LookupError):
    """Raised when no prayer schedule has been configured yet."""

    def __init__(self):
        super().__init__("No prayer times configured")


class NonMonotonicScheduleError(ValueError):
    """Raised when the five boundaries are not in strictly increasing order."""

    def __init__(self, schedule: DailySchedule):
        self.schedule = schedule
        super().__init__(
            "Prayer times must be in increasing order: Fajr < Dhuhr < Asr < Maghrib < Isha"
        )


def validate_schedule(times: Mapping[str, str]) -> DailySchedule:
    """
    Parses and checks a full set of boundaries before it is stored.

    Raises:
        MalformedTimeError: a value is not a 12-hour clock value.
        NonMonotonicScheduleError: the boundaries are out of order or collapse.
    """
    try:
        schedule = DailySchedule.from_mapping(times)
    except MalformedTimeError as e:
        MALFORMED_TIME_VALUES_TOTAL.labels(source='write').inc()
        current_app.logger.warning(f"Rejected prayer schedule: {e}")
        raise

    if not schedule.is_strictly_increasing():
        current_app.logger.warning(f"Rejected non-monotonic prayer schedule: {schedule!r}")
        raise NonMonotonicScheduleError(schedule)

    return schedule


def get_active_schedule() -> PrayerSchedule:
    """Returns the active schedule row, or raises NoActiveScheduleError."""
    prayer_time = PrayerSchedule.query.filter_by(is_active=True).order_by(
        PrayerSchedule.updated_at.desc()
    ).first()
    if not prayer_time:
        raise NoActiveScheduleError()
    return prayer_time


def load_active_schedule() -> Tuple[PrayerSchedule, DailySchedule]:
    """
    Loads the active schedule and parses it once for the resolver.

    A stored value that no longer parses is logged and re-raised; the caller
    decides how to report it rather than guessing a time.
    """
    prayer_time = get_active_schedule()
    try:
        parsed = DailySchedule.from_mapping(prayer_time.boundary_times())
    except MalformedTimeError as e:
        MALFORMED_TIME_VALUES_TOTAL.labels(source='store').inc()
        current_app.logger.error(f"Stored prayer schedule {prayer_time.id} is unreadable: {e}", exc_info=True)
        raise
    return prayer_time, parsed


def save_schedule(times: Mapping[str, str]):
    """
    Creates the schedule or replaces the existing one for everyone.

    The first stored row is updated in place (and re-activated); any other
    active rows are switched off first so only one schedule stays in effect.
    The lookup locks the row, and the single-active index on the table makes
    a racing first write fail instead of leaving two active schedules.

    Returns:
        The saved PrayerSchedule, or None if the database write failed.
    """
    validate_schedule(times)
    values = {key.lower(): value.strip() for key, value in times.items()
              if key.lower() in ('fajr', 'dhuhr', 'asr', 'maghrib', 'isha')}

    try:
        prayer_time = PrayerSchedule.query.order_by(PrayerSchedule.id.asc()).with_for_update().first()

        if prayer_time:
            PrayerSchedule.query.filter(
                PrayerSchedule.id != prayer_time.id,
                PrayerSchedule.is_active.is_(True),
            ).update({'is_active': False}, synchronize_session=False)

            for key, value in values.items():
                setattr(prayer_time, key, value)
            prayer_time.is_active = True
            db.session.flush()
            current_app.logger.info(f"Updated prayer schedule {prayer_time.id}.")
        else:
            prayer_time = PrayerSchedule(is_active=True, **values)
            db.session.add(prayer_time)
            db.session.flush()
            current_app.logger.info(f"Created prayer schedule {prayer_time.id}.")

        db.session.commit()
        PRAYER_SCHEDULE_WRITES_TOTAL.labels(status='success').inc()
        return prayer_time

    except SQLAlchemyError as e:
        db.session.rollback()
        PRAYER_SCHEDULE_WRITES_TOTAL.labels(status='error').inc()
        current_app.logger.error(f"DB upsert failed for prayer schedule: {e}", exc_info=True)
        return None


def list_schedules(page: int = 1, limit: int = 30) -> Tuple[List[PrayerSchedule], int]:
    """Returns one page of stored schedules (newest first) and the total count."""
    query = PrayerSchedule.query.order_by(PrayerSchedule.updated_at.desc(), PrayerSchedule.id.desc())
    total = query.count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return items, total


def pagination_info(page: int, limit: int, total: int) -> Dict[str, Any]:
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": -(-total // limit) if limit else 0,
    }
