"""
API Routes for the Daily Prayer Schedule
----------------------------------------
Read endpoints for the shared schedule and the "current prayer" lookup, and the
administrative endpoint that replaces the schedule for everyone.
"""

import datetime
from zoneinfo import ZoneInfo

from flask import current_app, g
from flask_smorest import Blueprint, abort

from ..extensions import limiter
from ..metrics import MALFORMED_TIME_VALUES_TOTAL, PRAYER_WINDOW_RESOLUTIONS_TOTAL
from ..schemas import (
    CurrentPrayerArgsSchema,
    CurrentPrayerResponseSchema,
    MessageSchema,
    PrayerListArgsSchema,
    PrayerScheduleInputSchema,
    PrayerScheduleListSchema,
    PrayerScheduleSavedSchema,
)
from ..services import prayer_schedule_service
from ..services.prayer_schedule_service import NoActiveScheduleError, NonMonotonicScheduleError
from ..services.prayer_window import resolve_window
from ..utils.auth import role_required
from ..utils.constants import Roles
from ..utils.time_utils import MalformedTimeError, minutes_since_midnight, parse_clock_time

prayer_bp = Blueprint(
    'Prayers',
    __name__,
    url_prefix='/api/prayers',
    description="Operations for the daily prayer schedule."
)


def _now_in_prayer_timezone():
    """Current wall-clock time in the configured prayer timezone."""
    return datetime.datetime.now(ZoneInfo(current_app.config.get('PRAYER_TIMEZONE', 'UTC')))


@prayer_bp.route('/', methods=['GET'])
@prayer_bp.arguments(PrayerListArgsSchema, location='query')
@prayer_bp.response(200, PrayerScheduleListSchema, description="Stored prayer schedules.")
def get_prayer_times(args):
    """List stored prayer schedules, newest first."""
    page = args.get('page', 1)
    limit = args.get('limit') or current_app.config.get('PRAYER_LIST_DEFAULT_LIMIT', 30)
    limit = min(limit, current_app.config.get('PRAYER_LIST_MAX_LIMIT', 100))

    prayer_times, total = prayer_schedule_service.list_schedules(page, limit)
    return {
        "success": True,
        "data": prayer_times,
        "pagination": prayer_schedule_service.pagination_info(page, limit, total),
    }


@prayer_bp.route('/current', methods=['GET'])
@limiter.limit("120 per minute")
@prayer_bp.arguments(CurrentPrayerArgsSchema, location='query')
@prayer_bp.response(200, CurrentPrayerResponseSchema, description="The current and next prayer.")
@prayer_bp.alt_response(400, schema=MessageSchema, description="The 'at' argument is not a valid time.")
@prayer_bp.alt_response(404, schema=MessageSchema, description="No prayer schedule configured.")
def get_current_prayer(args):
    """
    Get the current prayer, the next prayer and the minutes until it starts.

    "Now" is read in the configured prayer timezone unless an explicit
    12-hour clock value is passed as `at`.
    """
    at = args.get('at')
    if at:
        try:
            query_minutes = parse_clock_time(at, field='at')
        except MalformedTimeError as e:
            MALFORMED_TIME_VALUES_TOTAL.labels(source='query').inc()
            abort(400, message=str(e))
    else:
        query_minutes = minutes_since_midnight(_now_in_prayer_timezone())

    try:
        prayer_time, schedule = prayer_schedule_service.load_active_schedule()
    except NoActiveScheduleError as e:
        abort(404, message=str(e))
    except MalformedTimeError:
        abort(500, message="The configured prayer schedule is invalid.")

    window = resolve_window(schedule, query_minutes)
    PRAYER_WINDOW_RESOLUTIONS_TOTAL.labels(current_prayer=window.current_prayer).inc()

    data = window.to_dict()
    data["today"] = prayer_time
    return {"success": True, "data": data}


@prayer_bp.route('/create', methods=['POST'])
@role_required(Roles.ADMIN)
@prayer_bp.arguments(PrayerScheduleInputSchema)
@prayer_bp.response(200, PrayerScheduleSavedSchema, description="Schedule saved.")
@prayer_bp.alt_response(400, schema=MessageSchema, description="A time is malformed or out of order.")
@prayer_bp.doc(security=[{"Bearer": []}])
def create_or_update_prayer_time(data):
    """Create the prayer schedule, or replace it for everyone."""
    try:
        prayer_time = prayer_schedule_service.save_schedule(data)
    except (MalformedTimeError, NonMonotonicScheduleError) as e:
        abort(400, message=str(e))

    if prayer_time is None:
        abort(500, message="Could not save prayer times.")

    current_app.logger.info(f"Prayer schedule {prayer_time.id} saved by {g.user.email}")
    return {
        "success": True,
        "message": "Prayer times updated for everyone",
        "data": prayer_time,
    }
