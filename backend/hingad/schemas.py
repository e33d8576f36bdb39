# hingad/schemas.py

from marshmallow import Schema, fields, validate

class MessageSchema(Schema):
    message = fields.Str(required=True)

class PrayerScheduleInputSchema(Schema):
    """Payload for creating or replacing the daily prayer schedule."""
    fajr = fields.Str(required=True, validate=validate.Length(min=1, max=10))
    dhuhr = fields.Str(required=True, validate=validate.Length(min=1, max=10))
    asr = fields.Str(required=True, validate=validate.Length(min=1, max=10))
    maghrib = fields.Str(required=True, validate=validate.Length(min=1, max=10))
    isha = fields.Str(required=True, validate=validate.Length(min=1, max=10))

class PrayerScheduleSchema(PrayerScheduleInputSchema):
    """Schema for serializing a stored prayer schedule."""
    id = fields.Int(dump_only=True)
    isActive = fields.Bool(dump_only=True, attribute="is_active")
    createdAt = fields.DateTime(dump_only=True, attribute="created_at")
    updatedAt = fields.DateTime(dump_only=True, attribute="updated_at")

class PaginationSchema(Schema):
    page = fields.Int(required=True)
    limit = fields.Int(required=True)
    total = fields.Int(required=True)
    pages = fields.Int(required=True)

class PrayerScheduleListSchema(Schema):
    success = fields.Bool(required=True)
    data = fields.List(fields.Nested(PrayerScheduleSchema), required=True)
    pagination = fields.Nested(PaginationSchema, required=True)

class PrayerScheduleSavedSchema(Schema):
    success = fields.Bool(required=True)
    message = fields.Str(required=True)
    data = fields.Nested(PrayerScheduleSchema, required=True)

class PrayerListArgsSchema(Schema):
    page = fields.Int(load_default=1, validate=validate.Range(min=1))
    limit = fields.Int(validate=validate.Range(min=1))

class CurrentPrayerArgsSchema(Schema):
    # Optional 12-hour clock value (e.g. "7:20pm") used instead of "now"
    at = fields.Str()

class CurrentPrayerSchema(Schema):
    currentPrayer = fields.Str(required=True)
    nextPrayer = fields.Str(required=True)
    minutesUntilNext = fields.Int(required=True)
    today = fields.Nested(PrayerScheduleSchema, required=True)

class CurrentPrayerResponseSchema(Schema):
    success = fields.Bool(required=True)
    data = fields.Nested(CurrentPrayerSchema, required=True)

class HealthSchema(Schema):
    status = fields.Str(required=True)
    timestamp = fields.Str(required=True)
    uptime = fields.Float(required=True)

class ApiIndexSchema(Schema):
    message = fields.Str(required=True)
    version = fields.Str(required=True)
    endpoints = fields.Dict(keys=fields.Str(), values=fields.Str(), required=True)
