# hingad/models.py

from datetime import datetime
from . import db # Import the db object defined in hingad/__init__.py


class User(db.Model):
    """Account that bearer tokens are issued for. Only read by the auth guard."""
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=True)

    # Possible values: 'USER', 'ADMIN'
    role = db.Column(db.String(20), nullable=False, default='USER')

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f'<User {self.email} - {self.role}>'


class PrayerSchedule(db.Model):
    """
    The daily prayer schedule shared by everyone.

    The five boundaries are stored exactly as the administrator entered them
    (12-hour clock values such as "7:20pm") and are handed back for display.
    Only one row is active at a time; writes replace that row wholesale.
    """
    __tablename__ = 'prayer_schedule'
    __table_args__ = (
        # At most one active schedule, enforced by the database
        db.Index(
            'uq_prayer_schedule_single_active', 'is_active', unique=True,
            sqlite_where=db.text('is_active = 1'),
            postgresql_where=db.text('is_active'),
        ),
    )

    id = db.Column(db.Integer, primary_key=True)

    fajr = db.Column(db.String(10), nullable=False)
    dhuhr = db.Column(db.String(10), nullable=False)
    asr = db.Column(db.String(10), nullable=False)
    maghrib = db.Column(db.String(10), nullable=False)
    isha = db.Column(db.String(10), nullable=False)

    is_active = db.Column(db.Boolean, default=True, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def boundary_times(self):
        """Returns the textual boundaries keyed by lowercase prayer name."""
        return {
            'fajr': self.fajr,
            'dhuhr': self.dhuhr,
            'asr': self.asr,
            'maghrib': self.maghrib,
            'isha': self.isha,
        }

    def __repr__(self):
        return f'<PrayerSchedule ID:{self.id} Active:{self.is_active}>'
