# backend/tests/conftest.py

import pytest
from hingad import create_app, db as _db
from hingad.models import User, PrayerSchedule
from hingad.utils.constants import Roles
import jwt
import time

# Same secret the TestingConfig uses to validate bearer tokens
TEST_SECRET_KEY = "test-jwt-secret-key-that-is-long-enough-for-hs256"

SAMPLE_SCHEDULE = {
    "fajr": "5:00am",
    "dhuhr": "12:15pm",
    "asr": "4:30pm",
    "maghrib": "7:05pm",
    "isha": "8:20pm",
}

@pytest.fixture(scope='session')
def app():
    """Session-wide application for testing."""
    app = create_app('testing')
    app.config['JWT_SECRET_KEY'] = TEST_SECRET_KEY
    return app

@pytest.fixture(scope='function')
def db(app):
    """Function-level database setup. Creates and tears down tables for each test function."""
    with app.app_context():
        _db.create_all()

        yield _db

        _db.session.remove()
        _db.drop_all()

@pytest.fixture(scope='function')
def test_client(app, db):
    """A test client for the app, ensuring the DB is initialized."""
    return app.test_client()


def create_test_token(user_id, role, email, expires_in=3600):
    """Helper to create a JWT the way the auth service issues them."""
    payload = {
        'id': user_id,
        'email': email,
        'role': role,
        'exp': int(time.time()) + expires_in,
        'iat': int(time.time())
    }
    token = jwt.encode(payload, TEST_SECRET_KEY, algorithm="HS256")
    return {'Authorization': f'Bearer {token}'}

@pytest.fixture(scope='function')
def user_in_db(db):
    """Creates a regular user in the database and returns their object."""
    user = User(email='user@example.com', name='Regular User', role=Roles.USER)
    _db.session.add(user)
    _db.session.commit()
    return user

@pytest.fixture(scope='function')
def admin_in_db(db):
    """Creates an admin in the database and returns their object."""
    user = User(email='admin@example.com', name='Admin User', role=Roles.ADMIN)
    _db.session.add(user)
    _db.session.commit()
    return user

@pytest.fixture(scope='function')
def auth_headers_for_user(user_in_db):
    """Auth headers for a regular user."""
    return create_test_token(user_in_db.id, user_in_db.role, user_in_db.email)

@pytest.fixture(scope='function')
def auth_headers_for_admin(admin_in_db):
    """Auth headers for an admin."""
    return create_test_token(admin_in_db.id, admin_in_db.role, admin_in_db.email)

@pytest.fixture(scope='function')
def active_schedule(db):
    """Stores the sample schedule as the active one."""
    prayer_time = PrayerSchedule(is_active=True, **SAMPLE_SCHEDULE)
    _db.session.add(prayer_time)
    _db.session.commit()
    return prayer_time
