# backend/tests/test_app_factory.py

import pytest

from hingad import create_app
from hingad.extensions import limiter


@pytest.fixture
def rate_limited_client(mocker):
    # The limiter is shared with the session app; restore its switch afterwards
    mocker.patch.object(limiter, 'enabled', limiter.enabled)
    limited_app = create_app('testing', {'RATELIMIT_ENABLED': True})
    return limited_app.test_client()


def test_create_app_applies_config_overrides():
    app = create_app('testing', {'PRAYER_LIST_MAX_LIMIT': 10})
    assert app.config['PRAYER_LIST_MAX_LIMIT'] == 10
    assert app.config['TESTING'] is True

def test_create_app_rejects_unknown_prayer_timezone():
    with pytest.raises(ValueError, match="Mars/Olympus"):
        create_app('testing', {'PRAYER_TIMEZONE': 'Mars/Olympus'})

def test_create_app_accepts_iana_prayer_timezone():
    app = create_app('testing', {'PRAYER_TIMEZONE': 'Asia/Kolkata'})
    assert app.config['PRAYER_TIMEZONE'] == 'Asia/Kolkata'


def test_health_and_metrics_are_not_rate_limited(rate_limited_client):
    health_statuses = [rate_limited_client.get('/health').status_code for _ in range(55)]
    metrics_statuses = [rate_limited_client.get('/metrics').status_code for _ in range(55)]

    assert set(health_statuses) == {200}
    assert set(metrics_statuses) == {200}

def test_default_limits_still_apply_to_other_routes(rate_limited_client):
    statuses = [rate_limited_client.get('/').status_code for _ in range(51)]

    assert statuses[:50] == [200] * 50
    assert statuses[50] == 429
