# hingad/routes/main_routes.py

import datetime
import time

from flask import current_app
from flask_smorest import Blueprint
from prometheus_client import generate_latest

from ..extensions import limiter
from ..schemas import ApiIndexSchema, HealthSchema

main_bp = Blueprint('Main', __name__, url_prefix='/')

# Process start, reported by the health check
_STARTED_AT = time.monotonic()

@main_bp.route('/')
@main_bp.response(200, ApiIndexSchema)
def index():
    """
    Main endpoint for the API.
    """
    return {
        "message": "Hingad API",
        "version": current_app.config.get('API_VERSION_STRING', '1.0.0'),
        "endpoints": {
            "prayers": "/api/prayers",
            "docs": "/api/docs/swagger-ui",
            "health": "/health",
        },
    }

@main_bp.route('/health')
@limiter.exempt
@main_bp.response(200, HealthSchema)
def health():
    """Liveness check."""
    return {
        "status": "OK",
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "uptime": time.monotonic() - _STARTED_AT,
    }

@main_bp.route('/metrics')
@limiter.exempt
def metrics():
    return generate_latest(), 200, {'Content-Type': 'text/plain; version=0.0.4; charset=utf-8'}
