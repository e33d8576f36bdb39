# hingad/extensions.py

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# SQLAlchemy extension
db = SQLAlchemy()

# Migrate extension (database migrations)
migrate = Migrate()

# Limiter extension (rate limiting); routes can override the defaults
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per day", "50 per hour"]
)
