import os
from dotenv import load_dotenv

# Load .env file
dotenv_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path)
else:
    print("Warning: .env file not found. Using defaults or environment variables.")

class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'a_default_fallback_secret_key_for_development_only'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', "INFO")

    # Bearer token validation. Tokens are issued elsewhere with the same secret.
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY') or SECRET_KEY
    JWT_ALGORITHM = os.environ.get('JWT_ALGORITHM', 'HS256')

    # Sentry Configuration
    SENTRY_DSN = os.environ.get('SENTRY_DSN')

    # Origins allowed to call the API from a browser
    CORS_ORIGINS = os.environ.get('CLIENT_URL') or "http://localhost:3000"

    # Prayer Schedule Configuration
    # IANA timezone used to read "now" when resolving the current prayer.
    PRAYER_TIMEZONE = os.environ.get('PRAYER_TIMEZONE', 'UTC')
    PRAYER_LIST_DEFAULT_LIMIT = int(os.environ.get('PRAYER_LIST_DEFAULT_LIMIT', 30))
    PRAYER_LIST_MAX_LIMIT = int(os.environ.get('PRAYER_LIST_MAX_LIMIT', 100))

    API_VERSION_STRING = "1.0.0"

class DevelopmentConfig(Config):
    FLASK_ENV = 'development'
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///hingad-dev.db'
    LOG_LEVEL = "DEBUG"

class ProductionConfig(Config):
    FLASK_ENV = 'production'
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') # Explicitly set for production

class TestingConfig(Config):
    TESTING = True
    # Use an in-memory SQLite database for tests to ensure speed and isolation.
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    RATELIMIT_ENABLED = False # Disable rate limiting for tests
    SECRET_KEY = 'test-secret-key'
    JWT_SECRET_KEY = 'test-jwt-secret-key-that-is-long-enough-for-hs256'
    JWT_ALGORITHM = 'HS256'
    PRAYER_TIMEZONE = 'UTC'

config_by_name = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
