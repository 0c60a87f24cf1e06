import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))

class Config:
    # Secrets
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")

    # SQLite database file stored next to the app as hotel_bookings.db
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        "sqlite:///" + os.path.join(BASE_DIR, "hotel_bookings.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Runtime mode: "production" or "development"
    APP_ENV = os.getenv("APP_ENV", "production").strip().lower()

    # Echo raw error messages in responses (development only)
    EXPOSE_ERROR_DETAIL = APP_ENV == "development"

    # Pagination
    BOOKINGS_DEFAULT_PAGE_LIMIT = int(os.getenv("BOOKINGS_DEFAULT_PAGE_LIMIT", "10"))
    BOOKINGS_MAX_PAGE_LIMIT = int(os.getenv("BOOKINGS_MAX_PAGE_LIMIT", "100"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Basic app settings
    DEBUG = False


class DevelopmentConfig(Config):
    APP_ENV = "development"
    EXPOSE_ERROR_DETAIL = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    APP_ENV = "testing"
    EXPOSE_ERROR_DETAIL = False
    LOG_LEVEL = "WARNING"


CONFIG_BY_ENV = {
    "production": Config,
    "development": DevelopmentConfig,
    "testing": TestingConfig,
}
