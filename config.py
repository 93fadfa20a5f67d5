import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _database_url() -> str:
    url = os.getenv("POSTGRES_URL") or os.getenv("DATABASE_URL")
    if not url:
        return "sqlite:///" + os.path.join(BASE_DIR, "ip_app.db")
    # SQLAlchemy only accepts the postgresql:// scheme
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


class Config:
    SERVICE_NAME = "ip-app-api"

    # Database (Postgres in production, SQLite file for local dev)
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # Create tables + seed user when the app starts
    AUTO_INIT_DB = _env_flag("AUTO_INIT_DB", "true")

    # Seed account
    SEED_USER_EMAIL = os.getenv("SEED_USER_EMAIL", "test@test.com")
    SEED_USER_PASSWORD = os.getenv("SEED_USER_PASSWORD", "1234")
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # ipinfo.io geolocation provider; token avoids anonymous rate limits
    IPINFO_TOKEN = os.getenv("IPINFO_TOKEN")
    IPINFO_BASE_URL = os.getenv("IPINFO_BASE_URL", "https://ipinfo.io")
    IPINFO_TIMEOUT_SECONDS = float(os.getenv("IPINFO_TIMEOUT_SECONDS", "10"))

    # Server-side private range check (the front end already blocks them)
    REJECT_PRIVATE_IPS = _env_flag("REJECT_PRIVATE_IPS", "false")

    # Comma-separated list; unset means every origin is allowed
    CORS_ORIGIN = os.getenv("CORS_ORIGIN")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Basic app settings
    DEBUG = False
