# storefront/config.py
import os
from dotenv import load_dotenv

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(BASE_DIR, ".env"))


def _env(key: str, default=None):
    v = os.getenv(key)
    return v if v not in (None, "", "None") else default


def _env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v in (None, "", "None"):
        return default
    return str(v).strip().lower() in ("1", "true", "t", "yes", "y", "on")


def _env_list(key: str, default: str = "") -> list[str]:
    raw = _env(key, default) or ""
    return [part.strip() for part in raw.split(",") if part.strip()]


def _resolve_database_uri(db_url: str | None) -> str | None:
    """
    Normalize DATABASE_URL for SQLAlchemy.
    Returns None when nothing is configured; create_app treats that as fatal.
    """
    if not db_url:
        return None

    # Heroku / Cloud Run style URLs still use the legacy scheme
    if db_url.startswith("postgres://"):
        return "postgresql://" + db_url[len("postgres://"):]

    if db_url.startswith("sqlite:///"):
        raw_path = db_url.replace("sqlite:///", "", 1)
        if not raw_path:
            return db_url
        if not os.path.isabs(raw_path):
            raw_path = os.path.join(BASE_DIR, raw_path)
        db_path = os.path.normpath(raw_path)
        os.makedirs(os.path.dirname(db_path), exist_ok=True)
        return "sqlite:///" + db_path.replace("\\", "/")

    return db_url


class Config:
    SECRET_KEY = _env("SECRET_KEY", "dev-please-change-me")
    # admin sessions must not ride along on cross-site requests
    SESSION_COOKIE_SAMESITE = _env("SESSION_COOKIE_SAMESITE", "Strict")
    SESSION_COOKIE_HTTPONLY = True

    SQLALCHEMY_DATABASE_URI = _resolve_database_uri(_env("DATABASE_URL"))
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Startup schema setup: Alembic upgrade to head by default, plain
    # create_all only when asked for (tests, throwaway databases).
    AUTO_MIGRATE = _env_bool("AUTO_MIGRATE", True)
    AUTO_CREATE_TABLES = _env_bool("AUTO_CREATE_TABLES", False)

    PORT = int(_env("PORT", 8080))
    CORS_ORIGINS = _env_list("CORS_ORIGINS", "*")

    BCRYPT_LOG_ROUNDS = int(_env("BCRYPT_LOG_ROUNDS", 12))
    ADMIN_USERNAME = _env("ADMIN_USERNAME")
    ADMIN_PASSWORD = _env("ADMIN_PASSWORD")
