import os
from dotenv import load_dotenv

load_dotenv()


def _int_list(name, default):
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [int(x) for x in raw.split(",") if x.strip()]


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "billion2026")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///millionaire.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Optional engine options for better PostgreSQL behavior under concurrency
    DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 5))
    DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", 10))
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_size": DB_POOL_SIZE,
        "max_overflow": DB_MAX_OVERFLOW,
    }

    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    QUESTIONS_DIR = os.getenv("QUESTIONS_DIR", os.path.join(BASE_DIR, "questions"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Prize per level and the levels whose prize survives a later failure
    PRIZES = _int_list("PRIZES", [
        100, 200, 300, 500, 1000, 2000, 4000, 8000,
        16000, 32000, 64000, 125000, 250000, 500000, 1000000,
    ])
    FIREPROOF_LEVELS = _int_list("FIREPROOF_LEVELS", [4, 9, 14])


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_LEVEL = "WARNING"
