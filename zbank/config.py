import os
from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


class Config:
    ZBANK_ENV = os.getenv("ZBANK_ENV", "development")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///zbank.db")
    SQLALCHEMY_ECHO = _env_flag("SQLALCHEMY_ECHO", "false")
    SEED_SAMPLE_DATA = _env_flag("SEED_SAMPLE_DATA", "false" if ZBANK_ENV == "production" else "true")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.getenv("LOG_FORMAT", "standard")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    PORT = int(os.getenv("PORT", "5000"))
