# devconnector/config.py

import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv

from devconnector.core.errors import ConfigurationError


# -------------------------------
# Defaults
# -------------------------------

DEFAULT_DATABASE_URL = "sqlite:///./data/app.db"
DEFAULT_ALGORITHM = "HS256"
DEFAULT_EXPIRES_SECONDS = 360000  # 100 hours
DEFAULT_BCRYPT_ROUNDS = 10

GRAVATAR_SIZE = 200
GRAVATAR_RATING = "pg"
GRAVATAR_DEFAULT = "mm"


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, loaded once at startup and passed
    explicitly to the components that need it.
    """
    jwt_secret_key: str
    jwt_algorithm: str = DEFAULT_ALGORITHM
    jwt_expires_seconds: int = DEFAULT_EXPIRES_SECONDS
    database_url: str = DEFAULT_DATABASE_URL
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    gravatar_size: int = GRAVATAR_SIZE
    gravatar_rating: str = GRAVATAR_RATING
    gravatar_default: str = GRAVATAR_DEFAULT
    log_level: str = "INFO"

    def __post_init__(self):
        if not self.jwt_secret_key:
            raise ConfigurationError("JWT_SECRET_KEY must be set")
        if self.jwt_expires_seconds <= 0:
            raise ConfigurationError("JWT_EXPIRES_SECONDS must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"LOG_LEVEL {self.log_level!r} is not a logging level")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def load_settings() -> Settings:
    """
    Reads settings from the environment (and a local .env file, if any).
    Raises ConfigurationError when the signing key is missing.
    """
    load_dotenv()

    return Settings(
        jwt_secret_key=os.getenv("JWT_SECRET_KEY", ""),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", DEFAULT_ALGORITHM),
        jwt_expires_seconds=_int_env("JWT_EXPIRES_SECONDS", DEFAULT_EXPIRES_SECONDS),
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        bcrypt_rounds=_int_env("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS),
        gravatar_size=_int_env("GRAVATAR_SIZE", GRAVATAR_SIZE),
        gravatar_rating=os.getenv("GRAVATAR_RATING", GRAVATAR_RATING),
        gravatar_default=os.getenv("GRAVATAR_DEFAULT", GRAVATAR_DEFAULT),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
