"""2DO — Configuration via pydantic-settings."""

from functools import lru_cache
from typing import List

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from twodo.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    APP_NAME: str = "2DO"

    # Database
    DATABASE_URL: str = "sqlite:///./2do.db"

    # Authentication
    MAX_LOGIN_ATTEMPTS: int = Field(default=3, ge=1)
    PASSWORD_SCHEMES: List[str] = ["pbkdf2_sha256"]

    # Seeded when the users table is empty; leave blank to skip
    DEFAULT_ADMIN_USERNAME: str = ""
    DEFAULT_ADMIN_PASSWORD: str = ""

    # Fatal errors are appended here
    ERROR_LOG_FILE: str = "./data/logs/errors.log"

    # Timezone
    TIMEZONE: str = "UTC"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "WARNING"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_settings() -> Settings:
    """get_settings() with validation errors raised as ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as exc:
        raise ConfigurationError("Invalid configuration", details={"error": str(exc)}) from exc
