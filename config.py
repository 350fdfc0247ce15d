"""Environment-based configuration."""

import os
import re

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from openweathermap.client import API_BASE

API_KEY_PATTERN = re.compile(r"[a-f0-9]{32}")


class ConfigError(Exception):
    """Raised when required configuration is missing or malformed."""

    pass


class Settings(BaseModel):
    """OpenWeatherMap credentials and runtime options."""

    api_key: str
    base_url: str = API_BASE
    timeout: float = 10.0
    log_level: str = "INFO"

    @field_validator("api_key")
    @classmethod
    def check_api_key(cls, value: str) -> str:
        if not API_KEY_PATTERN.fullmatch(value):
            raise ValueError("Invalid API key format. It should be a 32-character hexadecimal string.")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        return value.upper()


def load_settings() -> Settings:
    """Load settings from the environment (and a ``.env`` file if present)."""
    load_dotenv()

    api_key = os.environ.get("OWM_API_KEY")
    if not api_key:
        raise ConfigError("OWM_API_KEY is not set.")

    try:
        return Settings(
            api_key=api_key,
            base_url=os.getenv("OWM_BASE_URL", API_BASE),
            timeout=os.getenv("OWM_TIMEOUT", "10"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
    except ValidationError as e:
        messages = "; ".join(err["msg"].removeprefix("Value error, ") for err in e.errors())
        raise ConfigError(messages) from e
