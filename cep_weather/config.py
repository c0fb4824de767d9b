"""Process configuration loaded from environment variables."""

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Runtime settings for the service and its upstream APIs."""

    weather_api_key: str = ""
    viacep_base_url: str = "https://viacep.com.br/ws"
    weather_api_base_url: str = "http://api.weatherapi.com/v1"
    http_timeout_s: float = 10.0
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_case_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment.

        Returns:
            A Settings model with defaults for any unset variable.
        """
        env = {
            "weather_api_key": os.getenv("WEATHER_API_KEY"),
            "viacep_base_url": os.getenv("VIACEP_BASE_URL"),
            "weather_api_base_url": os.getenv("WEATHER_API_BASE_URL"),
            "http_timeout_s": os.getenv("HTTP_TIMEOUT_S"),
            "host": os.getenv("HOST"),
            "port": os.getenv("PORT"),
            "log_level": os.getenv("LOG_LEVEL"),
        }
        return cls(**{key: value for key, value in env.items() if value is not None})


@lru_cache
def get_settings() -> Settings:
    """Return the cached process settings."""
    return Settings.from_env()
