"""Runtime configuration for the smart remote."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="SMART_REMOTE_", env_file=".env", extra="ignore")

    app_name: str = "smart-remote"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    notification_backend: str = Field(
        default="console",
        description="Where device notifications go: 'console' or 'logging'.",
    )
    demo_brightness: int = Field(default=75, ge=0, le=100)
    demo_color: str = "red"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


settings = Settings()
