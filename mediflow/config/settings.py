from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pytz import UnknownTimeZoneError, timezone


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Values are loaded automatically from environment variables and `.env`.
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "MediFlow Reminders API"
    PROJECT_DESCRIPTION: str = "Clinic console API with appointment reminder scheduling"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")
    CORS_ORIGINS: Annotated[list[str], NoDecode] = Field(default=["*"], description="Allowed CORS origins")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    # Clinic
    CLINIC_NAME: str = Field("MediFlow Pro Clinic", description="Clinic name shown in messages")
    CLINIC_TIMEZONE: str = Field("America/New_York", description="Timezone of appointment dates and times")

    # Reminder scheduling
    REMINDERS_ENABLED: bool = Field(True, description="Start the reminder timer on application startup")
    REMINDER_MISFIRE_GRACE_SECONDS: int = Field(
        300, description="Seconds a late trigger may still fire (event loop stalls, suspended hosts)"
    )

    # Simulated transport
    EMAIL_SEND_LATENCY_SECONDS: float = Field(1.0, description="Simulated email gateway latency")
    SMS_SEND_LATENCY_SECONDS: float = Field(0.5, description="Simulated SMS gateway latency")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("CLINIC_TIMEZONE")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            timezone(value)
        except UnknownTimeZoneError as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @field_validator("EMAIL_SEND_LATENCY_SECONDS", "SMS_SEND_LATENCY_SECONDS")
    @classmethod
    def validate_latency(cls, value: float) -> float:
        if value < 0:
            raise ValueError("Latency cannot be negative")
        return value


_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached settings instance.
    Avoids reading the environment more than once.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
