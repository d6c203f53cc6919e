"""Core configuration module."""

import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from apscheduler.triggers.cron import CronTrigger
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        case_sensitive=False,
        extra="ignore",
    )

    # API
    api_title: str = "Job Board API"
    api_version: str = "0.1.0"
    api_prefix: str = "/api/v1"
    environment: str = os.getenv("ENVIRONMENT", "development")
    testing: bool = os.getenv("TESTING", "false").lower() == "true"

    # Database
    database_url: str = "sqlite:///./jobboard.db"
    seed_sample_data: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str | None = None  # "json", "console", or None (auto-detect based on environment)

    # CORS
    cors_origins: list[str] | str = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
    ]

    # Job status scheduler
    job_scheduler_enabled: bool = True
    job_scheduler_run_on_start: bool = True
    job_scheduler_cron_expression: str = "0 1 * * *"
    job_scheduler_timezone: str = "UTC"
    job_scheduler_interval_seconds: Optional[int] = None

    # Celery
    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str = "redis://localhost:6379/1"
    celery_beat_enabled: bool = False

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        """Allow comma-separated strings or JSON-like lists; tolerate empty."""
        if value is None or value == "":
            return []
        if isinstance(value, str):
            if value.strip().startswith("["):
                import json

                try:
                    parsed = json.loads(value)
                except ValueError:
                    return []
                return parsed if isinstance(parsed, list) else []
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("cors_origins", mode="after")
    @classmethod
    def validate_cors_origins(cls, value: list[str]) -> list[str]:
        """Reject wildcard or malformed origins in production."""
        env = os.getenv("ENVIRONMENT", "development").lower()
        is_production = env == "production"

        if is_production and not value:
            raise ValueError(
                "CORS_ORIGINS must be configured for production deployments. "
                "Set CORS_ORIGINS to a comma-separated list of allowed origins."
            )

        for origin in value:
            if origin == "*":
                if is_production:
                    raise ValueError(
                        "Wildcard '*' CORS origin is not allowed in production. "
                        "Specify explicit origins instead."
                    )
                continue
            if not origin.startswith(("http://", "https://")):
                raise ValueError(
                    f"Invalid CORS origin '{origin}': must start with http:// or https://"
                )
        return value

    @field_validator("job_scheduler_cron_expression")
    @classmethod
    def validate_cron_expression(cls, value: str) -> str:
        """Require a standard five-field crontab expression."""
        expression = value.strip()
        if not expression:
            raise ValueError("JOB_SCHEDULER_CRON_EXPRESSION cannot be empty")
        if len(expression.split()) != 5:
            raise ValueError(
                f"Invalid cron expression: {value}. "
                "Must have 5 parts (minute hour day month weekday)"
            )
        try:
            CronTrigger.from_crontab(expression)
        except ValueError as exc:
            raise ValueError(f"Invalid cron expression: {value}. {exc}") from exc
        return expression

    @field_validator("job_scheduler_timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("job_scheduler_interval_seconds")
    @classmethod
    def validate_interval(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("JOB_SCHEDULER_INTERVAL_SECONDS must be a positive number of seconds")
        return value

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str | None) -> str | None:
        if value in (None, ""):
            return None
        normalized = value.lower()
        if normalized not in {"json", "console"}:
            raise ValueError("LOG_FORMAT must be 'json' or 'console'")
        return normalized


settings = Settings()
