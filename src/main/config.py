"""
Application Settings - Main Layer

Pydantic Settings for the SPI forecast service. Values come from environment
variables, a ``.env`` file, or the defaults below.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.consts import (
    DEFAULT_PREDICTION_SERVICE_URL,
    DEFAULT_PREDICTION_TIMEOUT_SECONDS,
)


class AppInfoSettings(BaseSettings):
    """Service metadata and HTTP server options."""

    title: str = Field(default="SPI Forecast Service", description="API title")
    description: str = Field(
        default="Societal Pressure Index timeline with forecasts "
        "from an external prediction service",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("APP_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("APP_BUILD_TIME", "BUILD_TIME"),
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class PredictionServiceSettings(BaseSettings):
    """Connection settings of the external prediction service."""

    base_url: str = Field(
        default=DEFAULT_PREDICTION_SERVICE_URL,
        description="Base URL; '/predict' is appended for forecasts",
        validation_alias=AliasChoices("ML_API_URL", "NEXT_PUBLIC_ML_API"),
    )
    timeout_seconds: float = Field(
        default=DEFAULT_PREDICTION_TIMEOUT_SECONDS,
        ge=1.0,
        le=120.0,
        description="Upper bound for one forecast request",
        validation_alias=AliasChoices("ML_API_TIMEOUT_SECONDS"),
    )
    health_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout of each health probe",
        validation_alias=AliasChoices("ML_API_HEALTH_TIMEOUT_SECONDS"),
    )

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")


class ForecastSettings(BaseSettings):
    """Snapshot synthesis options."""

    clamp_negative_debt: bool = Field(
        default=False,
        description="Clamp synthesized debt at zero instead of passing it through",
    )

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    app: AppInfoSettings = Field(default_factory=AppInfoSettings)
    prediction: PredictionServiceSettings = Field(
        default_factory=PredictionServiceSettings
    )
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Application settings factory.

    Patched in tests to provide settings for a specific environment.
    """
    return AppSettings()
