"""Application configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.signal_engine import IntersectionConfig, default_config
from src.signal_engine.forecast import checkpoint_offsets


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Signal timing
    green_duration: int = Field(default=30, gt=0, le=600)
    yellow_duration: int = Field(default=5, gt=0, le=60)

    # Forecast
    forecast_interval_minutes: int = Field(default=5, gt=0)
    forecast_checkpoints: int = Field(default=6, gt=0, le=48)

    # Tick source
    tick_interval_seconds: float = Field(default=1.0, gt=0)
    auto_tick: bool = True

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"


def build_intersection_config(settings: Settings) -> IntersectionConfig:
    """Default intersection table with timing taken from settings."""
    return default_config(
        green_duration=settings.green_duration,
        yellow_duration=settings.yellow_duration,
    )


def build_forecast_offsets(settings: Settings) -> list[int]:
    return checkpoint_offsets(
        settings.forecast_interval_minutes,
        settings.forecast_checkpoints,
    )


settings = Settings()
