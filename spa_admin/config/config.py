"""
Configuration module for the application.

Provides type-safe settings using Pydantic.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spa_admin.infrastructure.logger.interfaces import ILoggingConfig


class LoggingConfig(BaseSettings):
    """Configuration for the logging system."""

    app_name: str = "Spa Admin"
    debug: bool = True  # if True then color console render, else json render
    log_level: str = "INFO"
    enable_file_logging: bool = False
    logs_dir: Path = Path("logs")
    logs_file_name: str = "spa_admin.log"
    max_file_size_mb: int = 10
    backup_count: int = 5

    @field_validator("log_level", mode="after")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper()


class SeedConfig(BaseSettings):
    """Where the store's starting data comes from."""

    seed_file: Path | None = Field(
        default=None,
        description="Optional JSON seed with clients/appointments/...",
    )
    load_demo_data: bool = Field(
        default=True,
        description="Start from the built-in demo data",
    )


class DashboardConfig(BaseSettings):
    """Presentation parameters for the console summary."""

    business_name: str = "Claudia Martínez Estética Spa"
    currency_symbol: str = "$"
    recent_transactions_limit: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Ledger rows shown in the summary",
    )


class AppConfig(BaseSettings):
    """Main application configuration."""

    seed: SeedConfig = Field(default_factory=SeedConfig)
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)
    logger: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    @property
    def logger_adapter(self) -> ILoggingConfig:
        return self.logger


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()
