from .config import (
    AppConfig,
    DashboardConfig,
    LoggingConfig,
    SeedConfig,
    get_config,
)

__all__ = [
    "AppConfig",
    "DashboardConfig",
    "LoggingConfig",
    "SeedConfig",
    "get_config",
]
