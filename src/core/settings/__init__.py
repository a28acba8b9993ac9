from .base import (DatabaseSettings, FixtureSettings, LoggingSettings,
                   PathSettings, Settings, settings)

__all__ = [
    "Settings",
    "PathSettings",
    "LoggingSettings",
    "FixtureSettings",
    "DatabaseSettings",
    "settings",
]
