"""Configuration package."""
from .manager import ConfigurationManager
from .schemas import AppConfig, DemoConfig, LogDestination, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "ConfigurationManager",
    "DemoConfig",
    "LogDestination",
    "LoggingConfig",
    "LogLevel",
]
