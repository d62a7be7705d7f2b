"""
Core infrastructure: errors, events, configuration and logging.
"""
from .errors import ArgumentErrorReason, ArgumentNoneError, InvalidArgumentError
from .events import Signal
from .config import AppConfig, ConfigManager, LoggingSettings, NotificationSettings
from .logging import setup_logging

__all__ = [
    "ArgumentErrorReason",
    "ArgumentNoneError",
    "InvalidArgumentError",
    "Signal",
    "AppConfig",
    "ConfigManager",
    "LoggingSettings",
    "NotificationSettings",
    "setup_logging",
]
