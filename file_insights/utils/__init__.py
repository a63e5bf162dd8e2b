"""Utilities module for Smart File Insights."""

from .logging_config import setup_logging, get_logger, LoggingConfig, Timer
from .exceptions import (
    ErrorCode,
    FileInsightsError,
    ConfigurationError,
    RecordError,
    PreferencesError,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "LoggingConfig",
    "Timer",
    "ErrorCode",
    "FileInsightsError",
    "ConfigurationError",
    "RecordError",
    "PreferencesError",
]
