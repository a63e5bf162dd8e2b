"""
Custom Exceptions
=================

Defines custom exception classes for Smart File Insights.
All exceptions include error codes for programmatic handling.

The insight engine itself never raises; these exceptions belong to the
configuration, preferences and command-line boundaries.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Error codes for programmatic error handling."""

    # General errors (1000-1099)
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001
    FILE_NOT_FOUND = 1002

    # Record errors (1100-1199)
    INVALID_RECORDS = 1100
    MALFORMED_JSON = 1101

    # Preference errors (1200-1299)
    PREFERENCES_LOAD_FAILED = 1200
    PREFERENCES_SAVE_FAILED = 1201


class FileInsightsError(Exception):
    """Base exception for all Smart File Insights errors.

    Attributes:
        message: Human-readable error message.
        error_code: Programmatic error code.
        details: Additional error context.
        cause: Original exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[dict] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return a formatted error string."""
        result = f"[{self.error_code.name}] {self.message}"
        if self.details:
            result += f" | Details: {self.details}"
        if self.cause:
            result += f" | Caused by: {type(self.cause).__name__}: {self.cause}"
        return result

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }


class ConfigurationError(FileInsightsError):
    """Raised when there's a configuration problem.

    Examples:
        - Unknown naming convention
        - Non-positive list limits
        - Importance threshold outside the score range
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected_type: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        if expected_type:
            details["expected_type"] = expected_type
        super().__init__(
            message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details=details,
            **kwargs
        )


class RecordError(FileInsightsError):
    """Raised when a file listing handed to the CLI cannot be read.

    Examples:
        - Input is not valid JSON
        - Top-level value is not a list of records
        - Input file does not exist
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.INVALID_RECORDS,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if source:
            details["source"] = source
        super().__init__(
            message,
            error_code=error_code,
            details=details,
            **kwargs
        )


class PreferencesError(FileInsightsError):
    """Raised when user preferences cannot be read or written."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.PREFERENCES_LOAD_FAILED,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if path:
            details["path"] = path
        super().__init__(
            message,
            error_code=error_code,
            details=details,
            **kwargs
        )
