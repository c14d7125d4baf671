"""
Custom exceptions and error handling for Logicon.

Defines application-specific exceptions with error codes so request handlers
can map failures to status codes without exposing internal details.

Usage:
    from logicon.errors import InvalidArgumentError, ErrorCode

    raise InvalidArgumentError("lat must be within [-90, 90]")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Caller errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # Data source errors
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_ARGUMENT: "Your request contains invalid parameters. Please check and try again.",
    ErrorCode.STORE_UNAVAILABLE: "Logistics data is temporarily unavailable. Please try again later.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class LogisticsError(Exception):
    """Base exception for all Logicon errors."""

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class InvalidArgumentError(LogisticsError):
    """A caller-supplied parameter is missing or malformed."""

    default_code = ErrorCode.INVALID_ARGUMENT


class StoreUnavailableError(LogisticsError):
    """The relational store could not be reached or the query failed."""

    default_code = ErrorCode.STORE_UNAVAILABLE
