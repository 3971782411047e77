"""
Custom exceptions and error handling for the trip schedule and fare engine.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda functions and client communication.

Usage:
    from tripcore.errors import StorageWriteError, ErrorCode

    raise StorageWriteError("put_item rejected", code=ErrorCode.STORAGE_WRITE_FAILED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Storage errors
    STORAGE_READ_FAILED = "STORAGE_READ_FAILED"
    STORAGE_WRITE_FAILED = "STORAGE_WRITE_FAILED"

    # Schedule errors
    INVALID_SCHEDULE = "INVALID_SCHEDULE"
    MISSING_OUTBOUND_TIME = "MISSING_OUTBOUND_TIME"
    MISSING_RETURN_TIME = "MISSING_RETURN_TIME"

    # Fare errors
    INVALID_FARE_INPUT = "INVALID_FARE_INPUT"

    # Progress errors
    UNKNOWN_STEP = "UNKNOWN_STEP"

    # Request errors
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.STORAGE_READ_FAILED: "Your saved schedule could not be loaded.",
    ErrorCode.STORAGE_WRITE_FAILED: "Your schedule could not be saved. Please try again.",
    ErrorCode.INVALID_SCHEDULE: "Your schedule contains invalid information. Please check and try again.",
    ErrorCode.MISSING_OUTBOUND_TIME: "Choose a departure time for every customized day.",
    ErrorCode.MISSING_RETURN_TIME: "Choose a return time for every customized day.",
    ErrorCode.INVALID_FARE_INPUT: "The trip details are invalid. Please check the route and try again.",
    ErrorCode.UNKNOWN_STEP: "Unknown booking step.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TripCoreError(Exception):
    """Base exception for all trip engine errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class StorageReadError(TripCoreError):
    """A persisted record is missing, unreadable or corrupt."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORAGE_READ_FAILED):
        super().__init__(message, code)


class StorageWriteError(TripCoreError):
    """The key-value backend rejected a write."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORAGE_WRITE_FAILED):
        super().__init__(message, code)


class InvalidInputError(TripCoreError):
    """Caller supplied a value outside the accepted domain."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_REQUEST):
        super().__init__(message, code)


class ScheduleValidationError(TripCoreError):
    """Schedule edit failed validation. `field` names the offending input, e.g. ``mon-outboundTime``."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_SCHEDULE, field: str | None = None):
        self.field = field
        super().__init__(message, code)
