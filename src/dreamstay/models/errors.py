"""Standard error codes for the booking service.

Every failure that crosses the HTTP boundary is expressed as one of these
codes so clients get a stable `error_code` plus a human-readable message and
recovery hint.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard error codes."""

    # Booking error codes (ERR_001-ERR_005)
    ROOM_NOT_FOUND = "ERR_001"
    ROOM_UNAVAILABLE = "ERR_002"
    BOOKING_NOT_FOUND = "ERR_003"
    UNAUTHORIZED = "ERR_004"
    AVAILABILITY_RESTORE_FAILED = "ERR_005"

    # Authentication error codes (ERR_AUTH_001-ERR_AUTH_004)
    AUTH_REQUIRED = "ERR_AUTH_001"
    TOKEN_INVALID = "ERR_AUTH_002"
    SESSION_EXPIRED = "ERR_AUTH_003"
    USER_MISMATCH = "ERR_AUTH_004"

    # Storage error codes
    STORE_UNAVAILABLE = "ERR_STORE_001"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    # Booking errors
    ErrorCode.ROOM_NOT_FOUND: "Room not found",
    ErrorCode.ROOM_UNAVAILABLE: "The room is already booked",
    ErrorCode.BOOKING_NOT_FOUND: "Booking not found",
    ErrorCode.UNAUTHORIZED: "You can only manage your own bookings",
    ErrorCode.AVAILABILITY_RESTORE_FAILED: (
        "Booking was cancelled but the room could not be released"
    ),
    # Authentication errors
    ErrorCode.AUTH_REQUIRED: "Authentication required to perform this action",
    ErrorCode.TOKEN_INVALID: "The access token is invalid",
    ErrorCode.SESSION_EXPIRED: "The access token has expired",
    ErrorCode.USER_MISMATCH: "User identity does not match the resource owner",
    # Storage errors
    ErrorCode.STORE_UNAVAILABLE: "The booking store is temporarily unavailable",
}

# Recovery suggestions for clients
ERROR_RECOVERY: dict[ErrorCode, str] = {
    # Booking error recovery
    ErrorCode.ROOM_NOT_FOUND: "Check the room ID using GET /rooms",
    ErrorCode.ROOM_UNAVAILABLE: "Choose another room from GET /rooms",
    ErrorCode.BOOKING_NOT_FOUND: "Check the booking ID or list your bookings",
    ErrorCode.UNAUTHORIZED: "Sign in as the user who made the booking",
    ErrorCode.AVAILABILITY_RESTORE_FAILED: "No action needed, the room will be repaired",
    # Authentication error recovery
    ErrorCode.AUTH_REQUIRED: "Request a token with POST /jwt",
    ErrorCode.TOKEN_INVALID: "Sign in again with POST /jwt",
    ErrorCode.SESSION_EXPIRED: "Sign in again with POST /jwt",
    ErrorCode.USER_MISMATCH: "Sign in with the email that owns this resource",
    # Storage error recovery
    ErrorCode.STORE_UNAVAILABLE: "Please try again later",
}


class ErrorResponse(BaseModel):
    """Standard error body returned by the API."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ErrorResponse":
        """Create an ErrorResponse from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            An ErrorResponse with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class BookingError(Exception):
    """Exception raised by booking operations.

    Caught by the API exception handlers and converted to an ErrorResponse.
    """

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    def to_error_response(self) -> ErrorResponse:
        """Convert this exception to an ErrorResponse."""
        return ErrorResponse.from_code(self.code, self.details)


class StoreUnavailableError(BookingError):
    """The storage backend failed or timed out.

    Carries only the logical operation name; connection details stay in logs.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(ErrorCode.STORE_UNAVAILABLE, {"operation": operation})
