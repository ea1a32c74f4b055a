"""
Error hierarchy for the StreetCats backend.

Every failure the domain and application layers raise is a StreetCatsError
carrying one ErrorCode. The API layer maps each code to an HTTP status in a
single table, so the set of codes below is closed: adding a code means adding
its status mapping too.
"""

# Standard library imports
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Client-visible error codes"""
    MISSING_TOKEN = "MissingToken"
    MALFORMED_TOKEN = "MalformedToken"
    EXPIRED = "Expired"
    UNKNOWN_USER = "UnknownUser"
    INVALID_CREDENTIALS = "InvalidCredentials"
    DUPLICATE_EMAIL = "DuplicateEmail"
    VALIDATION = "ValidationError"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    UPLOAD_TOO_LARGE = "UploadTooLarge"
    INTERNAL = "InternalError"


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class StreetCatsError(Exception):
    """Base exception for all StreetCats errors."""

    code: ErrorCode = ErrorCode.INTERNAL
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details or {}


class InternalError(StreetCatsError):
    """Raised for failures the client cannot act on."""
    pass


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class AuthenticationError(StreetCatsError):
    """Base for every failure that leaves the request unauthenticated."""
    pass


class MissingTokenError(AuthenticationError):
    code = ErrorCode.MISSING_TOKEN
    default_message = "Access denied. Authorization token is missing."


class TokenError(AuthenticationError):
    """Failures raised by token verification. Only the two subclasses exist."""
    pass


class MalformedTokenError(TokenError):
    code = ErrorCode.MALFORMED_TOKEN
    default_message = "Invalid token. Use: Authorization: Bearer <token>"


class ExpiredTokenError(TokenError):
    code = ErrorCode.EXPIRED
    default_message = "Token expired. Please log in again."


class UnknownUserError(AuthenticationError):
    code = ErrorCode.UNKNOWN_USER
    default_message = "Invalid token. User not found."


class InvalidCredentialsError(AuthenticationError):
    code = ErrorCode.INVALID_CREDENTIALS
    default_message = "Invalid email or password"


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class DuplicateEmailError(StreetCatsError):
    code = ErrorCode.DUPLICATE_EMAIL
    default_message = "Email already registered"


class InvalidInputError(StreetCatsError):
    code = ErrorCode.VALIDATION
    default_message = "Invalid input"


class UploadTooLargeError(StreetCatsError):
    code = ErrorCode.UPLOAD_TOO_LARGE
    default_message = "Uploaded file is too large"


class ForbiddenError(StreetCatsError):
    code = ErrorCode.FORBIDDEN
    default_message = "Not authorized to modify this resource"


class NotFoundError(StreetCatsError):
    code = ErrorCode.NOT_FOUND
    default_message = "Resource not found"
