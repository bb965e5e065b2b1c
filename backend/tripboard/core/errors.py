"""
Domain exceptions shared by the member and gallery services.

Services raise these instead of ``HTTPException`` so they stay usable
outside a request. ``tripboard.main`` registers a single handler that turns
any ``TripboardError`` into a JSON error response.

Usage:
    from tripboard.core.errors import ValidationError

    raise ValidationError("No valid fields provided")
"""
from enum import Enum

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes returned to the client."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class TripboardError(Exception):
    """Base exception for all Tripboard errors."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)


class ValidationError(TripboardError):
    """Client input is malformed or not allowed."""

    http_status = status.HTTP_400_BAD_REQUEST
    default_code = ErrorCode.VALIDATION_ERROR


class PayloadTooLarge(TripboardError):
    """Uploaded file exceeds the configured size ceiling."""

    http_status = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    default_code = ErrorCode.PAYLOAD_TOO_LARGE


class NotFound(TripboardError):
    """Targeted record does not exist."""

    http_status = status.HTTP_404_NOT_FOUND
    default_code = ErrorCode.NOT_FOUND
