"""
Error Taxonomy

Purpose: Standard error codes and exceptions for the comment client.
Serialization problems are raised to the caller; transport failures are
reported on the response (see core.http.models.HttpResponse) instead.
"""

from typing import Any


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the client."""

    # Body encoding / decoding
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"
    DESERIALIZATION_ERROR = "DESERIALIZATION_ERROR"

    # Transport
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    HTTP_ERROR_STATUS = "HTTP_ERROR_STATUS"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Request construction
    UNSUPPORTED_METHOD = "UNSUPPORTED_METHOD"


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class CommentClientException(Exception):
    """
    Base exception for all comment client errors.

    Carries a stable code and structured details alongside the message.
    """

    def __init__(
        self,
        message: str,
        code: str = "COMMENT_CLIENT_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Structured form, used by the CLI's JSON output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class SerializationError(CommentClientException):
    """Raised when a request body cannot be converted to JSON text."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.SERIALIZATION_ERROR,
            details=details,
        )


class DeserializationError(CommentClientException):
    """Raised when a response body is not valid JSON but decoding was requested."""

    def __init__(
        self,
        message: str,
        body: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if body is not None:
            # Keep the excerpt short, bodies can be arbitrarily large
            full_details["body_excerpt"] = body[:200]
        super().__init__(
            message=message,
            code=ErrorCodes.DESERIALIZATION_ERROR,
            details=full_details,
        )


class UnsupportedMethodError(CommentClientException):
    """Raised when a request method name does not map to a known HttpMethod."""

    def __init__(self, method: str) -> None:
        super().__init__(
            message=f"Unsupported HTTP method: {method}",
            code=ErrorCodes.UNSUPPORTED_METHOD,
            details={"method": method},
        )
