"""API request and response models."""

from api.models.requests import CommentPayload
from api.models.responses import (
    HealthResponse,
    Comment,
    CommentListResponse,
    CommentCreatedResponse,
    ErrorDetail,
    MethodErrorResponse,
)

__all__ = [
    "CommentPayload",
    "HealthResponse",
    "Comment",
    "CommentListResponse",
    "CommentCreatedResponse",
    "ErrorDetail",
    "MethodErrorResponse",
]
