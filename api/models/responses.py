"""
API Response Models

Pydantic models for API response serialization.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "comment-fixture-api"
    version: str = "v1"


class Comment(BaseModel):
    """A stored comment. Extra fields sent by clients are echoed back."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Comment identifier")
    name: str = Field(..., description="Author name")
    text: str = Field(..., description="Comment text")


class CommentListResponse(BaseModel):
    """Response for GET /."""

    method: str = "GET"
    comments: list[Comment] = Field(default_factory=list)


class CommentCreatedResponse(BaseModel):
    """Response for POST /."""

    method: str = "POST"
    comment: Comment


class ErrorDetail(BaseModel):
    """Detailed error information."""

    message: str = Field(..., description="Human-readable error message")
    code: Optional[str] = Field(default=None, description="Error code")


class MethodErrorResponse(BaseModel):
    """Error payload, tagged with the request method."""

    method: str
    error: ErrorDetail
