"""
API Request Models

Pydantic models for request validation.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CommentPayload(BaseModel):
    """Request body for POST / and PUT /."""

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = Field(default=None, description="Ignored on create; assigned by the server")
    name: str = Field(..., description="Author name")
    text: str = Field(..., description="Comment text")
