"""
Comment Routes

Fixed-data comment endpoints. Nothing is persisted: GET always returns the
same two comments, POST echoes the payload with a fixed id, and PUT only
acknowledges the update.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Query, Request, Response
from pydantic import ValidationError

from api.errors import InvalidRequestError, undefined_method_response
from api.models.requests import CommentPayload
from api.models.responses import (
    Comment,
    CommentCreatedResponse,
    CommentListResponse,
    MethodErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["comments"])

SEED_COMMENTS = [
    Comment(id=100, name="Bob", text="Hello, World"),
    Comment(id=101, name="Alice", text="Hi, everyone"),
]

# Id the server reports for every created comment
CREATED_COMMENT_ID = 102

UNDEFINED_METHODS = ["PATCH", "DELETE", "OPTIONS"]


async def _read_payload(request: Request) -> CommentPayload:
    """Decode and validate a JSON comment body."""
    try:
        data: Any = await request.json()
    except ValueError as e:
        raise InvalidRequestError(f"Request body is not valid JSON: {e}")

    if not isinstance(data, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    try:
        return CommentPayload.model_validate(data)
    except ValidationError as e:
        raise InvalidRequestError(
            "Invalid comment payload",
            details={"errors": e.errors(include_url=False)},
        )


@router.get("/", response_model=CommentListResponse)
async def list_comments() -> CommentListResponse:
    """Return the fixed comment list."""
    return CommentListResponse(method="GET", comments=SEED_COMMENTS)


@router.post("/", status_code=201, response_model=CommentCreatedResponse)
async def create_comment(request: Request) -> CommentCreatedResponse:
    """Echo the posted comment back with a server-assigned id."""
    payload = await _read_payload(request)
    data = payload.model_dump()
    data["id"] = CREATED_COMMENT_ID

    logger.info(f"Created comment {CREATED_COMMENT_ID} by {payload.name!r}")
    return CommentCreatedResponse(method="POST", comment=Comment(**data))


@router.put("/", status_code=204, response_class=Response)
async def update_comment(
    comment_id: Optional[str] = Query(default=None, alias="id"),
) -> Response:
    """Acknowledge an update of comment ``?id=N``. The body is not read."""
    logger.info(f"Updated comment {comment_id}")
    return Response(status_code=204)


@router.api_route(
    "/",
    methods=UNDEFINED_METHODS,
    response_model=MethodErrorResponse,
    response_model_exclude_none=True,
)
async def undefined_method(request: Request) -> MethodErrorResponse:
    """
    Error payload for the listed methods.

    Methods with no route at all get the same payload from
    ``method_not_allowed_handler``.
    """
    return undefined_method_response(request.method)
