"""
Fixture API Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import logging
import os

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import comments, health
from api.errors import (
    APIError,
    api_error_handler,
    generic_error_handler,
    method_not_allowed_handler,
)


# Configure logging, level from COMMENT_LOG_LEVEL
logging.basicConfig(
    level=getattr(logging, os.getenv("COMMENT_LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Comment Fixture API",
        description="""
Stub comment API used to exercise the comment client.

## Endpoints

- **GET /** - List comments
- **POST /** - Create a comment, responds 201 with id 102
- **PUT /?id=N** - Update a comment, responds 204 with no body
- **Any other method on /** - Error payload "Request method is undefined"
- **GET /health** - Health check
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Register exception handlers
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(comments.router)

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
