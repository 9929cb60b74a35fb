"""API route handlers."""

from api.routes import comments, health

__all__ = ["comments", "health"]
