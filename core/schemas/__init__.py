"""
Schemas

Error taxonomy and the JSON codec used for request and response bodies.
"""

from .codec import JSON_SEPARATORS, dumps_json, loads_json
from .errors import (
    CommentClientException,
    DeserializationError,
    ErrorCodes,
    SerializationError,
    UnsupportedMethodError,
)

__all__ = [
    "JSON_SEPARATORS",
    "dumps_json",
    "loads_json",
    "CommentClientException",
    "DeserializationError",
    "ErrorCodes",
    "SerializationError",
    "UnsupportedMethodError",
]
