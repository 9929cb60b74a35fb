"""
HTTP Client Module

Header-map HTTP client for the comment API, plus pluggable transports.
"""

from .client import HttpRequester
from .models import HttpMethod, HttpRequest, HttpResponse, parse_status_code
from .transport import (
    BaseTransport,
    HttpxTransport,
    RequestsTransport,
    Transport,
    wire_headers_to_dict,
)

__all__ = [
    "HttpRequester",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "parse_status_code",
    "BaseTransport",
    "HttpxTransport",
    "RequestsTransport",
    "Transport",
    "wire_headers_to_dict",
]
