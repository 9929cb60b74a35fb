"""
HTTP Request/Response Models

Plain data carried between the client and its transport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from core.schemas.errors import ErrorCodes, UnsupportedMethodError


class HttpMethod(str, Enum):
    """Request methods understood by the client."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def has_body(self) -> bool:
        """Whether requests with this method carry a JSON body."""
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)

    @classmethod
    def parse(cls, value: "HttpMethod | str") -> "HttpMethod":
        """Accept an HttpMethod or a case-insensitive method name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise UnsupportedMethodError(str(value)) from None


@dataclass(frozen=True)
class HttpRequest:
    """
    A fully prepared request handed to a transport.

    Headers are already in wire form ("Name:Value").
    """
    method: HttpMethod
    url: str
    headers: list[str] = field(default_factory=list)
    body: Optional[str] = None
    use_include_path: bool = False


@dataclass
class HttpResponse:
    """
    Outcome of a single transport call.

    ``body`` is None when the request failed (network error, missing local
    resource, or an error status). ``headers`` holds the raw response header
    lines; the first one is the status line, e.g. ``HTTP/1.1 200 OK``.
    """
    body: Optional[str] = None
    headers: list[str] = field(default_factory=list)
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def failure(
        cls,
        error: str,
        *,
        code: str = ErrorCodes.TRANSPORT_FAILURE,
        headers: Optional[list[str]] = None,
    ) -> "HttpResponse":
        """Build a "no body" outcome."""
        return cls(body=None, headers=list(headers or []), error=error, error_code=code)

    @property
    def failed(self) -> bool:
        return self.body is None

    @property
    def status_line(self) -> Optional[str]:
        """First captured header line, if any."""
        return self.headers[0] if self.headers else None

    @property
    def status_code(self) -> Optional[int]:
        """
        Numeric status code parsed from the status line.

        The line is tokenized on whitespace so the protocol token may have
        any length (``HTTP/1.1``, ``HTTP/2``). Returns None when no headers
        were captured or the line is malformed.
        """
        return parse_status_code(self.status_line)

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        code = self.status_code
        return code is not None and 200 <= code < 300


def parse_status_code(status_line: Optional[str]) -> Optional[int]:
    """Extract the status code from an ``HTTP/<version> <code> <reason>`` line."""
    if not status_line:
        return None
    parts = status_line.split(None, 2)
    if len(parts) < 2 or not parts[0].upper().startswith("HTTP/"):
        return None
    code = parts[1]
    if len(code) != 3 or not (code.isascii() and code.isdigit()):
        return None
    return int(code)
