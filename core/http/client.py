"""
HTTP Requester

Thin client for a JSON comment API. Keeps a mutable map of request headers,
sends requests through a single transport call, and remembers the raw
response headers of the most recent request.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, TYPE_CHECKING

from core.schemas.codec import dumps_json, loads_json

from .models import HttpMethod, HttpRequest, HttpResponse
from .transport import RequestsTransport, Transport

if TYPE_CHECKING:
    from core.config import ClientConfig

logger = logging.getLogger(__name__)


class HttpRequester:
    """
    HTTP client with a mutable header map.

    Usage:
        requester = HttpRequester()
        requester.set_header("Authorization", "token")

        comments = requester.send_get("http://localhost:8000/")
        if requester.get_last_response_code() == 200:
            ...

    Each request replaces the stored last response. An instance is meant to
    be used from one thread at a time; callers sharing a requester should use
    ``request()``, which returns the response metadata for that call.
    """

    def __init__(
        self,
        *,
        transport: Optional[Transport] = None,
        default_headers: Optional[dict[str, str]] = None,
        decode_responses: bool = True,
        use_include_path: bool = False,
    ) -> None:
        """
        Initialize the requester.

        Args:
            transport: Callable performing the request (default: RequestsTransport)
            default_headers: Initial header map (default: JSON content type)
            decode_responses: Return decoded JSON instead of raw text
            use_include_path: Search the include path for local resources
        """
        self.transport: Transport = transport or RequestsTransport()
        if default_headers is None:
            default_headers = {"Content-Type": "application/json"}
        self._headers: dict[str, str] = dict(default_headers)
        self._decode_responses = decode_responses
        self._use_include_path = use_include_path
        self._last_response: Optional[HttpResponse] = None

    @classmethod
    def from_config(
        cls,
        config: "ClientConfig",
        *,
        transport: Optional[Transport] = None,
    ) -> "HttpRequester":
        """Build a requester from a ClientConfig."""
        return cls(
            transport=transport or RequestsTransport(include_path=config.include_path),
            default_headers=config.default_headers,
            decode_responses=config.decode_responses,
            use_include_path=config.use_include_path,
        )

    # ------------------------------------------------------------------
    # Header map
    # ------------------------------------------------------------------

    def set_header(self, key: str, value: str) -> None:
        self._headers[key] = value

    def delete_header(self, key: str) -> None:
        self._headers.pop(key, None)

    def get_header(self, key: str) -> Optional[str]:
        return self._headers.get(key)

    def get_headers(self) -> dict[str, str]:
        """Return a copy of all request headers."""
        return dict(self._headers)

    def _build_wire_headers(self) -> list[str]:
        """Headers in "key:value" form, in map order."""
        return [f"{key}:{value}" for key, value in self._headers.items()]

    # ------------------------------------------------------------------
    # Flags
    # ------------------------------------------------------------------

    def set_decode_responses(self, value: bool) -> None:
        self._decode_responses = value

    def is_decoding_responses(self) -> bool:
        return self._decode_responses

    def set_use_include_path(self, value: bool) -> None:
        self._use_include_path = value

    def is_using_include_path(self) -> bool:
        return self._use_include_path

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def request(
        self,
        method: HttpMethod | str,
        url: str,
        body: Any = None,
    ) -> HttpResponse:
        """
        Make a request and return its full outcome.

        Args:
            method: HttpMethod or method name
            url: Request URL (or local resource path)
            body: Object serialized to JSON for methods that carry a body

        Returns:
            HttpResponse with body (None on failure) and raw header lines

        Raises:
            SerializationError: If ``body`` cannot be converted to JSON
            UnsupportedMethodError: If ``method`` is not a known verb
        """
        method = HttpMethod.parse(method)
        content = dumps_json(body) if method.has_body else None

        http_request = HttpRequest(
            method=method,
            url=url,
            headers=self._build_wire_headers(),
            body=content,
            use_include_path=self._use_include_path,
        )
        response = self.transport(http_request)
        self._last_response = response

        if response.failed:
            logger.warning(
                f"{method.value} {url} returned no body "
                f"(status={response.status_code}, error={response.error})"
            )
        return response

    def send(self, method: HttpMethod | str, url: str, body: Any = None) -> Any:
        """
        Make a request and return its body.

        Returns:
            Decoded JSON when decoding is enabled, raw text otherwise.
            An empty body is returned as "". None means the request failed.

        Raises:
            SerializationError: If ``body`` cannot be converted to JSON
            DeserializationError: If decoding is enabled and the body is not JSON
        """
        response = self.request(method, url, body)
        if response.body is None:
            return None
        if not self._decode_responses or response.body == "":
            return response.body
        return loads_json(response.body)

    def send_get(self, url: str) -> Any:
        """Send GET request."""
        return self.send(HttpMethod.GET, url)

    def send_post(self, url: str, body: Any) -> Any:
        """Send POST request with a JSON body."""
        return self.send(HttpMethod.POST, url, body)

    def send_put(self, url: str, body: Any) -> Any:
        """Send PUT request with a JSON body."""
        return self.send(HttpMethod.PUT, url, body)

    def send_patch(self, url: str, body: Any) -> Any:
        """Send PATCH request with a JSON body."""
        return self.send(HttpMethod.PATCH, url, body)

    def send_delete(self, url: str) -> Any:
        """Send DELETE request."""
        return self.send(HttpMethod.DELETE, url)

    # ------------------------------------------------------------------
    # Last response
    # ------------------------------------------------------------------

    def get_last_response(self) -> Optional[HttpResponse]:
        return self._last_response

    def get_last_response_headers(self) -> list[str]:
        """Raw header lines of the last request, status line first."""
        if self._last_response is None:
            return []
        return list(self._last_response.headers)

    def get_last_response_code(self) -> Optional[int]:
        """
        Status code of the last request.

        None when no request has been made yet, or when the last request
        failed before any headers were received.
        """
        if self._last_response is None:
            return None
        return self._last_response.status_code

    def close(self) -> None:
        """Close the underlying transport."""
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "HttpRequester":
        return self

    def __exit__(self, *args) -> None:
        self.close()
