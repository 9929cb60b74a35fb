"""
HTTP Transports

A transport takes a prepared HttpRequest and returns an HttpResponse. It
never raises for network problems; failures come back as a response with
no body so callers can inspect the captured status line instead.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Optional, Protocol
from urllib.parse import urlparse
from urllib.request import url2pathname

from core.schemas.errors import ErrorCodes

from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

# urllib3 reports the protocol version as an integer
_HTTP_VERSIONS = {
    9: "HTTP/0.9",
    10: "HTTP/1.0",
    11: "HTTP/1.1",
    20: "HTTP/2",
}

_REMOTE_SCHEMES = ("http", "https")


class Transport(Protocol):
    """Callable that performs one request."""

    def __call__(self, request: HttpRequest) -> HttpResponse:
        ...


def wire_headers_to_dict(lines: Iterable[str]) -> dict[str, str]:
    """Turn "Name:Value" wire lines back into a mapping (later lines win)."""
    headers: dict[str, str] = {}
    for line in lines:
        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            logger.debug(f"Skipping malformed header line: {line!r}")
            continue
        headers[name.strip()] = value.strip()
    return headers


def build_response(
    status_line: str,
    header_items: Iterable[tuple[str, str]],
    status_code: int,
    body: str,
) -> HttpResponse:
    """Assemble raw header lines and apply the error-status rule."""
    lines = [status_line.rstrip()]
    lines.extend(f"{name}: {value}" for name, value in header_items)

    if status_code >= 400:
        return HttpResponse.failure(
            f"HTTP {status_code}",
            code=ErrorCodes.HTTP_ERROR_STATUS,
            headers=lines,
        )
    return HttpResponse(body=body, headers=lines)


class BaseTransport(ABC):
    """
    Shared dispatch for transports.

    Remote URLs go to ``_send``; anything without an http(s) scheme is read
    as a local resource. When the request asks for it, relative local paths
    are searched across ``include_path`` first.
    """

    def __init__(self, *, include_path: Optional[Iterable[str | Path]] = None) -> None:
        self.include_path = [Path(p) for p in (include_path or [])]

    def __call__(self, request: HttpRequest) -> HttpResponse:
        scheme = urlparse(request.url).scheme.lower()
        if scheme in _REMOTE_SCHEMES:
            logger.debug(f"{request.method.value} {request.url}")
            return self._send(request)
        return self._read_local(request)

    @abstractmethod
    def _send(self, request: HttpRequest) -> HttpResponse:
        """Perform a remote request."""
        ...

    def _local_candidates(self, request: HttpRequest) -> list[Path]:
        parsed = urlparse(request.url)
        if parsed.scheme.lower() == "file":
            raw_path = url2pathname(parsed.path)
        else:
            raw_path = request.url
        path = Path(raw_path)

        if path.is_absolute() or not request.use_include_path:
            return [path]
        return [directory / path for directory in self.include_path] + [Path.cwd() / path]

    def _read_local(self, request: HttpRequest) -> HttpResponse:
        for candidate in self._local_candidates(request):
            if not candidate.is_file():
                continue
            try:
                body = candidate.read_text(encoding="utf-8")
            except OSError as e:
                logger.warning(f"Failed to read local resource {candidate}: {e}")
                return HttpResponse.failure(str(e))
            logger.debug(f"Read local resource {candidate}")
            return HttpResponse(body=body, headers=[])

        logger.warning(f"Local resource not found: {request.url}")
        return HttpResponse.failure(
            f"Local resource not found: {request.url}",
            code=ErrorCodes.RESOURCE_NOT_FOUND,
        )

    def close(self) -> None:
        """Release any underlying connections."""


class RequestsTransport(BaseTransport):
    """
    Transport backed by a ``requests.Session``.

    Usage:
        transport = RequestsTransport()
        response = transport(HttpRequest(method=HttpMethod.GET, url=url))
    """

    def __init__(
        self,
        *,
        session: Optional[Any] = None,
        include_path: Optional[Iterable[str | Path]] = None,
    ) -> None:
        """
        Args:
            session: Optional pre-built requests session
            include_path: Directories searched for relative local resources
        """
        super().__init__(include_path=include_path)
        self._session = session
        self._owns_session = session is None

    def _get_session(self):
        """Lazy-load requests session."""
        if self._session is None:
            import requests
            self._session = requests.Session()
        return self._session

    def _send(self, request: HttpRequest) -> HttpResponse:
        import requests

        session = self._get_session()
        try:
            response = session.request(
                method=request.method.value,
                url=request.url,
                headers=wire_headers_to_dict(request.headers),
                data=request.body.encode("utf-8") if request.body is not None else None,
            )
        except requests.RequestException as e:
            logger.warning(f"{request.method.value} {request.url} failed: {e}")
            return HttpResponse.failure(str(e))

        version = _HTTP_VERSIONS.get(getattr(response.raw, "version", 11), "HTTP/1.1")
        status_line = f"{version} {response.status_code} {response.reason or ''}"
        body = response.content.decode(response.encoding or "utf-8", errors="replace")

        logger.debug(f"{request.method.value} {request.url} -> {status_line.strip()}")
        return build_response(status_line, response.headers.items(), response.status_code, body)

    def close(self) -> None:
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None


class HttpxTransport(BaseTransport):
    """
    Transport backed by an ``httpx.Client``.

    Any httpx client works, including ``fastapi.testclient.TestClient``,
    which lets the client run against an in-process app.
    """

    def __init__(
        self,
        client: Optional[Any] = None,
        *,
        include_path: Optional[Iterable[str | Path]] = None,
    ) -> None:
        super().__init__(include_path=include_path)
        self._client = client
        self._owns_client = client is None

    def _get_client(self):
        if self._client is None:
            import httpx
            self._client = httpx.Client()
        return self._client

    def _send(self, request: HttpRequest) -> HttpResponse:
        import httpx

        client = self._get_client()
        try:
            response = client.request(
                request.method.value,
                request.url,
                headers=wire_headers_to_dict(request.headers),
                content=request.body.encode("utf-8") if request.body is not None else None,
            )
        except httpx.HTTPError as e:
            logger.warning(f"{request.method.value} {request.url} failed: {e}")
            return HttpResponse.failure(str(e))

        status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}"

        logger.debug(f"{request.method.value} {request.url} -> {status_line.strip()}")
        return build_response(
            status_line,
            response.headers.multi_items(),
            response.status_code,
            response.text,
        )

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None
