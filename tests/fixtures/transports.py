"""
Fake transports for client unit tests.

RecordingTransport returns canned HttpResponse objects in order and keeps
every HttpRequest it was called with.
"""

from typing import Iterable, Optional

from core.http.models import HttpRequest, HttpResponse


_REASONS = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    404: "Not Found",
    500: "Internal Server Error",
}


def make_response(
    status_code: int = 200,
    body: Optional[str] = "",
    *,
    version: str = "HTTP/1.1",
    headers: Optional[dict[str, str]] = None,
) -> HttpResponse:
    """
    Create an HttpResponse as a transport would.

    Error statuses (>= 400) get no body, like the real transports.
    """
    lines = [f"{version} {status_code} {_REASONS.get(status_code, '')}".rstrip()]
    for name, value in (headers or {"Content-Type": "application/json"}).items():
        lines.append(f"{name}: {value}")
    if status_code >= 400:
        return HttpResponse.failure(f"HTTP {status_code}", headers=lines)
    return HttpResponse(body=body, headers=lines)


class RecordingTransport:
    """Transport double that replays canned responses."""

    def __init__(self, responses: Iterable[HttpResponse] = ()) -> None:
        self.responses = list(responses)
        self.requests: list[HttpRequest] = []
        self.closed = False

    def __call__(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if not self.responses:
            return make_response(200, "{}")
        return self.responses.pop(0)

    @property
    def last_request(self) -> HttpRequest:
        return self.requests[-1]

    def close(self) -> None:
        self.closed = True
