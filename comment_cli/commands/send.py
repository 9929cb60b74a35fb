"""
CLI Request Commands

Send GET/POST/PUT requests to the comment API and report the outcome.

Usage:
    comment get [URL] [--json] [--raw] [--header K:V]
    comment post [URL] --name NAME --text TEXT
    comment put [URL] --id ID --name NAME --text TEXT
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

from core.config import ClientConfig
from core.http import HttpMethod, HttpRequester
from core.schemas.errors import CommentClientException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_HTTP_ERROR = 2


@dataclass
class RequestSummary:
    """Outcome of one request for CLI output."""
    method: str = ""
    url: str = ""
    status_code: Optional[int] = None
    ok: bool = False
    body: Any = None
    headers: list[str] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if self.error is None:
            del d["error"]
        return d


def create_requester(config: ClientConfig) -> HttpRequester:
    """Build the requester used by the commands."""
    return HttpRequester.from_config(config)


def resolve_url(args: Namespace) -> Optional[str]:
    """Command-line URL first, then the configured base URL."""
    return args.url or args.cli_config.base_url


def with_query(url: str, **params: Any) -> str:
    """Append query parameters to ``url``, skipping None values."""
    params = {k: v for k, v in params.items() if v is not None}
    if not params:
        return url
    parts = urlsplit(url)
    query = "&".join(filter(None, [parts.query, urlencode(params)]))
    return urlunsplit(parts._replace(query=query))


def apply_header_args(requester: HttpRequester, header_args: Optional[list[str]]) -> None:
    """Apply repeated ``--header K:V`` options to the requester."""
    for item in header_args or []:
        key, sep, value = item.partition(":")
        if not sep or not key.strip():
            raise ValueError(f"Invalid header (expected K:V): {item!r}")
        requester.set_header(key.strip(), value.strip())


def print_summary_human(summary: RequestSummary) -> None:
    """Print summary in human-readable format."""
    print(f"{summary.method} {summary.url}")
    print(f"status: {summary.status_code if summary.status_code is not None else '-'}")
    if summary.error:
        print(f"error: {summary.error}")
    if summary.body is None or summary.body == "":
        return
    if isinstance(summary.body, str):
        print(summary.body)
    else:
        print(json.dumps(summary.body, indent=2, ensure_ascii=False))


def execute(args: Namespace, method: HttpMethod, url: str, body: Any = None) -> int:
    """Send one request and print the result."""
    requester = create_requester(args.cli_config)
    try:
        apply_header_args(requester, args.header)
        if args.raw:
            requester.set_decode_responses(False)

        summary = RequestSummary(method=method.value, url=url)
        try:
            summary.body = requester.send(method, url, body)
        except CommentClientException as e:
            summary.error = e.message
        response = requester.get_last_response()
    finally:
        requester.close()

    if response is not None:
        summary.status_code = response.status_code
        summary.headers = list(response.headers)
        summary.ok = summary.error is None and not response.failed
        if summary.error is None:
            summary.error = response.error

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_summary_human(summary)

    if summary.status_code is not None and summary.status_code >= 400:
        return EXIT_HTTP_ERROR
    if not summary.ok:
        return EXIT_RUNTIME_ERROR
    return EXIT_SUCCESS


def _require_url(args: Namespace) -> Optional[str]:
    url = resolve_url(args)
    if not url:
        print(
            "Error: no URL given. Pass one on the command line or set COMMENT_API_URL.",
            file=sys.stderr,
        )
    return url


def get_cmd(args: Namespace) -> int:
    """Handle get command."""
    url = _require_url(args)
    if not url:
        return EXIT_RUNTIME_ERROR
    return execute(args, HttpMethod.GET, url)


def post_cmd(args: Namespace) -> int:
    """Handle post command."""
    url = _require_url(args)
    if not url:
        return EXIT_RUNTIME_ERROR
    body = {"id": None, "name": args.name, "text": args.text}
    return execute(args, HttpMethod.POST, url, body)


def put_cmd(args: Namespace) -> int:
    """Handle put command."""
    url = _require_url(args)
    if not url:
        return EXIT_RUNTIME_ERROR
    body = {"name": args.name, "text": args.text}
    return execute(args, HttpMethod.PUT, with_query(url, id=args.id), body)
