"""
Unit tests for HTTP request/response models and status line parsing.
"""

import pytest

from core.http.models import HttpMethod, HttpResponse, parse_status_code
from core.schemas.errors import ErrorCodes, UnsupportedMethodError


class TestHttpMethod:

    def test_parse_accepts_names_case_insensitively(self):
        assert HttpMethod.parse("get") is HttpMethod.GET
        assert HttpMethod.parse("Put") is HttpMethod.PUT
        assert HttpMethod.parse(HttpMethod.DELETE) is HttpMethod.DELETE

    def test_parse_rejects_unknown(self):
        with pytest.raises(UnsupportedMethodError) as exc_info:
            HttpMethod.parse("TRACE")
        assert exc_info.value.code == ErrorCodes.UNSUPPORTED_METHOD

    def test_has_body(self):
        assert HttpMethod.POST.has_body
        assert HttpMethod.PUT.has_body
        assert HttpMethod.PATCH.has_body
        assert not HttpMethod.GET.has_body
        assert not HttpMethod.DELETE.has_body


class TestParseStatusCode:

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("HTTP/1.1 200 OK", 200),
            ("HTTP/1.0 404 Not Found", 404),
            ("HTTP/2 204 No Content", 204),
            ("HTTP/2 201", 201),
            ("HTTP/1.1  301  Moved Permanently", 301),
        ],
    )
    def test_valid_status_lines(self, line, expected):
        assert parse_status_code(line) == expected

    @pytest.mark.parametrize(
        "line",
        [None, "", "HTTP/1.1", "Content-Type: application/json", "HTTP/1.1 2000 OK", "HTTP/1.1 OK 200"],
    )
    def test_malformed_status_lines(self, line):
        assert parse_status_code(line) is None


class TestHttpResponse:

    def test_success(self):
        response = HttpResponse(body="{}", headers=["HTTP/1.1 200 OK", "Server: test"])
        assert response.status_line == "HTTP/1.1 200 OK"
        assert response.status_code == 200
        assert response.ok
        assert not response.failed

    def test_failure_without_headers(self):
        response = HttpResponse.failure("connection refused")
        assert response.failed
        assert response.status_line is None
        assert response.status_code is None
        assert not response.ok
        assert response.error_code == ErrorCodes.TRANSPORT_FAILURE

    def test_failure_with_error_status(self):
        response = HttpResponse.failure(
            "HTTP 500",
            code=ErrorCodes.HTTP_ERROR_STATUS,
            headers=["HTTP/1.1 500 Internal Server Error"],
        )
        assert response.failed
        assert response.status_code == 500
        assert not response.ok
