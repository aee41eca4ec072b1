"""
Unit tests for HTTP response building.
"""

import json
from datetime import datetime, timezone

import pytest

from ehttpd.http.response import (
    HTTPResponse,
    ResponseBuilder,
    error,
    format_http_date,
    internal_error,
    not_found,
)
from ehttpd.http.status_codes import HTTPStatus


class TestHTTPResponse:
    """Tests for HTTPResponse class."""

    def test_defaults(self):
        """Test a fresh response is an empty 200."""
        response = HTTPResponse()

        assert response.status == HTTPStatus.OK
        assert response.headers == {}
        assert response.body == b""

    def test_status_line(self):
        """Test status line generation."""
        assert HTTPResponse(status=HTTPStatus.OK).status_line == "HTTP/1.1 200 OK"
        assert HTTPResponse(status=HTTPStatus.NOT_FOUND).status_line == "HTTP/1.1 404 Not Found"

    def test_add_content_appends(self):
        """Test content is appended, strings encoded as UTF-8."""
        response = HTTPResponse().add_content(b"body ").add_content("{ }")
        assert response.body == b"body { }"

    def test_add_content_keeps_earlier_body(self):
        """Test appending does not mutate a previously read body."""
        response = HTTPResponse().add_content(b"abc")
        before = response.body

        response.add_content(b"def")

        assert before == b"abc"
        assert response.body == b"abcdef"

    def test_set_body_replaces(self):
        response = HTTPResponse(body=b"old").set_body("new")
        assert response.body == b"new"

    def test_set_header_chaining(self):
        """Test method chaining for headers."""
        response = (HTTPResponse()
            .set_header("X-One", "1")
            .set_header("X-Two", "2"))

        assert response.headers["X-One"] == "1"
        assert response.headers["X-Two"] == "2"

    def test_to_bytes(self):
        """Test wire serialization adds the standard headers."""
        response = HTTPResponse(headers={"Content-Type": "text/css"}, body=b"a{}")

        result = response.to_bytes()

        assert result.startswith(b"HTTP/1.1 200 OK\r\n")
        assert b"Content-Type: text/css\r\n" in result
        assert b"Content-Length: 3\r\n" in result
        assert b"Server: ehttpd/1.0\r\n" in result
        assert b"Date: " in result
        assert result.endswith(b"\r\n\r\na{}")

    def test_to_bytes_keeps_explicit_length(self):
        """Test an explicit Content-Length (as set for HEAD) is kept."""
        response = HTTPResponse(headers={"Content-Length": "120"})
        assert b"Content-Length: 120\r\n" in response.to_bytes()


class TestResponseBuilder:
    """Tests for ResponseBuilder class."""

    def test_status(self):
        response = ResponseBuilder().status(HTTPStatus.METHOD_NOT_ALLOWED).build()
        assert response.status == HTTPStatus.METHOD_NOT_ALLOWED

    def test_json_body(self):
        """Test JSON body encoding."""
        data = {"error": "Not Found"}
        response = ResponseBuilder().json(data).build()

        assert response.headers["Content-Type"] == "application/json; charset=utf-8"
        assert json.loads(response.body) == data

    def test_build_copies_headers(self):
        """Test built responses do not share state with the builder."""
        builder = ResponseBuilder().json({"error": "Not Found"})
        first, second = builder.build(), builder.build()

        first.set_header("Allow", "GET")

        assert "Allow" not in second.headers


class TestErrorResponses:
    """Tests for error response helpers."""

    def test_not_found(self):
        response = not_found()

        assert response.status == HTTPStatus.NOT_FOUND
        assert json.loads(response.body) == {"error": "Not Found"}

    def test_internal_error(self):
        response = internal_error()
        assert response.status == HTTPStatus.INTERNAL_SERVER_ERROR

    def test_error_defaults_to_phrase(self):
        response = error(HTTPStatus.METHOD_NOT_ALLOWED)
        assert json.loads(response.body) == {"error": "Method Not Allowed"}


class TestHTTPStatus:
    """Tests for HTTPStatus enum."""

    @pytest.mark.parametrize("status, phrase", [
        (HTTPStatus.OK, "OK"),
        (HTTPStatus.BAD_REQUEST, "Bad Request"),
        (HTTPStatus.NOT_FOUND, "Not Found"),
        (HTTPStatus.INTERNAL_SERVER_ERROR, "Internal Server Error"),
    ])
    def test_phrases(self, status: HTTPStatus, phrase: str):
        assert status.phrase == phrase

    def test_is_success(self):
        assert HTTPStatus.OK.is_success
        assert not HTTPStatus.NOT_FOUND.is_success
        assert not HTTPStatus.INTERNAL_SERVER_ERROR.is_success


class TestFormatHTTPDate:
    """Tests for HTTP date formatting."""

    def test_format(self):
        dt = datetime(2026, 10, 19, 8, 5, 3, tzinfo=timezone.utc)
        assert format_http_date(dt) == "Mon, 19 Oct 2026 08:05:03 GMT"
