"""
Unit tests for HTTP request construction.
"""

import pytest

from ehttpd.http.request import HTTPParseError, HTTPRequest


class TestFromTarget:
    """Tests for HTTPRequest.from_target."""

    def test_simple_get(self):
        """Test a plain request target."""
        request = HTTPRequest.from_target("/css/site.css")

        assert request.method == "GET"
        assert request.path == "/css/site.css"
        assert request.version == "HTTP/1.1"
        assert request.resource == "css/site.css"

    def test_query_params(self):
        """Test the query string is split off and parsed."""
        request = HTTPRequest.from_target("/app.js?v=3&debug&tag=a&tag=b")

        assert request.path == "/app.js"
        assert request.query_params == {"v": ["3"], "debug": [""], "tag": ["a", "b"]}

    def test_fragment_is_dropped(self):
        request = HTTPRequest.from_target("/index.html#top")
        assert request.path == "/index.html"

    @pytest.mark.parametrize("target, path", [
        ("//etc/passwd", "//etc/passwd"),
        ("//static/site.css?v=1", "//static/site.css"),
    ])
    def test_double_slash_is_a_path(self, target: str, path: str):
        """Test a leading "//" keeps every segment in the path."""
        request = HTTPRequest.from_target(target)

        assert request.path == path
        assert request.resource == path.lstrip("/")

    def test_path_is_decoded(self):
        """Test percent-encoded paths are decoded."""
        request = HTTPRequest.from_target("/my%20file.txt")
        assert request.resource == "my file.txt"

    def test_dot_segments_are_kept(self):
        """Test the path is not normalized here."""
        request = HTTPRequest.from_target("/static/%2e%2e/secret.txt")
        assert request.path == "/static/../secret.txt"

    def test_method_is_uppercased(self):
        assert HTTPRequest.from_target("/", method="head").method == "HEAD"

    def test_header_keys_are_lowercased(self):
        request = HTTPRequest.from_target("/", headers={"Accept-Encoding": "gzip"})
        assert request.headers == {"accept-encoding": "gzip"}

    @pytest.mark.parametrize("target", ["", "css/site.css", "http://example.com/a.css", "*"])
    def test_invalid_target(self, target: str):
        """Test targets not in origin form are rejected with 400."""
        with pytest.raises(HTTPParseError) as exc_info:
            HTTPRequest.from_target(target)

        assert exc_info.value.status_code == 400


class TestResource:
    """Tests for the resource path property."""

    def test_path_param_wins(self):
        """Test a router path parameter replaces the URL path."""
        request = HTTPRequest(method="GET", path="/static/a.css", path_params={"path": "/a.css"})
        assert request.resource == "a.css"

    def test_empty_path_param(self):
        """Test an empty path parameter is honored."""
        request = HTTPRequest(method="GET", path="/static", path_params={"path": ""})
        assert request.resource == ""

    def test_leading_slashes_stripped(self):
        request = HTTPRequest(method="GET", path="///index.html")
        assert request.resource == "index.html"
