"""
=============================================================================
HTTP RESPONSE
=============================================================================

The outgoing half of a request/response pair.

Handlers never build a response from scratch. The pipeline hands them an
empty HTTPResponse and they populate it through two calls:

    response.set_header("Content-Type", "text/css")
    response.add_content(data)

=============================================================================
RESPONSE LIFECYCLE
=============================================================================

    ┌────────────┐   HTTPResponse()   ┌────────────┐   populated   ┌──────────┐
    │  Pipeline  │ ─────────────────► │  Handler   │ ────────────► │ to_bytes │
    └────────────┘                    └────────────┘               └──────────┘
          ▲                                 │
          │   ResourceNotFoundError         │
          └─────────────────────────────────┘
               replaced by not_found()

=============================================================================
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union
import json

from .status_codes import HTTPStatus


@dataclass
class HTTPResponse:
    """
    Represents an HTTP response to be sent to the client.

    Headers keep the case they were set with. Setting a header twice
    replaces the previous value, so a handler that calls set_header once
    per name produces exactly one header line per name.
    """

    status: HTTPStatus = HTTPStatus.OK
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    version: str = "HTTP/1.1"

    @property
    def status_line(self) -> str:
        """
        Get the HTTP status line.

        Example: "HTTP/1.1 200 OK"
        """
        return f"{self.version} {int(self.status)} {self.status.phrase}"

    def set_header(self, name: str, value: str) -> "HTTPResponse":
        """
        Set a response header.

        Args:
            name: Header name
            value: Header value

        Returns:
            Self for method chaining
        """
        self.headers[name] = value
        return self

    def add_content(self, content: Union[str, bytes]) -> "HTTPResponse":
        """
        Append content to the response body.

        Strings are encoded to UTF-8. The body is rebuilt rather than
        mutated so earlier references to ``body`` stay valid.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.body = self.body + bytes(content)
        return self

    def set_body(self, body: Union[str, bytes]) -> "HTTPResponse":
        """Replace the response body."""
        if isinstance(body, str):
            self.body = body.encode("utf-8")
        else:
            self.body = bytes(body)
        return self

    def to_bytes(self, server_name: str = "ehttpd/1.0") -> bytes:
        """
        Serialize the response for the wire.

        =====================================================================
        SERIALIZATION FORMAT
        =====================================================================

            HTTP/1.1 200 OK\\r\\n          ← Status line
            Content-Type: text/css\\r\\n
            Content-Length: 120\\r\\n      ← Auto-calculated
            Date: Mon, 19 Oct 2026 ...\\r\\n  ← Auto-added
            Server: ehttpd/1.0\\r\\n       ← Auto-added
            \\r\\n                         ← Empty line (separator)
            body { color: red; } ...      ← Body bytes

        =====================================================================
        """
        response_headers = dict(self.headers)

        if "Content-Length" not in response_headers:
            response_headers["Content-Length"] = str(len(self.body))
        if "Date" not in response_headers:
            response_headers["Date"] = format_http_date(datetime.now(timezone.utc))
        if "Server" not in response_headers:
            response_headers["Server"] = server_name

        lines = [self.status_line]
        for name, value in response_headers.items():
            lines.append(f"{name}: {value}")
        lines.append("")

        header_bytes = "\r\n".join(lines).encode("utf-8") + b"\r\n"
        return header_bytes + self.body


class ResponseBuilder:
    """
    Fluent builder for the responses the pipeline synthesizes itself
    (error pages). Handlers populate the response they are given instead.

        response = (ResponseBuilder()
            .status(HTTPStatus.NOT_FOUND)
            .json({"error": "Not Found"})
            .build())
    """

    def __init__(self):
        self._status = HTTPStatus.OK
        self._headers: Dict[str, str] = {}
        self._body: bytes = b""

    def status(self, status: HTTPStatus) -> "ResponseBuilder":
        self._status = status
        return self

    def json(self, data: Any) -> "ResponseBuilder":
        """Serialize ``data`` as the JSON body and set Content-Type."""
        self._body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self._headers["Content-Type"] = "application/json; charset=utf-8"
        return self

    def build(self) -> HTTPResponse:
        return HTTPResponse(
            status=self._status,
            headers=dict(self._headers),
            body=self._body,
        )


def format_http_date(dt: datetime) -> str:
    """
    Format a datetime as an HTTP-date (RFC 7231).

    Format: Day, DD Mon YYYY HH:MM:SS GMT
    Example: Mon, 19 Oct 2026 12:00:00 GMT
    """
    days = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    months = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

    return (
        f"{days[dt.weekday()]}, "
        f"{dt.day:02d} {months[dt.month - 1]} {dt.year} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} GMT"
    )


# =============================================================================
# ERROR RESPONSES
# =============================================================================

def error(status: HTTPStatus, message: Optional[str] = None) -> HTTPResponse:
    """
    Create an error response with a JSON body.

    Args:
        status: Error status code
        message: Human-readable message, defaults to the reason phrase

    Returns:
        HTTPResponse with ``{"error": message}`` as body
    """
    return (ResponseBuilder()
        .status(status)
        .json({"error": message or status.phrase})
        .build())


def not_found(message: str = "Not Found") -> HTTPResponse:
    """Create a 404 Not Found response."""
    return error(HTTPStatus.NOT_FOUND, message)


def internal_error(message: str = "Internal Server Error") -> HTTPResponse:
    """Create a 500 Internal Server Error response."""
    return error(HTTPStatus.INTERNAL_SERVER_ERROR, message)
