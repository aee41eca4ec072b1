"""
=============================================================================
HTTP STATUS CODES
=============================================================================

The subset of RFC 7231 status codes a static resource container produces.

=============================================================================
WHICH CODES DOES A RESOURCE SERVER EMIT?
=============================================================================

    ┌────────────────────────────────────────────────────────────────────┐
    │                  STATUS CODES USED BY EHTTPD                       │
    ├────────┬───────────────────────────────────────────────────────────┤
    │  2xx   │ 200 OK            - Resource found and served             │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  4xx   │ 400 Bad Request   - Request target could not be parsed    │
    │        │ 404 Not Found     - Missing, unreadable or outside root   │
    │        │ 405 Method Not Allowed - Only GET/HEAD make sense here    │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  5xx   │ 500 Internal Server Error - A handler crashed             │
    └────────┴───────────────────────────────────────────────────────────┘

Note that a path traversal attempt is answered with 404, not 403. A 403
would confirm to the client that something exists at the escaped path.

=============================================================================
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes and reason phrases.

    Being an IntEnum, members compare equal to plain integers:

        >>> HTTPStatus.NOT_FOUND == 404
        True
        >>> HTTPStatus.NOT_FOUND.phrase
        'Not Found'
    """

    OK = 200

    BAD_REQUEST = 400
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405

    INTERNAL_SERVER_ERROR = 500

    @property
    def phrase(self) -> str:
        """Reason phrase used on the status line (``HTTP/1.1 404 Not Found``)."""
        return _STATUS_PHRASES.get(self, "Unknown")

    @property
    def is_success(self) -> bool:
        return 200 <= self < 300


_STATUS_PHRASES = {
    HTTPStatus.OK: "OK",
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
}
