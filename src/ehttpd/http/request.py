"""
=============================================================================
HTTP REQUEST
=============================================================================

The incoming half of a request/response pair, as seen by resource handlers.

Parsing raw bytes off a socket is the job of the hosting server. By the
time a request reaches this package it is already structured; all the
static resource handlers need from it is the resource path:

    GET /static/css/site.css?v=3 HTTP/1.1
        ───────┬──────────── ─┬─
               │              └── query_params = {"v": ["3"]}
               └── path = "/static/css/site.css"

    With a handler mounted on "/static" the resource is "css/site.css".

=============================================================================
URL DECODING
=============================================================================

from_target() percent-decodes the path, so "%2e%2e/" arrives as "../".
That is intentional: traversal checks must run on the decoded path, the
same string the filesystem will eventually see.

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import parse_qs, unquote

from ..exceptions import ApplicationError


class HTTPParseError(ApplicationError):
    """
    Raised when a request target cannot be turned into an HTTPRequest.

    Carries the HTTP status to return to the client (400 by default).
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message, status_code)


@dataclass
class HTTPRequest:
    """
    Represents a parsed HTTP request.

    Attributes:
        method:       The HTTP method (GET, HEAD, ...)
        path:         Decoded request path without query string
        version:      HTTP version string
        headers:      Header dictionary with lowercase keys
        query_params: Parsed query string, values are lists
        path_params:  Parameters injected by a router, e.g. the ``path``
                      wildcard of a ``/static/*path`` route
    """

    method: str
    path: str
    version: str = "HTTP/1.1"
    headers: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, list[str]] = field(default_factory=dict)
    path_params: Dict[str, str] = field(default_factory=dict)

    @property
    def resource(self) -> str:
        """
        The resource path this request names.

        A router-supplied ``path`` parameter wins, even when empty;
        otherwise it is the URL path. Leading slashes are stripped,
        nothing else is normalized.
        """
        resource = self.path_params["path"] if "path" in self.path_params else self.path
        return resource.lstrip("/")

    @classmethod
    def from_target(
        cls,
        target: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
    ) -> "HTTPRequest":
        """
        Build a request from a request-target such as ``/css/a.css?v=1``.

        Args:
            target: Origin-form request target (must start with "/")
            method: HTTP method
            headers: Optional headers, keys are lowercased

        Raises:
            HTTPParseError: If the target is not in origin form.
        """
        if not target.startswith("/"):
            raise HTTPParseError(f"Invalid request target: {target!r}")

        # "//a/b" is a path here, never a network location
        raw_path, _, query = target.partition("#")[0].partition("?")
        path = unquote(raw_path)
        query_params = parse_qs(query, keep_blank_values=True)

        return cls(
            method=method.upper(),
            path=path,
            headers={k.lower(): v for k, v in (headers or {}).items()},
            query_params=query_params,
        )
