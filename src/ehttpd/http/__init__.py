"""
HTTP collaborators used by the resource handlers.

    from ehttpd.http import HTTPRequest, HTTPResponse, classify

    request = HTTPRequest.from_target("/css/site.css")
    response = HTTPResponse()
    classify(request.resource)   # "text/css"
"""

from .request import HTTPRequest, HTTPParseError
from .response import (
    HTTPResponse,
    ResponseBuilder,
    error,
    format_http_date,
    internal_error,
    not_found,
)
from .status_codes import HTTPStatus
from .mime_types import (
    DEFAULT_MIME_TYPE,
    MIME_RULES,
    MimeClassifier,
    MimeRule,
    classify,
    get_content_type,
    is_text_type,
    with_charset,
)

__all__ = [
    # Request
    "HTTPRequest",
    "HTTPParseError",
    # Response
    "HTTPResponse",
    "ResponseBuilder",
    "error",
    "format_http_date",
    "internal_error",
    "not_found",
    # Status
    "HTTPStatus",
    # MIME
    "DEFAULT_MIME_TYPE",
    "MIME_RULES",
    "MimeClassifier",
    "MimeRule",
    "classify",
    "get_content_type",
    "is_text_type",
    "with_charset",
]
