"""
=============================================================================
EHTTPD - STATIC RESOURCE SERVING FOR AN EMBEDDABLE HTTP CONTAINER
=============================================================================

Given a request naming a resource, ehttpd:

1. reads the resource from a backing store (a directory on disk or the
   package data of an importable package),
2. classifies its content type from its name,
3. writes the Content-Type header and the bytes into the response.

Sockets, request-line parsing and connection handling belong to the
hosting server. ehttpd receives structured requests and populates
structured responses.

=============================================================================
QUICK START
=============================================================================

    from ehttpd import Pipeline, VirtualDirectoryHandler
    from ehttpd.http import HTTPRequest

    pipeline = Pipeline().mount("/static", VirtualDirectoryHandler("/srv/www"))

    response = pipeline(HTTPRequest.from_target("/static/css/site.css"))
    response.status_line                # "HTTP/1.1 200 OK"
    response.headers["Content-Type"]    # "text/css"

    pipeline(HTTPRequest.from_target("/static/../../etc/passwd")).status
    # HTTPStatus.NOT_FOUND

=============================================================================
"""

__version__ = "1.0.0"

from .config import ServingConfig
from .exceptions import ApplicationError, ResourceNotFoundError
from .handlers import (
    BundleResourceHandler,
    Handler,
    StaticResourceHandler,
    VirtualDirectoryHandler,
)
from .pipeline import Pipeline
from .resources import Payload, ResourceDescriptor, ResourceKind, StaticResource

__all__ = [
    "ServingConfig",
    "ApplicationError",
    "ResourceNotFoundError",
    "BundleResourceHandler",
    "Handler",
    "StaticResourceHandler",
    "VirtualDirectoryHandler",
    "Pipeline",
    "Payload",
    "ResourceDescriptor",
    "ResourceKind",
    "StaticResource",
    "__version__",
]
