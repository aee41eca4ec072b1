"""
=============================================================================
HANDLER CONTRACT
=============================================================================

A handler serves one request by populating the response it is given:

    handler.handle(request, response)

It returns nothing. Success means the response now carries exactly one
Content-Type header and a body. Failure is signalled by raising an
ApplicationError (usually ResourceNotFoundError) which the pipeline maps
to an HTTP error response.

=============================================================================
RESOURCE HANDLERS
=============================================================================

ResourceHandler implements the shared per-request flow; subclasses only
decide where bytes come from by implementing locate():

    ┌──────────┐    ┌──────────┐    ┌──────────┐    ┌──────────┐
    │ RESOLVE  │──► │  LOCATE  │──► │   READ   │──► │ RESPOND  │
    │ classify │    │ locate() │    │  data()  │    │ headers  │
    └──────────┘    └──────────┘    └──────────┘    └──────────┘
         │               │               │
         │ unknown &     │ escapes       │ None or
         │ no default    │ the root      │ empty
         ▼               ▼               ▼
                ResourceNotFoundError

No step is retried and no alternate location is tried.

=============================================================================
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..exceptions import ResourceNotFoundError
from ..http.mime_types import DEFAULT_MIME_TYPE, MimeClassifier, with_charset
from ..http.request import HTTPRequest
from ..http.response import HTTPResponse
from ..resources import DEFAULT_BUFFER_SIZE, StaticResource


logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "resource not found"


class Handler(ABC):
    """Abstract base class for request handlers."""

    @abstractmethod
    def handle(self, request: HTTPRequest, response: HTTPResponse) -> None:
        """
        Serve ``request`` by populating ``response``.

        Raises:
            ApplicationError: If the request cannot be served.
        """

    @property
    def name(self) -> str:
        """Get the handler name for logging."""
        return self.__class__.__name__


class ResourceHandler(Handler):
    """
    Base class for handlers resolving the request path to a StaticResource.

    Args:
        url_prefix: Prefix stripped from the request path when the router
            supplied no ``path`` parameter.
        default_content_type: Type for names the classifier does not know.
            None refuses to serve them.
        charset: Charset appended to text types, if any.
        classifier: MIME classifier, a case-sensitive one by default.
        buffer_size: Copy buffer size for reads.
    """

    def __init__(
        self,
        url_prefix: str = "",
        default_content_type: Optional[str] = DEFAULT_MIME_TYPE,
        charset: Optional[str] = None,
        classifier: Optional[MimeClassifier] = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        self.url_prefix = url_prefix.rstrip("/")
        self.default_content_type = default_content_type
        self.charset = charset
        self.classifier = classifier or MimeClassifier()
        self.buffer_size = buffer_size

    def handle(self, request: HTTPRequest, response: HTTPResponse) -> None:
        # ─────────────────────────────────────────────────────────────────
        # RESOLVE
        # ─────────────────────────────────────────────────────────────────
        resource_path = self.resource_path(request)
        content_type = self.content_type_for(resource_path)

        # ─────────────────────────────────────────────────────────────────
        # LOCATE
        # ─────────────────────────────────────────────────────────────────
        resource = self.locate(resource_path, content_type)

        # ─────────────────────────────────────────────────────────────────
        # READ
        # ─────────────────────────────────────────────────────────────────
        data = resource.data()
        if not data:
            logger.error(f"Resource {resource_path!r} not available")
            raise ResourceNotFoundError(NOT_FOUND_MESSAGE)

        # ─────────────────────────────────────────────────────────────────
        # RESPOND
        # ─────────────────────────────────────────────────────────────────
        response.set_header("Content-Type", resource.content_type)
        response.add_content(data)

    def resource_path(self, request: HTTPRequest) -> str:
        """
        Extract the resource path from the request.

        A router ``path`` parameter is used as is; otherwise the URL prefix
        is stripped from the request path.
        """
        if "path" in request.path_params:
            return request.resource

        path = request.path
        if self.url_prefix and (path == self.url_prefix or path.startswith(self.url_prefix + "/")):
            path = path[len(self.url_prefix):]
        return path.lstrip("/")

    def content_type_for(self, resource_path: str) -> str:
        """
        Classify the resource, applying the unknown-type policy.

        Raises:
            ResourceNotFoundError: If the name is unknown and no default
                content type is configured.
        """
        content_type = self.classifier.classify(resource_path) or self.default_content_type
        if content_type is None:
            logger.info(f"Refusing unclassified resource {resource_path!r}")
            raise ResourceNotFoundError(NOT_FOUND_MESSAGE)
        return with_charset(content_type, self.charset)

    @abstractmethod
    def locate(self, resource_path: str, content_type: str) -> StaticResource:
        """
        Build the StaticResource for a request-supplied resource path.

        Raises:
            ResourceNotFoundError: If the path is not acceptable for this
                store (for example, it escapes the serving root).
        """
