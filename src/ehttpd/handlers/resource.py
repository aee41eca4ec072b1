"""
Serves one preconfigured resource whatever the request path.

Useful for fixed routes such as "/favicon.ico" or a bundled landing page:

    favicon = StaticResource.from_bundle("favicon.ico", "image/x-icon", "myapp")
    pipeline.mount("/favicon.ico", StaticResourceHandler(favicon))
"""

import logging

from ..exceptions import ResourceNotFoundError
from ..http.mime_types import DEFAULT_MIME_TYPE
from ..http.request import HTTPRequest
from ..http.response import HTTPResponse
from ..resources import StaticResource
from .base import NOT_FOUND_MESSAGE, Handler


logger = logging.getLogger(__name__)


class StaticResourceHandler(Handler):
    """
    Handler returning the bytes of a single StaticResource.

    The resource's own content type is used, application/octet-stream
    if it has none. The resource is read again on every request.
    """

    def __init__(self, resource: StaticResource):
        self.resource = resource

    def handle(self, request: HTTPRequest, response: HTTPResponse) -> None:
        data = self.resource.data()
        if not data:
            logger.error(f"Static resource {self.resource} not available")
            raise ResourceNotFoundError(NOT_FOUND_MESSAGE)

        response.set_header("Content-Type", self.resource.content_type or DEFAULT_MIME_TYPE)
        response.add_content(data)
