"""
=============================================================================
REQUEST PIPELINE
=============================================================================

Connects handlers to the hosting server: picks the handler mounted on the
request path, runs it against a fresh response and turns handler errors
into HTTP error responses.

=============================================================================
MOUNTS
=============================================================================

    pipeline = Pipeline()
    pipeline.mount("/static", VirtualDirectoryHandler("/srv/www"))
    pipeline.mount("/assets", BundleResourceHandler("myapp", base="web"))
    pipeline.mount("/favicon.ico", StaticResourceHandler(favicon))

    GET /static/css/site.css
        │
        ├── longest matching prefix: "/static"
        ├── request.path_params["path"] = "/css/site.css"
        └── VirtualDirectoryHandler.handle(request, response)

=============================================================================
ERROR MAPPING
=============================================================================

    ResourceNotFoundError  →  404 {"error": "Not Found"}
    other ApplicationError →  its status_code
    any other exception    →  500, logged with traceback
    no mount matches       →  404
    method not GET/HEAD    →  405

=============================================================================
"""

import logging
from typing import Optional

from .exceptions import ApplicationError, ResourceNotFoundError
from .handlers.base import Handler
from .http.request import HTTPRequest
from .http.response import HTTPResponse, error, internal_error, not_found
from .http.status_codes import HTTPStatus


logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "HEAD")


class Pipeline:
    """
    Dispatches requests to handlers mounted on URL prefixes.

    The mount table is built once at startup; dispatching never changes
    it, so one pipeline serves concurrent workers safely.
    """

    def __init__(self):
        self._mounts: list[tuple[str, Handler]] = []

    def mount(self, prefix: str, handler: Handler) -> "Pipeline":
        """
        Mount ``handler`` on ``prefix``.

        The longest matching prefix wins. Returns self for chaining.
        """
        prefix = "/" + prefix.strip("/")
        self._mounts = [(p, h) for p, h in self._mounts if p != prefix]
        self._mounts.append((prefix, handler))
        self._mounts.sort(key=lambda mount: len(mount[0]), reverse=True)
        logger.debug(f"Mounted {handler.name} on {prefix}")
        return self

    @property
    def mounts(self) -> list[tuple[str, Handler]]:
        return list(self._mounts)

    def match(self, path: str) -> Optional[tuple[Handler, str]]:
        """
        Find the handler for ``path``.

        Returns:
            (handler, remaining path) or None if nothing is mounted there.
        """
        for prefix, handler in self._mounts:
            if prefix == "/":
                return handler, path
            if path == prefix or path.startswith(prefix + "/"):
                return handler, path[len(prefix):]
        return None

    def __call__(self, request: HTTPRequest) -> HTTPResponse:
        return self.dispatch(request)

    def dispatch(self, request: HTTPRequest) -> HTTPResponse:
        """Serve ``request`` and always return a response."""
        if request.method not in ALLOWED_METHODS:
            response = error(HTTPStatus.METHOD_NOT_ALLOWED)
            response.set_header("Allow", ", ".join(ALLOWED_METHODS))
            return response

        matched = self.match(request.path)
        if matched is None:
            logger.info(f"No handler mounted for {request.path}")
            return not_found()

        handler, remainder = matched
        request.path_params["path"] = remainder
        response = HTTPResponse()

        try:
            handler.handle(request, response)
        except ResourceNotFoundError as e:
            logger.info(f"{request.method} {request.path}: {e}")
            return not_found()
        except ApplicationError as e:
            logger.warning(f"{request.method} {request.path}: {e}")
            return error(_status(e.status_code), e.message)
        except Exception as e:
            logger.exception(f"Handler error: {e}")
            return internal_error()

        if request.method == "HEAD":
            response.set_header("Content-Length", str(len(response.body)))
            response.set_body(b"")

        return response


def _status(code: int) -> HTTPStatus:
    try:
        return HTTPStatus(code)
    except ValueError:
        return HTTPStatus.INTERNAL_SERVER_ERROR
