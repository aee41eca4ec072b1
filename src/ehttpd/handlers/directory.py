"""
=============================================================================
VIRTUAL DIRECTORY HANDLER
=============================================================================

Serves static resources (style sheets, scripts, images, HTML pages) from a
root directory on the filesystem.

=============================================================================
SECURITY: PATH TRAVERSAL
=============================================================================

The resource path comes straight from the client, so it may try to climb
out of the serving root:

    ┌─────────────────────────────────────────────────────────────────────┐
    │  GET /static/../../etc/passwd HTTP/1.1                             │
    │                                                                      │
    │  Naive join:  /srv/www/../../etc/passwd  →  /etc/passwd            │
    │                                                                      │
    │  What we do:                                                        │
    │  1. Resolve root / resource (collapses .., follows symlinks)        │
    │  2. Check the result is still inside the resolved root             │
    │  3. If not, answer exactly like a missing file: 404                │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The check runs before anything is opened. Answering 404 rather than 403
means a client cannot probe which files exist outside the root.

    PYTHON PROTECTION:

        full_path = (root / user_input).resolve()
        full_path.relative_to(root)   # Raises ValueError if outside root

=============================================================================
"""

import logging
from pathlib import Path
from typing import Optional

from ..config import ServingConfig
from ..exceptions import ResourceNotFoundError
from ..http.mime_types import DEFAULT_MIME_TYPE, MimeClassifier
from ..resources import DEFAULT_BUFFER_SIZE, StaticResource
from .base import NOT_FOUND_MESSAGE, ResourceHandler


logger = logging.getLogger(__name__)


class VirtualDirectoryHandler(ResourceHandler):
    """
    Handler serving files found under a root directory.

    =========================================================================
    USAGE
    =========================================================================

        handler = VirtualDirectoryHandler("/srv/www", url_prefix="/static")

        response = HTTPResponse()
        handler.handle(HTTPRequest.from_target("/static/site.css"), response)
        response.headers["Content-Type"]    # "text/css"

    Directories are never listed and no index file is substituted: a
    request naming a directory is not found.

    =========================================================================
    """

    def __init__(
        self,
        root: str | Path,
        url_prefix: str = "",
        default_content_type: Optional[str] = DEFAULT_MIME_TYPE,
        charset: Optional[str] = None,
        classifier: Optional[MimeClassifier] = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        """
        Initialize the handler.

        Args:
            root: Serving root. Resolved to an absolute path once, here.

        Raises:
            ValueError: If the root is not an existing directory.
        """
        super().__init__(
            url_prefix=url_prefix,
            default_content_type=default_content_type,
            charset=charset,
            classifier=classifier,
            buffer_size=buffer_size,
        )
        self._root = Path(root).resolve()

        if not self._root.is_dir():
            raise ValueError(f"Serving root is not a directory: {root}")

    @classmethod
    def from_config(cls, config: ServingConfig) -> "VirtualDirectoryHandler":
        """Create a handler from a ServingConfig."""
        return cls(
            config.root,
            url_prefix=config.url_prefix,
            default_content_type=config.default_content_type,
            charset=config.charset,
            classifier=MimeClassifier(case_sensitive=config.case_sensitive_mime),
            buffer_size=config.buffer_size,
        )

    @property
    def root(self) -> Path:
        """The resolved serving root."""
        return self._root

    def resolve(self, resource_path: str) -> Optional[Path]:
        """
        Map a request-supplied path to a file path inside the root.

        Returns:
            The canonical path, or None if it falls outside the root or
            cannot be resolved at all.
        """
        try:
            full_path = (self._root / resource_path).resolve()
            full_path.relative_to(self._root)
        except (OSError, RuntimeError, ValueError):  # RuntimeError: symlink loop before 3.13
            return None
        return full_path

    def locate(self, resource_path: str, content_type: str) -> StaticResource:
        full_path = self.resolve(resource_path)
        if full_path is None:
            logger.warning(f"Path traversal attempt: {resource_path!r}")
            raise ResourceNotFoundError(NOT_FOUND_MESSAGE)

        return StaticResource.from_file(full_path, content_type, self.buffer_size)
