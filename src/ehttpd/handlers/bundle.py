"""
Serves resources embedded in an importable Python package.

Applications ship their web assets as package data and mount them without
knowing where (or whether) the package sits on disk; the bytes are read
through importlib.resources, so zipped installs work too.

    handler = BundleResourceHandler("myapp", base="web", url_prefix="/assets")
    # GET /assets/css/site.css  →  myapp/web/css/site.css

Bundle names are not filesystem paths, so traversal is prevented by
refusing suspicious names outright instead of resolving them.
"""

import logging
from typing import Optional

from ..config import ServingConfig
from ..exceptions import ResourceNotFoundError
from ..http.mime_types import DEFAULT_MIME_TYPE, MimeClassifier
from ..resources import DEFAULT_BUFFER_SIZE, StaticResource
from .base import NOT_FOUND_MESSAGE, ResourceHandler


logger = logging.getLogger(__name__)


class BundleResourceHandler(ResourceHandler):
    """
    Handler serving package data of ``package``, below ``base``.

    Args:
        package: Dotted name of the package holding the resources.
        base: "/"-separated directory inside the package, "" for its root.
    """

    def __init__(
        self,
        package: str,
        base: str = "",
        url_prefix: str = "",
        default_content_type: Optional[str] = DEFAULT_MIME_TYPE,
        charset: Optional[str] = None,
        classifier: Optional[MimeClassifier] = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        super().__init__(
            url_prefix=url_prefix,
            default_content_type=default_content_type,
            charset=charset,
            classifier=classifier,
            buffer_size=buffer_size,
        )
        base = base.strip("/")
        if base == ".":
            base = ""
        if base and not is_safe_name(base):
            raise ValueError(f"Invalid bundle base directory: {base!r}")
        self.package = package
        self.base = base

    @classmethod
    def from_config(cls, package: str, config: ServingConfig, base: str = "") -> "BundleResourceHandler":
        """Create a handler for ``package`` using the content settings of ``config``."""
        return cls(
            package,
            base=base,
            url_prefix=config.url_prefix,
            default_content_type=config.default_content_type,
            charset=config.charset,
            classifier=MimeClassifier(case_sensitive=config.case_sensitive_mime),
            buffer_size=config.buffer_size,
        )

    def locate(self, resource_path: str, content_type: str) -> StaticResource:
        if not is_safe_name(resource_path):
            logger.warning(f"Rejected bundle resource name: {resource_path!r}")
            raise ResourceNotFoundError(NOT_FOUND_MESSAGE)

        name = f"{self.base}/{resource_path}" if self.base else resource_path
        return StaticResource.from_bundle(name, content_type, self.package, self.buffer_size)


def is_safe_name(name: str) -> bool:
    """
    Check that a bundle resource name stays inside its package.

        >>> is_safe_name("css/site.css")
        True
        >>> is_safe_name("../secrets.py")
        False
        >>> is_safe_name("/etc/passwd")
        False
    """
    if not name or "\\" in name or "\x00" in name or name.startswith("/"):
        return False
    return all(segment not in ("", ".", "..") for segment in name.split("/"))
