"""
=============================================================================
RESOURCE HANDLERS
=============================================================================

Handlers populate a response for one request, or raise
ResourceNotFoundError.

    VirtualDirectoryHandler   files under a serving root directory
    BundleResourceHandler     package data of an importable package
    StaticResourceHandler     one fixed StaticResource

=============================================================================
USAGE
=============================================================================

    from ehttpd.handlers import VirtualDirectoryHandler

    static = VirtualDirectoryHandler("/srv/www", url_prefix="/static")
    pipeline.mount("/static", static)

=============================================================================
"""

from .base import Handler, ResourceHandler
from .bundle import BundleResourceHandler
from .directory import VirtualDirectoryHandler
from .resource import StaticResourceHandler

__all__ = [
    "Handler",
    "ResourceHandler",
    "BundleResourceHandler",
    "VirtualDirectoryHandler",
    "StaticResourceHandler",
]
