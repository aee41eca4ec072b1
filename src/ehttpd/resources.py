"""
=============================================================================
STATIC RESOURCES
=============================================================================

A StaticResource supplies the raw bytes and the content type of one named
resource, wherever the bytes physically live.

=============================================================================
BACKING STORES
=============================================================================

The set of stores is closed, so it is modelled as a tagged value rather
than a class hierarchy:

    ┌─────────────────────────────────────────────────────────────────────┐
    │  ResourceKind.FILESYSTEM                                            │
    │      locator = "/srv/www/css/site.css"                              │
    │      read with open(locator, "rb")                                  │
    ├─────────────────────────────────────────────────────────────────────┤
    │  ResourceKind.BUNDLE                                                │
    │      package = "myapp.web", locator = "css/site.css"                │
    │      read with importlib.resources.files(package) / locator         │
    └─────────────────────────────────────────────────────────────────────┘

Adding a store means adding a ResourceKind member and one branch in
StaticResource._open(); the final `raise` there catches a forgotten one.

=============================================================================
READ SEMANTICS
=============================================================================

    data()  ──►  open stream  ──►  copy in chunks  ──►  close  ──►  bytes
                     │                   │
                     └── OSError ────────┴──►  log ERROR  ──►  None

- One stream per call, always closed (``with`` block), even mid-copy.
- Failures are expected (missing files) and come back as None.
- Nothing is cached: calling data() twice reads the store twice.

=============================================================================
"""

import io
import logging
from dataclasses import dataclass
from enum import Enum
from importlib import resources
from pathlib import PurePath
from typing import BinaryIO, Optional


logger = logging.getLogger(__name__)

# Bytes copied per read() call
DEFAULT_BUFFER_SIZE = 8192


class ResourceKind(Enum):
    """Where the bytes of a resource come from."""

    FILESYSTEM = "filesystem"
    BUNDLE = "bundle"


@dataclass(frozen=True)
class ResourceDescriptor:
    """
    Identifies a resource inside a backing store.

    Attributes:
        kind: The backing store
        locator: Filesystem path, or name relative to the bundle package
        package: Importable package anchoring a BUNDLE resource
    """

    kind: ResourceKind
    locator: str
    package: Optional[str] = None


@dataclass(frozen=True)
class Payload:
    """The bytes of a resource together with its content type."""

    data: bytes
    content_type: Optional[str]

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class StaticResource:
    """
    A readable resource and its content type.

    The content type is supplied by whoever builds the resource; the
    resource itself never inspects its name or bytes to guess it.

    Usage:
        resource = StaticResource.from_file("/srv/www/site.css", "text/css")
        data = resource.data()      # bytes, or None if unreadable
    """

    descriptor: ResourceDescriptor
    mime_type: Optional[str] = None
    buffer_size: int = DEFAULT_BUFFER_SIZE

    @classmethod
    def from_file(
        cls,
        path: str | PurePath,
        content_type: Optional[str],
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> "StaticResource":
        """Create a resource backed by a file on disk."""
        descriptor = ResourceDescriptor(ResourceKind.FILESYSTEM, str(path))
        logger.debug(f"Creating file resource of type {content_type!r} on {path}")
        return cls(descriptor, content_type, buffer_size)

    @classmethod
    def from_bundle(
        cls,
        name: str,
        content_type: Optional[str],
        package: str,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> "StaticResource":
        """
        Create a resource embedded in an importable package.

        Args:
            name: "/"-separated name relative to the package directory
            content_type: MIME type to report
            package: Dotted name of the anchoring package
        """
        descriptor = ResourceDescriptor(ResourceKind.BUNDLE, name, package)
        logger.debug(f"Creating bundle resource of type {content_type!r} on {package}:{name}")
        return cls(descriptor, content_type, buffer_size)

    @property
    def content_type(self) -> Optional[str]:
        """The content type supplied at construction."""
        return self.mime_type

    @property
    def kind(self) -> ResourceKind:
        return self.descriptor.kind

    def data(self) -> Optional[bytes]:
        """
        Read the whole resource into memory.

        Returns:
            The resource bytes, or None if the resource could not be opened
            or read. The cause is logged, not raised.
        """
        try:
            with self._open() as stream:
                data, copied = _copy(stream, self.buffer_size)
        except (OSError, ImportError, TypeError, ValueError) as e:
            logger.error(f"Error reading resource {self}: {e}")
            return None

        logger.debug(f"Resource {self} read, size is {copied} bytes")
        return data

    def read(self) -> Optional[Payload]:
        """Read the resource and pair it with its content type."""
        data = self.data()
        if data is None:
            return None
        return Payload(data, self.content_type)

    def _open(self) -> BinaryIO:
        descriptor = self.descriptor

        if descriptor.kind is ResourceKind.FILESYSTEM:
            return open(descriptor.locator, "rb")

        if descriptor.kind is ResourceKind.BUNDLE:
            if not descriptor.package:
                raise ValueError("bundle resource without a package")
            root = resources.files(descriptor.package)
            return root.joinpath(descriptor.locator).open("rb")

        raise NotImplementedError(f"Unsupported resource kind: {descriptor.kind}")

    def __str__(self) -> str:
        if self.descriptor.kind is ResourceKind.BUNDLE:
            return f"'{self.descriptor.package}:{self.descriptor.locator}'"
        return f"'{self.descriptor.locator}'"


def _copy(stream: BinaryIO, buffer_size: int) -> tuple[bytes, int]:
    """Copy ``stream`` into memory in ``buffer_size`` chunks."""
    output = io.BytesIO()
    copied = 0
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        output.write(chunk)
        copied += len(chunk)
    return output.getvalue(), copied
