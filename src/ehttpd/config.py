"""
=============================================================================
SERVING CONFIGURATION
=============================================================================

All the knobs of the static resource handlers in one immutable dataclass.

=============================================================================
ONE CONFIG, MANY WORKERS
=============================================================================

A ServingConfig is frozen. Handlers built from it keep only immutable
state, so the same handler object can serve every worker thread of the
hosting server without locks:

    config = ServingConfig(root="/srv/www")
    handler = VirtualDirectoryHandler.from_config(config)

    worker 1 ──► handler.handle(req1, resp1)
    worker 2 ──► handler.handle(req2, resp2)     ← no shared mutable state
    worker 3 ──► handler.handle(req3, resp3)

=============================================================================
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .http.mime_types import DEFAULT_MIME_TYPE
from .resources import DEFAULT_BUFFER_SIZE


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ServingConfig:
    """
    Configuration for the static resource handlers.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    SERVING ROOT
    - root, url_prefix

    CONTENT TYPES
    - default_content_type, charset, case_sensitive_mime

    I/O
    - buffer_size

    LOGGING
    - log_level

    =========================================================================
    """

    # ─────────────────────────────────────────────────────────────────────
    # SERVING ROOT
    # ─────────────────────────────────────────────────────────────────────

    root: str = "."
    """
    Directory resources are resolved under. Nothing outside it is ever
    served, whatever the request path says.
    """

    url_prefix: str = ""
    """
    URL prefix stripped from the request path before resolution.
    With url_prefix="/static", "/static/site.css" maps to root/site.css.
    """

    # ─────────────────────────────────────────────────────────────────────
    # CONTENT TYPES
    # ─────────────────────────────────────────────────────────────────────

    default_content_type: Optional[str] = DEFAULT_MIME_TYPE
    """
    Content-Type for resources the MIME catalog does not recognize.
    None refuses to serve them (they answer 404).
    """

    charset: Optional[str] = None
    """
    If set, appended to text content types ("text/css; charset=utf-8").
    """

    case_sensitive_mime: bool = True
    """
    Match MIME rules case-sensitively ("LOGO.PNG" is then unknown).
    """

    # ─────────────────────────────────────────────────────────────────────
    # I/O
    # ─────────────────────────────────────────────────────────────────────

    buffer_size: int = DEFAULT_BUFFER_SIZE
    """
    Chunk size, in bytes, used when copying a resource into memory.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    DEBUG logs every resource read with its size.
    """

    @classmethod
    def from_env(cls) -> "ServingConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        EHTTPD_ROOT                 Serving root (default: .)
        EHTTPD_URL_PREFIX           URL prefix to strip (default: none)
        EHTTPD_DEFAULT_TYPE         Type for unknown resources; an empty
                                    value refuses them
        EHTTPD_CHARSET              Charset for text types (default: none)
        EHTTPD_MIME_CASE_SENSITIVE  "0"/"false"/"no" to ignore case
        EHTTPD_BUFFER_SIZE          Copy buffer size (default: 8192)
        EHTTPD_LOG_LEVEL            Logging level (default: INFO)

        =====================================================================
        """
        default_type = os.getenv("EHTTPD_DEFAULT_TYPE", DEFAULT_MIME_TYPE)
        return cls(
            root=os.getenv("EHTTPD_ROOT", "."),
            url_prefix=os.getenv("EHTTPD_URL_PREFIX", ""),
            default_content_type=default_type or None,
            charset=os.getenv("EHTTPD_CHARSET") or None,
            case_sensitive_mime=_env_flag("EHTTPD_MIME_CASE_SENSITIVE", True),
            buffer_size=int(os.getenv("EHTTPD_BUFFER_SIZE", str(DEFAULT_BUFFER_SIZE))),
            log_level=os.getenv("EHTTPD_LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Called once at startup so a bad root or level fails immediately
        rather than on the first request.

        Raises:
            ValueError: On the first invalid value found.
        """
        if not Path(self.root).is_dir():
            raise ValueError(f"Serving root is not a directory: {self.root}")

        if self.buffer_size < 1:
            raise ValueError("buffer_size must be >= 1")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

        if self.url_prefix and not self.url_prefix.startswith("/"):
            raise ValueError(f"url_prefix must start with '/': {self.url_prefix}")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging for command-line use.

    Libraries embedding ehttpd configure logging themselves; only the CLI
    calls this.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    logging.getLogger("ehttpd").setLevel(log_level)
