"""
=============================================================================
EHTTPD COMMAND-LINE INTERFACE
=============================================================================

Resolve resources the way the container would and print the responses.
Handy for checking a serving root before deploying it.

=============================================================================
USAGE
=============================================================================

    python -m ehttpd ./public index.html css/site.css
    python -m ehttpd ./public logo.png --body > logo.png
    python -m ehttpd web --bundle myapp css/site.css
    python -m ehttpd ./public README --default-type ""   # refuse unknown

    Exit status: 0 if every resource was served, 1 if any was not,
    2 on invalid configuration.

=============================================================================
"""

import argparse
import sys
from typing import Optional, Sequence

from . import __version__
from .config import LOG_LEVELS, ServingConfig, configure_logging
from .handlers import BundleResourceHandler, VirtualDirectoryHandler
from .http.mime_types import DEFAULT_MIME_TYPE
from .http.request import HTTPRequest
from .pipeline import Pipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ehttpd",
        description="Resolve static resources and print the HTTP responses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m ehttpd ./public index.html           # Serve from a directory
  python -m ehttpd ./public logo.png --body      # Also write the body
  python -m ehttpd web --bundle myapp site.css   # Serve package data
        """
    )

    # ─────────────────────────────────────────────────────────────────────
    # WHAT TO SERVE
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "root",
        help="Serving root directory (with --bundle: directory inside the package)"
    )

    parser.add_argument(
        "resources",
        nargs="+",
        metavar="RESOURCE",
        help="Resource paths relative to the root"
    )

    parser.add_argument(
        "--bundle", "-b",
        metavar="PACKAGE",
        default=None,
        help="Serve package data of PACKAGE instead of a directory"
    )

    # ─────────────────────────────────────────────────────────────────────
    # CONTENT TYPES
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--default-type", "-t",
        default=DEFAULT_MIME_TYPE,
        help=f"Content type of unrecognized resources, '' to refuse them (default: {DEFAULT_MIME_TYPE})"
    )

    parser.add_argument(
        "--charset", "-c",
        default=None,
        help="Charset appended to text content types"
    )

    parser.add_argument(
        "--ignore-case", "-i",
        action="store_true",
        help="Match MIME rules regardless of case"
    )

    # ─────────────────────────────────────────────────────────────────────
    # OUTPUT
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--body",
        action="store_true",
        help="Write response bodies to stdout after the headers"
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"ehttpd {__version__}"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    config = ServingConfig(
        root=args.root,
        default_content_type=args.default_type or None,
        charset=args.charset,
        case_sensitive_mime=not args.ignore_case,
        log_level=args.log_level,
    )
    configure_logging(config.log_level)

    try:
        if args.bundle:
            handler = BundleResourceHandler.from_config(args.bundle, config, base=args.root)
        else:
            config.validate()
            handler = VirtualDirectoryHandler.from_config(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    pipeline = Pipeline().mount("/", handler)
    out = sys.stdout
    failed = 0

    for resource in args.resources:
        response = pipeline(HTTPRequest.from_target("/" + resource.lstrip("/")))

        out.write(f"{resource}: {response.status_line}\n")
        for name, value in response.headers.items():
            out.write(f"  {name}: {value}\n")
        out.write(f"  Content-Length: {len(response.body)}\n")

        if args.body and response.status.is_success:
            out.flush()
            out.buffer.write(response.body)
            out.buffer.flush()
            out.write("\n")

        if not response.status.is_success:
            failed += 1

    out.flush()
    return 1 if failed else 0


# =============================================================================
# ENTRY POINT
# =============================================================================
# This allows running: python -m ehttpd

if __name__ == "__main__":
    sys.exit(main())
