"""
pytest configuration and fixtures.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ehttpd.http import HTTPRequest, HTTPResponse


# 6 x 20 bytes: a 120-byte UTF-8 style sheet
STYLE_CSS = b"body { margin: 0; }\n" * 6

INDEX_HTML = b"<!DOCTYPE html>\n<html><body><h1>Hello</h1></body></html>\n"
SECRET = b"root:x:0:0:root:/root:/bin/bash\n"
BUNDLE_PACKAGE = "ehttpd_test_bundle"


@pytest.fixture
def serving_root(tmp_path: Path) -> Path:
    """
    A serving root with a few resources, and a secret file next to it.

        tmp_path/
            secret.txt          ← outside the root, must never be served
            www/
                style.css       (120 bytes)
                index.html
                README          (no extension)
                empty.txt       (0 bytes)
                LOGO.PNG
                css/site.css
                docs/           (directory)
    """
    (tmp_path / "secret.txt").write_bytes(SECRET)

    root = tmp_path / "www"
    root.mkdir()
    (root / "style.css").write_bytes(STYLE_CSS)
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "README").write_bytes(b"plain readme\n")
    (root / "empty.txt").write_bytes(b"")
    (root / "LOGO.PNG").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "css").mkdir()
    (root / "css" / "site.css").write_bytes(b"h1 { color: red; }\n")
    (root / "docs").mkdir()
    return root


@pytest.fixture
def bundle_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[str, None, None]:
    """
    An importable package carrying web assets as package data.

        ehttpd_test_bundle/
            __init__.py
            web/index.html
            web/css/site.css
    """
    packages = tmp_path / "packages"
    package = packages / BUNDLE_PACKAGE
    (package / "web" / "css").mkdir(parents=True)
    (package / "__init__.py").write_text("")
    (package / "web" / "index.html").write_bytes(INDEX_HTML)
    (package / "web" / "css" / "site.css").write_bytes(STYLE_CSS)

    monkeypatch.delitem(sys.modules, BUNDLE_PACKAGE, raising=False)
    monkeypatch.syspath_prepend(str(packages))

    yield BUNDLE_PACKAGE


@pytest.fixture
def response() -> HTTPResponse:
    """An empty response, as handed to handlers by the pipeline."""
    return HTTPResponse()


def make_request(target: str, method: str = "GET") -> HTTPRequest:
    """Build a request for a request-target."""
    return HTTPRequest.from_target(target, method=method)
