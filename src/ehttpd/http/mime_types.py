r"""
=============================================================================
MIME TYPE CLASSIFIER
=============================================================================

Maps resource names to Content-Type values using an ordered catalog of
name patterns.

=============================================================================
HOW CLASSIFICATION WORKS
=============================================================================

Every rule is a regular expression that must match the WHOLE resource
name (re.fullmatch, not re.search). The catalog is scanned top to bottom
and the first matching rule wins:

    classify("css/site.css")
        │
        ├── name = "site.css"            ← directories are ignored
        │
        ├── BINARY   [^/\\]+\.(?:class|exe|bin)     no
        ├── TEXT     [^/\\]+\.(?:txt|asc)           no
        ├── ...
        ├── CSS      [^/\\]+\.(?:css)               YES → "text/css"
        │
        └── (rules below CSS are never consulted)

No rule matching is not an error. classify() returns None ("unknown") and
the caller decides what to do: fall back to application/octet-stream,
or refuse to serve the resource.

=============================================================================
ORDERING AND EXCLUSIVITY
=============================================================================

Because the first match wins, two rules claiming the same extension would
make the result depend on catalog order. Each extension therefore appears
in exactly one rule, and the test suite checks it.

=============================================================================
CASE SENSITIVITY
=============================================================================

Matching is case-sensitive by default: "LOGO.PNG" is unknown. Build a
MimeClassifier(case_sensitive=False) to accept any case.

=============================================================================
"""

from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable, Optional, Sequence
import re


# Default MIME type for resources no rule recognizes
# application/octet-stream = "I don't know what this is, treat as binary"
DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class MimeRule:
    """
    One catalog entry: a whole-name pattern and the type it maps to.

    Attributes:
        name: Short identifier, e.g. "CSS"
        pattern: Regular expression matched against the full resource name
        content_type: MIME type returned on a match
    """

    name: str
    pattern: str
    content_type: str

    @classmethod
    def for_extensions(cls, name: str, content_type: str, *extensions: str) -> "MimeRule":
        """
        Build a rule matching any name that ends in one of ``extensions``.

        The stem must be at least one character and may not contain a
        path separator, so "photo.jpg" matches the JPEG rule while
        ".jpg" and "jpg" do not.
        """
        alternatives = "|".join(re.escape(ext) for ext in extensions)
        return cls(name, rf"[^/\\]+\.(?:{alternatives})", content_type)


_rule = MimeRule.for_extensions


# =============================================================================
# RULE CATALOG
# =============================================================================
#
# Scanned in declaration order. Keep extensions unique across rules.
#
# =============================================================================

MIME_RULES: tuple[MimeRule, ...] = (
    # -------------------------------------------------------------------------
    # BINARY AND TEXT
    # -------------------------------------------------------------------------
    _rule("BINARY", "application/octet-stream", "class", "exe", "bin"),
    _rule("TEXT", "text/plain", "txt", "asc"),
    _rule("CSV", "text/csv", "csv"),
    _rule("MARKDOWN", "text/markdown", "md"),

    # -------------------------------------------------------------------------
    # MARKUP AND DATA
    # -------------------------------------------------------------------------
    _rule("DTD", "application/xml-dtd", "dtd"),
    _rule("XML", "application/xml", "xml", "xsl", "xsd"),
    _rule("XSLT", "application/xslt+xml", "xslt"),
    _rule("ATOM", "application/atom+xml", "atom"),
    _rule("JSON", "application/json", "json", "map"),
    _rule("CSS", "text/css", "css"),
    _rule("HTML", "text/html", "htm", "html"),
    _rule("XHTML", "application/xhtml+xml", "xhtml"),

    # -------------------------------------------------------------------------
    # SCRIPTS
    # -------------------------------------------------------------------------
    _rule("JS", "text/javascript", "js", "mjs"),
    _rule("DART", "application/dart", "dart"),
    _rule("WASM", "application/wasm", "wasm"),

    # -------------------------------------------------------------------------
    # IMAGES
    # -------------------------------------------------------------------------
    _rule("BMP", "image/bmp", "bmp"),
    _rule("GIF", "image/gif", "gif"),
    _rule("ICO", "image/x-icon", "ico"),
    _rule("JPEG", "image/jpeg", "jpe", "jpeg", "jpg"),
    _rule("PNG", "image/png", "png"),
    _rule("SVG", "image/svg+xml", "svg"),
    _rule("TIFF", "image/tiff", "tif", "tiff"),
    _rule("WEBP", "image/webp", "webp"),

    # -------------------------------------------------------------------------
    # FONTS
    # -------------------------------------------------------------------------
    _rule("WOFF", "font/woff", "woff"),
    _rule("WOFF2", "font/woff2", "woff2"),
    _rule("TTF", "font/ttf", "ttf"),

    # -------------------------------------------------------------------------
    # DOCUMENTS
    # -------------------------------------------------------------------------
    _rule("PDF", "application/pdf", "pdf"),
    _rule("PS", "application/postscript", "ps"),
    _rule("MSWORD", "application/msword", "doc"),
    _rule("MSEXCEL", "application/vnd.ms-excel", "xls"),
    _rule("MSPOWERPOINT", "application/vnd.ms-powerpoint", "ppt"),

    # -------------------------------------------------------------------------
    # AUDIO
    # -------------------------------------------------------------------------
    _rule("MP3", "audio/mpeg", "mp3"),
    _rule("WAV", "audio/wav", "wav"),
    _rule("OGG", "application/ogg", "ogg"),

    # -------------------------------------------------------------------------
    # VIDEO
    # -------------------------------------------------------------------------
    _rule("AVI", "video/x-msvideo", "avi"),
    _rule("MP4", "video/mp4", "mp4"),
    _rule("MPEG", "video/mpeg", "mpe", "mpeg", "mpg"),
    _rule("QUICKTIME", "video/quicktime", "qt", "mov"),
    _rule("WEBM", "video/webm", "webm"),
    _rule("SWF", "application/x-shockwave-flash", "swf"),

    # -------------------------------------------------------------------------
    # ARCHIVES
    # -------------------------------------------------------------------------
    _rule("ZIP", "application/zip", "zip"),
    _rule("GZIP", "application/gzip", "gz"),
    _rule("TAR", "application/x-tar", "tar"),
)


def resource_name(path: str) -> str:
    """
    Return the last segment of a resource path.

    Both "/" and "\\" count as separators so Windows-style names
    classify the same way.

        >>> resource_name("css/site.css")
        'site.css'
        >>> resource_name("css/")
        ''
    """
    return re.split(r"[/\\]", path)[-1]


class MimeClassifier:
    """
    Ordered, first-match-wins classifier over a rule catalog.

    Instances are immutable once built, so one classifier can be shared
    by every handler and every worker thread.

        classifier = MimeClassifier()
        classifier.classify("index.html")   # "text/html"
        classifier.classify("README")       # None
    """

    def __init__(self, rules: Iterable[MimeRule] = MIME_RULES, case_sensitive: bool = True):
        flags = 0 if case_sensitive else re.IGNORECASE
        self.case_sensitive = case_sensitive
        self._rules: tuple[tuple[re.Pattern, MimeRule], ...] = tuple(
            (re.compile(rule.pattern, flags), rule) for rule in rules
        )

    @property
    def rules(self) -> Sequence[MimeRule]:
        """The catalog, in scan order."""
        return tuple(rule for _, rule in self._rules)

    def match(self, name: str) -> Optional[MimeRule]:
        """Return the first rule that fully matches the resource name."""
        name = resource_name(name)
        for pattern, rule in self._rules:
            if pattern.fullmatch(name):
                return rule
        return None

    def matching_rules(self, name: str) -> list[MimeRule]:
        """Return every rule that matches, used to check catalog exclusivity."""
        name = resource_name(name)
        return [rule for pattern, rule in self._rules if pattern.fullmatch(name)]

    def classify(self, name: str) -> Optional[str]:
        """
        Classify a resource by name.

        Args:
            name: Resource name or path; only the last segment is used

        Returns:
            The content type of the first matching rule, or None when the
            name is not recognized.
        """
        rule = self.match(name)
        return rule.content_type if rule else None


_DEFAULT_CLASSIFIER = MimeClassifier()


def classify(name: str) -> Optional[str]:
    """Classify ``name`` with the default case-sensitive catalog."""
    return _DEFAULT_CLASSIFIER.classify(name)


def get_content_type(name: str | PurePath, default: str = DEFAULT_MIME_TYPE) -> str:
    """
    Classify ``name``, falling back to ``default`` for unknown resources.

    Examples:
        >>> get_content_type("style.css")
        'text/css'

        >>> get_content_type("unknown.xyz")
        'application/octet-stream'
    """
    return classify(str(name)) or default


def is_text_type(mime_type: str) -> bool:
    """
    Check if a MIME type represents text content.

    Text content can be served with a charset parameter.
    """
    if mime_type.startswith("text/"):
        return True

    return mime_type in {
        "application/json",
        "application/xml",
        "application/xml-dtd",
        "application/xslt+xml",
        "application/atom+xml",
        "application/xhtml+xml",
        "image/svg+xml",
    }


def with_charset(content_type: str, charset: Optional[str]) -> str:
    """
    Append a charset parameter to text types.

        >>> with_charset("text/css", "utf-8")
        'text/css; charset=utf-8'
        >>> with_charset("image/png", "utf-8")
        'image/png'
    """
    if charset and is_text_type(content_type):
        return f"{content_type}; charset={charset}"
    return content_type
