"""Data models for the scan pipeline.

These are the value types passed between the classifier, the extractors,
the registry checker and the reporter. They are intentionally decoupled
from the pipeline so that the CLI can import them without pulling in any
network code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    """Coarse ecosystem tag; selects which public registry is probed."""

    JS = "js"
    PYTHON = "python"


class URLKind(str, Enum):
    """Classification of one input URL."""

    MANIFEST = "manifest"
    CODE_FILE = "code_file"
    REJECTED = "rejected"


# ---------------------------------------------------------------------------
# URLRecord: One classified input line
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class URLRecord:
    """A single input URL after parsing and classification.

    Attributes:
        raw: The trimmed input line, exactly as it will be fetched.
        scheme: Lower-cased URL scheme (``http`` or ``https`` when accepted).
        host: Network location (host and optional port).
        path: Raw (still percent-encoded) path component.
        query: Raw query string without the leading ``?``.
        kind: Manifest, code file, or rejected.
    """

    raw: str
    scheme: str = ""
    host: str = ""
    path: str = ""
    query: str = ""
    kind: URLKind = URLKind.REJECTED

    @property
    def accepted(self) -> bool:
        """True when the URL should be fetched and scanned."""
        return self.kind is not URLKind.REJECTED


@dataclass(frozen=True)
class Dependency:
    """A package name referenced by one fetched document."""

    name: str
    language: Language


# ---------------------------------------------------------------------------
# Vulnerability: A confirmed-unclaimed package
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Vulnerability:
    """A package name the public registry does not know about.

    Attributes:
        package: The unclaimed package name as found in the document.
        status: HTTP status returned by the registry probe (e.g. 404).
        language: Ecosystem of the registry that was probed.
        url: The target URL the name was extracted from.
    """

    package: str
    status: int
    language: Language
    url: str

    def as_dict(self) -> dict[str, str | int]:
        """Return a JSON-serializable representation."""
        return {
            "package": self.package,
            "status": self.status,
            "language": self.language.value,
            "url": self.url,
        }


@dataclass
class ScanStats:
    """Aggregate counters for a single scan run.

    Attributes:
        lines_received: Input lines handed to the classifier.
        urls_accepted: URLs that survived classification and dedup.
        urls_failed: URLs abandoned because fetch or extraction failed.
        packages_checked: Deduplicated package names probed, summed over URLs.
        vulnerabilities: Number of unclaimed packages reported.
        cache_entries: Distinct registry lookup URLs in the status cache.
    """

    lines_received: int = 0
    urls_accepted: int = 0
    urls_failed: int = 0
    packages_checked: int = 0
    vulnerabilities: int = 0
    cache_entries: int = 0
