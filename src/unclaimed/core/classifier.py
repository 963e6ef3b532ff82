"""URL classification: keep only URLs that can reference dependencies.

A URL is accepted when its percent-decoded path+query names a known
manifest file as a full path segment, or ends in a JavaScript/TypeScript
source extension. Everything else is dropped without a diagnostic.

Classification is a pure function of the URL string; no network access
happens here.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from urllib.parse import unquote, urlsplit

from unclaimed.core.models import URLKind, URLRecord
from unclaimed.exceptions import URLParseError

logger = logging.getLogger(__name__)

MANIFEST_FILENAMES: tuple[str, ...] = (
    "package.json",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "requirements.txt",
    "pyproject.toml",
    "Pipfile",
    "Pipfile.lock",
    "constraints.txt",
    "setup.py",
    "composer.json",
    "go.mod",
)

CODE_FILE_SUFFIXES: tuple[str, ...] = (".js", ".mjs", ".cjs", ".ts")

ALLOWED_SCHEMES: frozenset[str] = frozenset({"http", "https"})

# Basename must occupy a whole path segment: start or "/" before it,
# end, "?", "#" or "/" after it.
MANIFEST_PATTERN: re.Pattern[str] = re.compile(
    r"(?:^|/)(" + "|".join(re.escape(n) for n in MANIFEST_FILENAMES) + r")(?:$|[?#/])",
    re.IGNORECASE,
)

# "%" not followed by two hex digits. The query is left unchecked.
INVALID_ESCAPE_PATTERN: re.Pattern[str] = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_manifest_path(text: str) -> bool:
    """Return True if ``text`` contains a manifest basename as a full segment."""
    return MANIFEST_PATTERN.search(text) is not None


def looks_like_code_file(text: str) -> bool:
    """Case-insensitive suffix test for ``.js``, ``.mjs``, ``.cjs``, ``.ts``."""
    return text.lower().endswith(CODE_FILE_SUFFIXES)


def parse_url(raw: str) -> URLRecord:
    """Parse an absolute http(s) URL into an unclassified ``URLRecord``.

    Raises:
        URLParseError: If the string cannot be parsed, the scheme is not
            http/https, the host is empty, the port is invalid, or the
            host, path or fragment holds a malformed percent escape.
    """
    try:
        parts = urlsplit(raw)
        # Accessing ``port`` validates it.
        parts.port  # noqa: B018
    except ValueError as exc:
        raise URLParseError(f"Unparseable URL {raw!r}: {exc}") from exc

    if INVALID_ESCAPE_PATTERN.search(parts.netloc + parts.path + parts.fragment):
        raise URLParseError(f"Invalid percent escape in {raw!r}")

    if parts.scheme not in ALLOWED_SCHEMES:
        raise URLParseError(f"Unsupported scheme in {raw!r}")
    if not parts.hostname:
        raise URLParseError(f"Empty host in {raw!r}")

    return URLRecord(
        raw=raw,
        scheme=parts.scheme,
        host=parts.netloc,
        path=parts.path,
        query=parts.query,
    )


def _decoded_target(path: str, query: str) -> str:
    """Percent-decoded path plus ``?query`` when a query is present."""
    if query:
        path += "?" + query
    return unquote(path)


def url_target(raw: str) -> str:
    """Return the percent-decoded path and ``?query`` of ``raw``.

    Returns an empty string when ``raw`` cannot be split.
    """
    try:
        parts = urlsplit(raw)
    except ValueError:
        return ""
    return _decoded_target(parts.path, parts.query)


def classify_url(raw: str) -> URLRecord:
    """Classify a single (already trimmed) URL string.

    Never raises; unparseable input yields a record of kind ``REJECTED``.
    """
    try:
        record = parse_url(raw)
    except URLParseError as exc:
        logger.debug("Rejected input line: %s", exc)
        return URLRecord(raw=raw)

    target = _decoded_target(record.path, record.query)
    if is_manifest_path(target):
        kind = URLKind.MANIFEST
    elif looks_like_code_file(target):
        kind = URLKind.CODE_FILE
    else:
        kind = URLKind.REJECTED
    return URLRecord(
        raw=record.raw,
        scheme=record.scheme,
        host=record.host,
        path=record.path,
        query=record.query,
        kind=kind,
    )


def filter_urls(lines: Iterable[str]) -> list[str]:
    """Trim, dedup and classify input lines, returning accepted URLs.

    Blank lines are dropped. Duplicates are detected by exact string
    equality after trimming; the first occurrence keeps its position.

    Args:
        lines: Raw input lines, possibly blank or repeated.

    Returns:
        Accepted URLs in first-seen order.
    """
    seen: set[str] = set()
    accepted: list[str] = []
    for line in lines:
        url = line.strip()
        if not url or url in seen:
            continue
        seen.add(url)
        if classify_url(url).accepted:
            accepted.append(url)
    return accepted
