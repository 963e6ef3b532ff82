"""Tests for URL classification and input filtering.

Classification is pure: every test here runs without network access.
"""

from __future__ import annotations

import pytest

from unclaimed.core.classifier import (
    classify_url,
    filter_urls,
    is_manifest_path,
    looks_like_code_file,
    parse_url,
)
from unclaimed.core.models import URLKind
from unclaimed.exceptions import URLParseError


# ---------------------------------------------------------------------------
# Manifest basename test
# ---------------------------------------------------------------------------


class TestIsManifestPath:
    """Anchored, case-insensitive manifest basename matching."""

    @pytest.mark.parametrize("path", [
        "/package.json",
        "/repo/raw/main/requirements.txt",
        "package-lock.json",
        "/a/yarn.lock?raw=true",
        "/a/pnpm-lock.yaml#L1",
        "/a/Pipfile.lock/",
        "/a/PIPFILE",
        "/a/Package.JSON",
        "/a/go.mod",
        "/blob?path=/setup.py",
    ])
    def test_matches(self, path: str) -> None:
        assert is_manifest_path(path)

    @pytest.mark.parametrize("path", [
        "/mypackage.json",
        "/package.json.bak",
        "/a/requirements.txt~",
        "/raw?file=package.json",
        "/docs/readme.md",
        "",
    ])
    def test_rejects(self, path: str) -> None:
        assert not is_manifest_path(path)


class TestLooksLikeCodeFile:
    """Suffix test for JS/TS sources."""

    @pytest.mark.parametrize("path", ["/a.js", "/a.MJS", "/b/c.cjs", "/d.ts", "/x?y=z.js"])
    def test_matches(self, path: str) -> None:
        assert looks_like_code_file(path)

    @pytest.mark.parametrize("path", ["/a.tsx", "/a.json", "/a.jsx", "/js", "/a.js.map"])
    def test_rejects(self, path: str) -> None:
        assert not looks_like_code_file(path)


# ---------------------------------------------------------------------------
# parse_url / classify_url
# ---------------------------------------------------------------------------


class TestParseUrl:
    """Parsing of absolute http(s) URLs."""

    def test_components(self) -> None:
        rec = parse_url("https://example.com:8443/a/package.json?x=1")
        assert rec.scheme == "https"
        assert rec.host == "example.com:8443"
        assert rec.path == "/a/package.json"
        assert rec.query == "x=1"
        assert rec.kind is URLKind.REJECTED

    @pytest.mark.parametrize("raw", [
        "ftp://example.com/package.json",
        "file:///etc/package.json",
        "https:///package.json",
        "package.json",
        "http://example.com:notaport/package.json",
        "http://[::1/package.json",
        "https://x.example/%zz/package.json",
        "https://x.example/package.json%2",
        "https://x.example/app.js#%g1",
    ])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(URLParseError):
            parse_url(raw)


class TestClassifyUrl:
    """Accept/reject decisions for single URLs."""

    def test_manifest(self) -> None:
        rec = classify_url("https://example.com/app/package.json")
        assert rec.kind is URLKind.MANIFEST
        assert rec.accepted

    def test_code_file(self) -> None:
        rec = classify_url("https://cdn.example.com/static/app.min.js")
        assert rec.kind is URLKind.CODE_FILE
        assert rec.accepted

    def test_manifest_wins_over_suffix(self) -> None:
        rec = classify_url("https://example.com/setup.py/index.js")
        assert rec.kind is URLKind.MANIFEST

    def test_percent_encoded_path_is_decoded(self) -> None:
        rec = classify_url("https://example.com/a/package%2Ejson")
        assert rec.kind is URLKind.MANIFEST

    def test_encoded_slash_in_query(self) -> None:
        rec = classify_url("https://example.com/blob?path=src%2Frequirements.txt")
        assert rec.kind is URLKind.MANIFEST

    def test_fragment_ignored_for_suffix(self) -> None:
        rec = classify_url("https://example.com/a.js#section")
        assert rec.kind is URLKind.CODE_FILE

    def test_malformed_escape_in_path_rejected(self) -> None:
        rec = classify_url("https://x.example/%zz/package.json")
        assert rec.kind is URLKind.REJECTED

    def test_malformed_escape_in_query_tolerated(self) -> None:
        rec = classify_url("https://x.example/get?bad=%zz&file=/package.json")
        assert rec.kind is URLKind.MANIFEST

    def test_uppercase_scheme(self) -> None:
        assert classify_url("HTTPS://example.com/go.mod").accepted

    def test_unrelated_file(self) -> None:
        rec = classify_url("https://example.com/index.html")
        assert rec.kind is URLKind.REJECTED
        assert not rec.accepted

    def test_unparseable_never_raises(self) -> None:
        rec = classify_url("ftp://example.com/package.json")
        assert rec.kind is URLKind.REJECTED
        assert rec.raw == "ftp://example.com/package.json"

    def test_deterministic(self) -> None:
        url = "https://example.com/x/yarn.lock"
        assert classify_url(url) == classify_url(url)


# ---------------------------------------------------------------------------
# filter_urls
# ---------------------------------------------------------------------------


class TestFilterUrls:
    """Trim, dedup and order preservation."""

    def test_empty(self) -> None:
        assert filter_urls([]) == []

    def test_blank_lines_dropped(self) -> None:
        assert filter_urls(["", "   ", "\t"]) == []

    def test_trims_whitespace(self) -> None:
        assert filter_urls(["  https://a.com/package.json \n"]) == ["https://a.com/package.json"]

    def test_dedup_keeps_first_position(self) -> None:
        lines = [
            "https://a.com/package.json",
            "https://b.com/app.js",
            "https://a.com/package.json",
            "https://c.com/requirements.txt",
            "https://b.com/app.js",
        ]
        assert filter_urls(lines) == [
            "https://a.com/package.json",
            "https://b.com/app.js",
            "https://c.com/requirements.txt",
        ]

    def test_dedup_after_trim(self) -> None:
        lines = ["https://a.com/go.mod", " https://a.com/go.mod "]
        assert filter_urls(lines) == ["https://a.com/go.mod"]

    def test_dedup_is_case_sensitive(self) -> None:
        lines = ["https://a.com/go.mod", "https://a.com/GO.MOD"]
        assert filter_urls(lines) == lines

    def test_rejected_lines_dropped_silently(self) -> None:
        lines = [
            "not a url",
            "https://a.com/index.html",
            "mailto:someone@example.com",
            "https://a.com/Pipfile",
        ]
        assert filter_urls(lines) == ["https://a.com/Pipfile"]
