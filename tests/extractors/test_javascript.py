"""Tests for JS/TS import-statement analysis."""

from __future__ import annotations

import pytest

from unclaimed.core.classifier import classify_url
from unclaimed.core.models import Language, URLKind
from unclaimed.extractors.javascript import JavaScriptImportExtractor, extract_js_imports


class TestExtractJsImports:
    """Pattern families and exclusions."""

    def test_import_and_relative_require(self) -> None:
        text = "import foo from 'lodash'; const bar = require('./local');"
        assert extract_js_imports(text) == ["lodash"]

    def test_require_double_quotes_and_spaces(self) -> None:
        assert extract_js_imports('const x = require(  "express"  );') == ["express"]

    def test_bare_import(self) -> None:
        assert extract_js_imports('import "polyfill-lib";') == ["polyfill-lib"]

    def test_named_imports(self) -> None:
        text = 'import { a, b as c } from "utils-core";\nimport * as ns from \'ns-pkg\';'
        assert extract_js_imports(text) == ["ns-pkg", "utils-core"]

    def test_scoped_packages_anywhere(self) -> None:
        text = "// depends on @corp/internal-api\nimport x from '@corp/design-system';"
        assert extract_js_imports(text) == ["@corp/design-system", "@corp/internal-api"]

    def test_scoped_token_after_dot_or_slash_rejected(self) -> None:
        text = "const p = 'node_modules/@types/node'; const q = 'a.@x/y';"
        assert extract_js_imports(text) == []

    @pytest.mark.parametrize("spec", [
        "./sibling",
        "../parent/mod",
        "/abs/path",
        "https://cdn.example.com/lib.js",
        "HTTP://cdn.example.com/lib.js",
        "git+https://github.com/org/repo.git",
        "GIT+ssh://example.com/org/repo.git",
    ])
    def test_non_registry_specifiers_rejected(self, spec: str) -> None:
        assert extract_js_imports(f"const m = require('{spec}');") == []

    def test_sorted_and_deduplicated(self) -> None:
        text = "require('zeta'); require('alpha'); import a from 'zeta';"
        assert extract_js_imports(text) == ["alpha", "zeta"]

    def test_no_matches(self) -> None:
        assert extract_js_imports("console.log('hello world');") == []


class TestJavaScriptImportExtractor:
    @pytest.fixture
    def extractor(self) -> JavaScriptImportExtractor:
        return JavaScriptImportExtractor()

    @pytest.mark.parametrize("url", [
        "https://x.example/app.js",
        "https://x.example/app.MJS",
        "https://x.example/lib/index.cjs",
        "https://cdn.example/bundle?file=app.js",
        "https://cdn.example/bundle?file=%61pp.ts",
    ])
    def test_can_extract_code_files(self, extractor: JavaScriptImportExtractor, url: str) -> None:
        assert extractor.can_extract(url)

    @pytest.mark.parametrize("url", [
        "https://x.example/src/main.ts?v=3",
        "https://x.example/app.js#frag?x",
    ])
    def test_matches_classifier_on_query(self, extractor: JavaScriptImportExtractor, url: str) -> None:
        assert extractor.can_extract(url) == (classify_url(url).kind is URLKind.CODE_FILE)

    def test_query_suffix_accepted_by_both(self, extractor: JavaScriptImportExtractor) -> None:
        url = "https://cdn.example/bundle?file=app.js"
        assert classify_url(url).kind is URLKind.CODE_FILE
        assert extractor.can_extract(url)

    def test_cannot_extract_manifest(self, extractor: JavaScriptImportExtractor) -> None:
        assert not extractor.can_extract("https://x.example/requirements.txt")

    def test_result_language_js(self, extractor: JavaScriptImportExtractor) -> None:
        result = extractor.extract("import r from 'react';", "https://x.example/a.js")
        assert result is not None
        assert result.names == ("react",)
        assert result.language is Language.JS

    def test_no_candidates_falls_through(self, extractor: JavaScriptImportExtractor) -> None:
        assert extractor.extract("var x = 1;", "https://x.example/a.js") is None
