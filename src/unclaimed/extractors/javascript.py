"""Import-statement analysis for JavaScript and TypeScript sources.

Two families of matches are unioned:

1. Scoped package tokens (``@owner/name``) anywhere in the text, unless
   immediately preceded by ``.`` or ``/`` (relative paths such as
   ``./@types/x``).
2. The quoted specifier of ``require("...")`` calls and
   ``import ... from "..."`` / ``import "..."`` statements.

Specifiers that are relative or absolute paths, plain URLs, or ``git+``
references are not registry packages and are discarded.
"""

from __future__ import annotations

import re

from unclaimed.core.classifier import looks_like_code_file, url_target
from unclaimed.core.models import Language
from unclaimed.extractors.base import DependencyExtractor, ExtractionResult

SCOPED_PACKAGE_PATTERN: re.Pattern[str] = re.compile(r"(?<![./])@[\w.-]+/[\w.-]+")

IMPORT_PATTERN: re.Pattern[str] = re.compile(
    r"""(?:require\(\s*['"]([^'"]+)['"]\s*\))"""
    r"""|(?:import\s+(?:.+?\s+from\s+)?['"]([^'"]+)['"])"""
)

_NON_REGISTRY_PREFIXES: tuple[str, ...] = ("http://", "https://", "git+")


def _is_registry_specifier(spec: str) -> bool:
    if spec.startswith((".", "/")):
        return False
    return not spec.lower().startswith(_NON_REGISTRY_PREFIXES)


def extract_js_imports(text: str) -> list[str]:
    """Return candidate package names referenced by JS/TS source text.

    Args:
        text: Raw source code.

    Returns:
        Sorted, deduplicated package specifiers.
    """
    found: set[str] = set(SCOPED_PACKAGE_PATTERN.findall(text))

    for required, imported in IMPORT_PATTERN.findall(text):
        spec = (required or imported).strip()
        if spec and _is_registry_specifier(spec):
            found.add(spec)

    return sorted(found)


class JavaScriptImportExtractor(DependencyExtractor):
    """Finds imported packages in ``.js``/``.mjs``/``.cjs``/``.ts`` files."""

    def can_extract(self, url: str) -> bool:
        return looks_like_code_file(url_target(url))

    def extract(self, content: str, url: str) -> ExtractionResult | None:
        names = extract_js_imports(content)
        if not names:
            return None
        return ExtractionResult.of(names, Language.JS)
