"""Extractor for npm ``package.json`` manifests.

Collects the keys of the ``dependencies`` and ``devDependencies`` maps.
Any other field (peer, optional, bundled) is ignored.
"""

from __future__ import annotations

import json
from typing import Any

from unclaimed.core.models import Language
from unclaimed.exceptions import ExtractionError
from unclaimed.extractors.base import DependencyExtractor, ExtractionResult, final_segment

DEPENDENCY_FIELDS: tuple[str, ...] = ("dependencies", "devDependencies")


def _dependency_names(document: dict[str, Any], field: str) -> list[str]:
    """Return the keys of one name->version-range map."""
    section = document.get(field)
    if section is None:
        return []
    if not isinstance(section, dict):
        raise ExtractionError(f"'{field}' is not an object")
    for name, spec in section.items():
        if not isinstance(spec, str):
            raise ExtractionError(f"'{field}.{name}' has a non-string version range")
    return list(section)


class PackageJsonExtractor(DependencyExtractor):
    """Reads regular and development dependencies from ``package.json``."""

    def can_extract(self, url: str) -> bool:
        return final_segment(url).lower() == "package.json"

    def extract(self, content: str, url: str) -> ExtractionResult:
        try:
            document = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ExtractionError(f"Invalid JSON in {url}: {exc}") from exc
        if not isinstance(document, dict):
            raise ExtractionError(f"package.json at {url} is not an object")

        names: list[str] = []
        for field in DEPENDENCY_FIELDS:
            names.extend(_dependency_names(document, field))
        return ExtractionResult.of(names, Language.JS)
