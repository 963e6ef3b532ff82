"""Extractor registry: pick the right extractor for a fetched document.

The ``ExtractorRegistry`` keeps an ordered list of ``DependencyExtractor``
instances. ``extract(content, url)`` walks them in registration order:

1. Skip extractors whose ``can_extract(url)`` is False.
2. Call ``extract(content, url)``; a non-``None`` result wins.
3. A ``None`` result falls through to the next extractor.

``default_registry()`` registers the built-ins in decision order:
``package.json`` first, then import analysis for source files, then the
requirement-list fallback which accepts everything.
"""

from __future__ import annotations

import logging

from unclaimed.exceptions import ExtractionError
from unclaimed.extractors.base import DependencyExtractor, ExtractionResult
from unclaimed.extractors.javascript import JavaScriptImportExtractor
from unclaimed.extractors.package_json import PackageJsonExtractor
from unclaimed.extractors.requirements import RequirementsExtractor

logger = logging.getLogger(__name__)


class ExtractorRegistry:
    """Ordered collection of dependency extractors.

    Attributes:
        extractors: Registered extractors, tried in this order.
    """

    def __init__(self) -> None:
        self.extractors: list[DependencyExtractor] = []

    def register(self, extractor: DependencyExtractor) -> None:
        """Append an extractor; it is tried after all earlier ones."""
        self.extractors.append(extractor)

    def extract(self, content: str, url: str) -> ExtractionResult:
        """Extract package names from a document fetched from ``url``.

        Raises:
            ExtractionError: If the matching extractor rejects the content,
                or no registered extractor produced a result.
        """
        for extractor in self.extractors:
            if not extractor.can_extract(url):
                continue
            result = extractor.extract(content, url)
            if result is not None:
                logger.debug(
                    "%s: %d name(s) via %s",
                    url, len(result.names), type(extractor).__name__,
                )
                return result
        raise ExtractionError(f"No extractor produced a result for {url}")


def default_registry() -> ExtractorRegistry:
    """Create an ExtractorRegistry pre-loaded with the built-in extractors."""
    registry = ExtractorRegistry()
    registry.register(PackageJsonExtractor())
    registry.register(JavaScriptImportExtractor())
    registry.register(RequirementsExtractor())
    return registry
