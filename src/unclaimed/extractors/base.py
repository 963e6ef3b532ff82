"""Base interface and data structures for dependency extractors.

Every extractor implements the ``DependencyExtractor`` abstract base class,
which provides two methods:

- ``can_extract(url)`` -- Decide from the target URL alone whether this
  extractor applies to the document behind it.
- ``extract(content, url)`` -- Pull candidate package names out of the
  fetched document.

``extract`` may return ``None`` to mean "applies, but found nothing I
recognise"; the registry then falls through to the next extractor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from posixpath import basename
from urllib.parse import unquote, urlsplit

from unclaimed.core.models import Dependency, Language


@dataclass(frozen=True)
class ExtractionResult:
    """Package names found in one document.

    Attributes:
        names: Deduplicated names in lexicographic order.
        language: Registry ecosystem the names belong to.
    """

    names: tuple[str, ...]
    language: Language

    @classmethod
    def of(cls, names: Iterable[str], language: Language) -> ExtractionResult:
        """Build a result from any iterable, deduplicating and sorting."""
        return cls(names=tuple(sorted(set(names))), language=language)

    @property
    def dependencies(self) -> tuple[Dependency, ...]:
        """The names paired with the result language."""
        return tuple(Dependency(name, self.language) for name in self.names)


def url_path(url: str) -> str:
    """Return the percent-decoded path component of ``url``."""
    try:
        return unquote(urlsplit(url).path)
    except ValueError:
        return ""


def final_segment(url: str) -> str:
    """Return the last path segment of ``url`` (query and fragment excluded)."""
    return basename(url_path(url).rstrip("/"))


class DependencyExtractor(ABC):
    """Abstract base class for dependency extractors."""

    @abstractmethod
    def can_extract(self, url: str) -> bool:
        """Return True if this extractor handles documents at ``url``.

        Must be cheap and must not touch the network.
        """

    @abstractmethod
    def extract(self, content: str, url: str) -> ExtractionResult | None:
        """Extract package names from ``content``.

        Args:
            content: Fetched document body.
            url: The URL the document came from.

        Returns:
            An ``ExtractionResult``, or ``None`` to let the next extractor
            try.

        Raises:
            ExtractionError: If the document is structurally invalid.
        """
