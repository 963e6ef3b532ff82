"""Scan pipeline: classify, fetch, extract, probe, aggregate.

Data flow::

    input lines
      -> filter_urls()                      accepted, deduplicated URLs
      -> outer run_workers() over URLs      fetch + extract per URL
      -> inner run_workers() over names     RegistryChecker per name
      -> flatten per-URL findings           list[Vulnerability]

Failure policy: a URL whose fetch or extraction fails is abandoned
silently; its siblings are unaffected. A probe failure is "no finding".
Nothing is retried and nothing is cancelled. Output order is the
completion order of the outer pool.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from unclaimed.config import ScanConfig
from unclaimed.core.classifier import filter_urls
from unclaimed.core.models import Language, ScanStats, Vulnerability
from unclaimed.core.pool import run_workers
from unclaimed.extractors import ExtractorRegistry, default_registry
from unclaimed.registry.cache import StatusCache
from unclaimed.registry.checker import RegistryChecker
from unclaimed.registry.http_client import build_client, fetch_text, random_user_agent

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]


@dataclass
class UrlScan:
    """Outcome of scanning one target URL.

    Attributes:
        url: The target URL.
        language: Ecosystem of the extracted names.
        packages_checked: Deduplicated names sent to the registry checker.
        vulnerabilities: Unclaimed packages found for this URL.
    """

    url: str
    language: Language
    packages_checked: int = 0
    vulnerabilities: list[Vulnerability] = field(default_factory=list)


def dedup_names(names: Iterable[str]) -> list[str]:
    """Trim names and drop empties and exact duplicates, keeping order."""
    seen: set[str] = set()
    unique: list[str] = []
    for raw in names:
        name = raw.strip()
        if name and name not in seen:
            seen.add(name)
            unique.append(name)
    return unique


class ScanPipeline:
    """Drives a full scan over a batch of input lines.

    Args:
        checker: Registry checker shared by every package task.
        fetcher: Callable returning the body of a target URL; raises
            ``FetchError`` on failure.
        extractors: Extractor registry used on every fetched document.
        concurrency: Limit for both the URL pool and each package pool.
    """

    def __init__(
        self,
        checker: RegistryChecker,
        fetcher: Fetcher,
        extractors: ExtractorRegistry | None = None,
        concurrency: int = 1,
    ) -> None:
        self.checker = checker
        self.fetcher = fetcher
        self.extractors = extractors or default_registry()
        self.concurrency = concurrency

    def scan_url(self, url: str) -> UrlScan:
        """Fetch one URL, extract its names, and probe each of them.

        Raises:
            FetchError: If the content cannot be downloaded.
            ExtractionError: If the content cannot be interpreted.
        """
        content = self.fetcher(url)
        extracted = self.extractors.extract(content, url)
        names = dedup_names(dep.name for dep in extracted.dependencies)
        language = extracted.language
        scan = UrlScan(url=url, language=language, packages_checked=len(names))
        if not names:
            return scan

        def _check(name: str) -> Vulnerability | None:
            unclaimed, status = self.checker.is_unclaimed(name, language)
            if not unclaimed:
                return None
            return Vulnerability(package=name, status=status, language=language, url=url)

        outcome = run_workers(names, _check, self.concurrency)
        scan.vulnerabilities = outcome.successful()
        return scan

    def run(self, lines: Iterable[str]) -> tuple[list[Vulnerability], ScanStats]:
        """Scan every acceptable URL among ``lines``.

        Args:
            lines: Raw candidate URLs, one per element.

        Returns:
            Tuple of (flattened vulnerabilities, ScanStats).
        """
        lines = list(lines)
        urls = filter_urls(lines)
        stats = ScanStats(lines_received=len(lines), urls_accepted=len(urls))

        outcome = run_workers(urls, self.scan_url, self.concurrency)
        stats.urls_failed = outcome.failures
        if outcome.first_error is not None:
            logger.debug(
                "%d of %d URL(s) abandoned; first error: %s",
                outcome.failures, len(urls), outcome.first_error,
            )

        vulnerabilities: list[Vulnerability] = []
        for url_scan in outcome.successful():
            stats.packages_checked += url_scan.packages_checked
            vulnerabilities.extend(url_scan.vulnerabilities)
        stats.vulnerabilities = len(vulnerabilities)
        stats.cache_entries = len(self.checker.cache)
        return vulnerabilities, stats


def scan(lines: Iterable[str], config: ScanConfig | None = None) -> tuple[list[Vulnerability], ScanStats]:
    """Run one complete scan with a fresh client and status cache.

    The HTTP client and the cache live exactly as long as this call.

    Args:
        lines: Raw candidate URLs.
        config: Run settings; defaults to ``ScanConfig()``.

    Returns:
        Tuple of (vulnerabilities, ScanStats).
    """
    config = config or ScanConfig()
    with build_client(config) as client:
        checker = RegistryChecker(client, StatusCache(), config)

        def _fetch(url: str) -> str:
            return fetch_text(client, url, user_agent=random_user_agent(config))

        pipeline = ScanPipeline(checker, _fetch, default_registry(), config.concurrency)
        return pipeline.run(lines)
