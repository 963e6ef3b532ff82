"""Core scanning primitives: data models, URL classification, worker pool.

Public API::

    from unclaimed.core import filter_urls, run_workers, Vulnerability
    from unclaimed.core.pipeline import ScanPipeline, scan
"""

from __future__ import annotations

from unclaimed.core.classifier import classify_url, filter_urls, parse_url
from unclaimed.core.models import (
    Dependency,
    Language,
    ScanStats,
    URLKind,
    URLRecord,
    Vulnerability,
)
from unclaimed.core.pool import PoolResult, run_workers

__all__ = [
    "Dependency",
    "Language",
    "PoolResult",
    "ScanStats",
    "URLKind",
    "URLRecord",
    "Vulnerability",
    "classify_url",
    "filter_urls",
    "parse_url",
    "run_workers",
]
