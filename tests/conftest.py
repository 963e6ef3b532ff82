"""Shared fixtures for unclaimed tests.

All network access goes through ``FakeWeb`` (see ``tests/helpers.py``).
No test touches the real network.
"""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest

from tests.helpers import FakeWeb
from unclaimed.config import ScanConfig
from unclaimed.registry.cache import StatusCache
from unclaimed.registry.checker import RegistryChecker


@pytest.fixture
def web() -> FakeWeb:
    """Fresh fake web for one test."""
    return FakeWeb()


@pytest.fixture
def client(web: FakeWeb) -> Iterator[httpx.Client]:
    """httpx client wired to the fake web."""
    with web.client() as c:
        yield c


@pytest.fixture
def config() -> ScanConfig:
    """Default configuration with a single worker for deterministic tests."""
    return ScanConfig(concurrency=1, timeout=5.0)


@pytest.fixture
def cache() -> StatusCache:
    return StatusCache()


@pytest.fixture
def checker(client: httpx.Client, cache: StatusCache, config: ScanConfig) -> RegistryChecker:
    """Registry checker backed by the fake web."""
    return RegistryChecker(client, cache, config)
