"""Shared synchronous HTTP client utilities.

Provides one ``httpx.Client`` per scan run with a fixed per-call timeout,
proxy settings from the environment, and a rotating browser User-Agent.
The client is shared by every worker thread; it only holds the
connection pool.

Every call is attempted exactly once. Timeouts are treated like any other
transport failure.
"""

from __future__ import annotations

import logging
import random

import httpx

from unclaimed.config import ScanConfig
from unclaimed.exceptions import FetchError, ProbeError

logger = logging.getLogger(__name__)


def build_client(config: ScanConfig) -> httpx.Client:
    """Create the reusable client for one run.

    Args:
        config: Timeout and TLS settings.

    Returns:
        An ``httpx.Client``; the caller owns and closes it.
    """
    return httpx.Client(
        timeout=config.timeout,
        verify=config.verify_tls,
        follow_redirects=True,
        trust_env=True,
        limits=httpx.Limits(
            max_connections=None,
            max_keepalive_connections=config.concurrency,
        ),
    )


def random_user_agent(config: ScanConfig) -> str:
    """Pick one User-Agent from the configured pool."""
    return random.choice(config.user_agents)


def fetch_text(client: httpx.Client, url: str, *, user_agent: str) -> str:
    """GET ``url`` and return the body as text.

    The response status is not inspected; an error page is returned like
    any other body.

    Raises:
        FetchError: On transport failure or timeout.
    """
    try:
        resp = client.get(url, headers={"User-Agent": user_agent})
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(f"Request error for {url}: {exc}") from exc
    return resp.text


def probe_status(client: httpx.Client, url: str, *, user_agent: str) -> int:
    """Send a HEAD request to ``url`` and return the final status code.

    No response body is read.

    Raises:
        ProbeError: On transport failure or timeout.
    """
    try:
        resp = client.head(url, headers={"User-Agent": user_agent})
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ProbeError(f"Probe failed for {url}: {exc}") from exc
    return resp.status_code
