"""Shared test helpers: an in-memory web served through httpx.MockTransport."""

from __future__ import annotations

import threading

import httpx

NPM = "https://registry.npmjs.org/{}/"
PYPI = "https://pypi.org/project/{}/"


class FakeWeb:
    """In-memory web: documents for GET, statuses for HEAD.

    Attributes:
        pages: URL -> (status, body) served on GET. Unknown URLs get 404.
        statuses: URL -> status served on HEAD. Unknown URLs get 404.
        broken: URLs that raise a connection error for any method.
        calls: Every (method, url) requested, in arrival order.
    """

    def __init__(self) -> None:
        self.pages: dict[str, tuple[int, str]] = {}
        self.statuses: dict[str, int] = {}
        self.broken: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def page(self, url: str, body: str, status: int = 200) -> None:
        self.pages[url] = (status, body)

    def npm(self, name: str, status: int) -> None:
        self.statuses[NPM.format(name)] = status

    def pypi(self, name: str, status: int) -> None:
        self.statuses[PYPI.format(name)] = status

    def count(self, method: str, url: str) -> int:
        with self._lock:
            return sum(1 for c in self.calls if c == (method, url))

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        with self._lock:
            self.calls.append((request.method, url))
        if url in self.broken:
            raise httpx.ConnectError("connection refused", request=request)
        if request.method == "HEAD":
            return httpx.Response(self.statuses.get(url, 404))
        status, body = self.pages.get(url, (404, "not found"))
        return httpx.Response(status, text=body)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))
