"""Run-scoped registry status cache.

Maps an exact lookup URL to the last HTTP status observed for it. One
instance is created per scan and shared by reference across all worker
threads; a single lock guards every read and write. Entries never expire.
"""

from __future__ import annotations

import threading


class StatusCache:
    """Thread-safe ``lookup URL -> status`` map."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._statuses: dict[str, int] = {}

    def get(self, url: str) -> int | None:
        """Return the cached status for ``url``, or None on a miss."""
        with self._lock:
            return self._statuses.get(url)

    def put(self, url: str, status: int) -> None:
        """Store (or overwrite) the status observed for ``url``."""
        with self._lock:
            self._statuses[url] = status

    def snapshot(self) -> dict[str, int]:
        """Return a copy of all entries."""
        with self._lock:
            return dict(self._statuses)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._statuses

    def __len__(self) -> int:
        with self._lock:
            return len(self._statuses)
