"""Public registry existence probing.

Public API::

    from unclaimed.registry import RegistryChecker, StatusCache
    from unclaimed.registry.http_client import build_client, fetch_text
"""

from __future__ import annotations

from unclaimed.registry.cache import StatusCache
from unclaimed.registry.checker import EXISTS_STATUSES, RegistryChecker, is_unclaimed_status

__all__ = [
    "EXISTS_STATUSES",
    "RegistryChecker",
    "StatusCache",
    "is_unclaimed_status",
]
