"""Registry existence checks for extracted package names.

``RegistryChecker.is_unclaimed`` answers one question: does the public
registry for ``language`` know a package called ``name``? A name it does
not know is unclaimed and can be registered by anyone.

Status handling:
    200 or 302      -- package exists.
    any other code  -- package unclaimed; reported with that code.
    transport error -- cannot confirm; returns ``(False, 0)``.

Cache discipline: the cache lookup and the cache insert are two separate
critical sections. Two threads probing the same new lookup URL at the
same moment may both go to the network; both store the same status.
"""

from __future__ import annotations

import logging

import httpx

from unclaimed.config import ScanConfig
from unclaimed.core.models import Language
from unclaimed.exceptions import ProbeError
from unclaimed.registry.cache import StatusCache
from unclaimed.registry.http_client import probe_status, random_user_agent

logger = logging.getLogger(__name__)

EXISTS_STATUSES: frozenset[int] = frozenset({200, 302})


def is_unclaimed_status(status: int) -> bool:
    """True when ``status`` does not prove the package exists."""
    return status not in EXISTS_STATUSES


class RegistryChecker:
    """Probes npm / PyPI for package existence through a shared cache.

    Usage::

        checker = RegistryChecker(client, StatusCache(), ScanConfig())
        unclaimed, status = checker.is_unclaimed("left-pad", Language.JS)
    """

    def __init__(
        self,
        client: httpx.Client,
        cache: StatusCache,
        config: ScanConfig,
    ) -> None:
        self.client = client
        self.cache = cache
        self.config = config

    def lookup_url(self, name: str, language: Language) -> str:
        """Build the registry lookup URL for ``name``."""
        if language is Language.JS:
            template = self.config.npm_url_template
        else:
            template = self.config.pypi_url_template
        return template.format(name=name)

    def is_unclaimed(self, name: str, language: Language) -> tuple[bool, int]:
        """Check whether ``name`` is unregistered on its public registry.

        Args:
            name: Package name exactly as extracted.
            language: Selects npm (js) or PyPI (python).

        Returns:
            ``(unclaimed, status)``. ``(False, 0)`` when the probe failed.
        """
        url = self.lookup_url(name, language)

        cached = self.cache.get(url)
        if cached is not None:
            return is_unclaimed_status(cached), cached

        try:
            status = probe_status(self.client, url, user_agent=random_user_agent(self.config))
        except ProbeError as exc:
            logger.debug("Cannot confirm %s (%s): %s", name, language.value, exc)
            return False, 0

        self.cache.put(url, status)
        return is_unclaimed_status(status), status
