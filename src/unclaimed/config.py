"""Run configuration for a scan.

``ScanConfig`` gathers every tunable of a run in one immutable object:
the concurrency limit handed to both pool levels, the per-call network
timeout, TLS verification, the registry lookup templates and the
User-Agent pool. Values come from defaults, an optional YAML file, and
CLI flags, in increasing order of precedence.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from unclaimed.exceptions import ConfigError

MIN_CONCURRENCY: int = 1
MAX_CONCURRENCY: int = 100
DEFAULT_CONCURRENCY: int = 20

# Timeout for every network call (seconds).
DEFAULT_TIMEOUT: float = 30.0

NPM_URL_TEMPLATE: str = "https://registry.npmjs.org/{name}/"
PYPI_URL_TEMPLATE: str = "https://pypi.org/project/{name}/"

DEFAULT_USER_AGENTS: tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:130.0) "
    "Gecko/20100101 Firefox/130.0",
)


def clamp_concurrency(value: int) -> int:
    """Clamp a requested worker count into ``[1, 100]``."""
    return max(MIN_CONCURRENCY, min(MAX_CONCURRENCY, int(value)))


@dataclass(frozen=True)
class ScanConfig:
    """Immutable settings for one scan run.

    Attributes:
        concurrency: Worker limit applied independently at the URL level
            and at the per-URL package level. Always within ``[1, 100]``.
        timeout: Per-call timeout in seconds for fetches and probes.
        verify_tls: Verify server certificates. Disabled by ``--insecure``.
        npm_url_template: Lookup URL for js packages, ``{name}`` placeholder.
        pypi_url_template: Lookup URL for python packages.
        user_agents: Pool of User-Agent strings; one is picked per request.
    """

    concurrency: int = DEFAULT_CONCURRENCY
    timeout: float = DEFAULT_TIMEOUT
    verify_tls: bool = True
    npm_url_template: str = NPM_URL_TEMPLATE
    pypi_url_template: str = PYPI_URL_TEMPLATE
    user_agents: tuple[str, ...] = DEFAULT_USER_AGENTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "concurrency", clamp_concurrency(self.concurrency))
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout!r}")
        for template in (self.npm_url_template, self.pypi_url_template):
            if "{name}" not in template:
                raise ConfigError(f"URL template lacks '{{name}}': {template!r}")
        if not self.user_agents:
            raise ConfigError("user_agents must not be empty")

    def with_overrides(self, **overrides: Any) -> ScanConfig:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def load_config(path: Path) -> ScanConfig:
    """Load a ``ScanConfig`` from a YAML mapping.

    Args:
        path: YAML file whose top-level keys are ``ScanConfig`` field names.

    Returns:
        The parsed configuration. Missing keys keep their defaults.

    Raises:
        ConfigError: If the file cannot be read, is not a mapping, or
            contains unknown keys or invalid values.
    """
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc

    if raw is None:
        return ScanConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    known = {f.name for f in fields(ScanConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    if "user_agents" in raw:
        agents = raw["user_agents"]
        if not isinstance(agents, list) or not all(isinstance(a, str) for a in agents):
            raise ConfigError("user_agents must be a list of strings")
        raw["user_agents"] = tuple(agents)

    try:
        return ScanConfig(**raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid config {path}: {exc}") from exc
