"""unclaimed: Dependency-confusion exposure scanner for manifests and source files."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
