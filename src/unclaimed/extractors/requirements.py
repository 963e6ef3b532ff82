"""Fallback extractor: line-oriented requirement lists.

Used for ``requirements.txt``-style documents and for anything no other
extractor claimed. Each non-blank line not starting with ``#`` contributes
the token before the first version/extra/marker delimiter.
"""

from __future__ import annotations

import re

from unclaimed.core.models import Language
from unclaimed.extractors.base import DependencyExtractor, ExtractionResult

REQUIREMENT_SPLIT_PATTERN: re.Pattern[str] = re.compile(r"[<>=!~\[\];\s]")


def parse_requirement_names(text: str) -> list[str]:
    """Return the leading package token of every requirement line."""
    names: list[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        name = REQUIREMENT_SPLIT_PATTERN.split(line, maxsplit=1)[0].strip()
        if name:
            names.append(name)
    return names


class RequirementsExtractor(DependencyExtractor):
    """Treats any document as a Python requirement list."""

    def can_extract(self, url: str) -> bool:
        return True

    def extract(self, content: str, url: str) -> ExtractionResult:
        return ExtractionResult.of(parse_requirement_names(content), Language.PYTHON)
