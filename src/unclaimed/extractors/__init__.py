"""Dependency extraction from fetched manifests and source files.

Public API::

    from unclaimed.extractors import default_registry, ExtractionResult

    result = default_registry().extract(content, url)
    result.names, result.language
"""

from __future__ import annotations

from unclaimed.extractors.base import DependencyExtractor, ExtractionResult
from unclaimed.extractors.javascript import JavaScriptImportExtractor, extract_js_imports
from unclaimed.extractors.package_json import PackageJsonExtractor
from unclaimed.extractors.registry import ExtractorRegistry, default_registry
from unclaimed.extractors.requirements import RequirementsExtractor, parse_requirement_names

__all__ = [
    "DependencyExtractor",
    "ExtractionResult",
    "ExtractorRegistry",
    "JavaScriptImportExtractor",
    "PackageJsonExtractor",
    "RequirementsExtractor",
    "default_registry",
    "extract_js_imports",
    "parse_requirement_names",
]
