"""Multi-locale orchestration and catalog loading.

Exports:
    TSLocalization - Fallback chains over per-locale Translators
    CatalogLoader - Protocol for custom catalog sources
    PathCatalogLoader - Filesystem loader with traversal protection
    FallbackInfo, CatalogLoadResult, LoadSummary - Observability records
"""

from .loading import (
    CatalogLoader,
    CatalogLoadResult,
    FallbackInfo,
    LoadSummary,
    PathCatalogLoader,
)
from .orchestrator import TSLocalization
from .types import ContextName, LocaleCode, ResourceId, TSSource

__all__ = [
    "CatalogLoadResult",
    "CatalogLoader",
    "ContextName",
    "FallbackInfo",
    "LoadSummary",
    "LocaleCode",
    "PathCatalogLoader",
    "ResourceId",
    "TSLocalization",
    "TSSource",
]
