"""Catalog analysis utilities.

Provides completion statistics for translation progress reports.

Python 3.13+.
"""

from .statistics import CatalogStatistics, catalog_statistics

__all__ = [
    "CatalogStatistics",
    "catalog_statistics",
]
