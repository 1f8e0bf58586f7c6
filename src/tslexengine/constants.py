"""Shared constants for TSLexEngine.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: size constraints on TS documents
- Serialization defaults: values written when a catalog omits them
- Logging limits: truncation of user content in log records

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Serialization defaults
    "DEFAULT_TS_VERSION",
    "CANONICAL_PLURAL_ORDER",
    "PLURAL_SAMPLE_RANGE",
    # Logging limits
    "LOG_TRUNCATE_WARNING",
    "LOG_TRUNCATE_DEBUG",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum TS source size in bytes (10 MB).
# lupdate output for large applications stays well below 1 MB.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# SERIALIZATION DEFAULTS
# ============================================================================

# TS format version written when the catalog does not carry one.
DEFAULT_TS_VERSION: str = "2.1"

# CLDR plural categories in canonical order. Numerus forms follow this order.
CANONICAL_PLURAL_ORDER: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Integer counts sampled to find the categories a locale reaches with %n.
# Categories only reachable by fractions or by 10^6 multiples are excluded.
PLURAL_SAMPLE_RANGE: range = range(0, 1001)

# ============================================================================
# LOGGING LIMITS
# ============================================================================

# Warnings show more context (100 chars) as they're surfaced to users.
# Debug messages are high-volume, shorter (50 chars) keeps logs manageable.
LOG_TRUNCATE_WARNING: int = 100
LOG_TRUNCATE_DEBUG: int = 50
