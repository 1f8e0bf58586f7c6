"""Standalone TS catalog validation.

Exports:
    validate_catalog - Parse errors plus translation quality warnings
"""

from .catalog import validate_catalog

__all__ = ["validate_catalog"]
