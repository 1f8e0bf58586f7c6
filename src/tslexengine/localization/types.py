"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating TSLocalization call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "ContextName",
    "LocaleCode",
    "ResourceId",
    "TSSource",
]

ContextName: TypeAlias = str
"""Context a message belongs to (e.g., 'AboutPage', 'DonationManager')."""

LocaleCode: TypeAlias = str
"""Locale code (e.g., 'fa', 'zh_CN', 'pt-BR')."""

ResourceId: TypeAlias = str
"""TS resource identifier (e.g., 'taot_{locale}.ts', 'app.ts')."""

TSSource: TypeAlias = str | bytes
"""Raw TS document as text or UTF-8 bytes."""
