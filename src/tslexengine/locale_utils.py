"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
TS catalogs carry POSIX codes in their ``language`` attribute (``zh_CN``),
while callers often pass BCP-47 (``zh-CN``); both end up in one form here.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "validate_locale_code",
]

_PSEUDO_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Strips an encoding suffix (``.UTF-8``) and converts hyphens to
    underscores. Case is preserved because TS ``language`` attributes are
    compared verbatim by Qt tooling.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "zh_CN.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "zh_CN")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("zh_CN.UTF-8")
        'zh_CN'
        >>> normalize_locale("fa")
        'fa'
    """
    return locale_code.split(".", 1)[0].replace("-", "_")


def validate_locale_code(locale_code: str) -> None:
    """Validate locale code format.

    Checks that locale is non-empty and contains only alphanumeric
    characters with optional underscore, hyphen or ``@`` modifier separators.

    Raises:
        ValueError: If locale code is empty or has invalid format
    """
    if not locale_code:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)

    if not locale_code.replace("_", "").replace("-", "").replace("@", "").isalnum():
        msg = f"Invalid locale code format: '{locale_code}'"
        raise ValueError(msg)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a TS ``language`` value (or any caller locale) into a Babel Locale.

    Results are cached: numerus selection asks for the same few locales
    on every lookup.

    Raises:
        babel.core.UnknownLocaleError: CLDR has no data for the locale
        ValueError: The code cannot be parsed at all
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    # Qt script modifiers (sr@latin) have no Babel equivalent
    language_tag = normalize_locale(locale_code).partition("@")[0]
    return Locale.parse(language_tag)


def _locale_candidates() -> Iterator[str]:
    """Raw locale names from the OS, most specific first."""
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _encoding = locale_module.getlocale()
    except ValueError:
        system_locale = None
    if system_locale:
        yield system_locale

    # LC_ALL overrides LC_MESSAGES, which overrides LANG
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        yield os.environ.get(var, "")


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale a desktop Qt application would pick up.

    Checks ``locale.getlocale()`` and then the LC_ALL, LC_MESSAGES and LANG
    variables, skipping the "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: Raise RuntimeError instead of returning "en_US"
            when nothing usable is set

    Returns:
        POSIX locale code without encoding (e.g. "fa_IR")
    """
    for candidate in _locale_candidates():
        code = normalize_locale(candidate)
        if code not in _PSEUDO_LOCALES:
            return code

    if raise_on_failure:
        msg = "Could not determine system locale from getlocale(), LC_ALL, LC_MESSAGES or LANG"
        raise RuntimeError(msg)

    return "en_US"
