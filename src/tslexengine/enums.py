"""Enumerations for TSLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TranslationType(StrEnum):
    """State of a translation as recorded in the ``type`` attribute.

    StrEnum provides automatic string conversion: str(TranslationType.UNFINISHED) == "unfinished"
    """

    FINISHED = "finished"
    """No ``type`` attribute: translation reviewed and released."""

    UNFINISHED = "unfinished"
    """``type="unfinished"``: new or changed source, translation not yet approved."""

    VANISHED = "vanished"
    """``type="vanished"``: source string no longer found by lupdate."""

    OBSOLETE = "obsolete"
    """``type="obsolete"``: legacy marker for removed source strings."""

    @property
    def is_active(self) -> bool:
        """Whether messages of this type still belong to the application."""
        return self not in (TranslationType.VANISHED, TranslationType.OBSOLETE)


class PlaceholderKind(StrEnum):
    """Kind of placeholder token in a message string."""

    POSITIONAL = "positional"
    """%1 .. %99"""

    COUNT = "count"
    """%n, substituted with the numerus count"""


class LoadStatus(StrEnum):
    """Status of a catalog load operation.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Catalog loaded and parsed."""

    NOT_FOUND = "not_found"
    """Catalog file does not exist for this locale."""

    ERROR = "error"
    """Catalog could not be read or is not a TS document."""


__all__ = [
    "LoadStatus",
    "PlaceholderKind",
    "TranslationType",
]
