"""Translation completion statistics for TS catalogs.

Python 3.13+.
"""

from dataclasses import dataclass

from tslexengine.enums import TranslationType
from tslexengine.syntax import Catalog

__all__ = ["CatalogStatistics", "catalog_statistics"]


@dataclass(frozen=True, slots=True)
class CatalogStatistics:
    """Message counts of one catalog.

    Attributes:
        language: Catalog language ("" when undeclared)
        contexts: Number of contexts
        finished: Active messages with a finished translation
        unfinished: Messages marked type="unfinished"
        vanished: Messages marked type="vanished"
        obsolete: Messages marked type="obsolete"
        empty: Active messages without any translated text
        numerus: Active numerus messages
        junk: Unreadable messages
    """

    language: str
    contexts: int
    finished: int
    unfinished: int
    vanished: int
    obsolete: int
    empty: int
    numerus: int
    junk: int

    @property
    def active(self) -> int:
        """Messages the application still uses (finished + unfinished)."""
        return self.finished + self.unfinished

    @property
    def total(self) -> int:
        """All messages, including vanished and obsolete ones."""
        return self.active + self.vanished + self.obsolete

    @property
    def completion(self) -> float:
        """Share of active messages that are finished (1.0 for no messages)."""
        if self.active == 0:
            return 1.0
        return self.finished / self.active

    def __str__(self) -> str:
        return (
            f"{self.language or '<unknown>'}: {self.finished}/{self.active} finished "
            f"({self.completion:.0%}), {self.unfinished} unfinished, "
            f"{self.vanished + self.obsolete} obsolete"
        )


def catalog_statistics(catalog: Catalog) -> CatalogStatistics:
    """Count messages of a catalog by translation state.

    Example:
        >>> stats = catalog_statistics(parse(zh_source))
        >>> f"{stats.completion:.0%}"
        '100%'
    """
    counts = dict.fromkeys(TranslationType, 0)
    empty = 0
    numerus = 0
    for _context_name, message in catalog.iter_messages():
        translation = message.translation
        counts[translation.type] += 1
        if not translation.is_active:
            continue
        if translation.is_empty:
            empty += 1
        if message.numerus:
            numerus += 1

    return CatalogStatistics(
        language=catalog.language,
        contexts=len(catalog.contexts),
        finished=counts[TranslationType.FINISHED],
        unfinished=counts[TranslationType.UNFINISHED],
        vanished=counts[TranslationType.VANISHED],
        obsolete=counts[TranslationType.OBSOLETE],
        empty=empty,
        numerus=numerus,
        junk=len(catalog.junk),
    )
