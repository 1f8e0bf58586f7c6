"""Multi-locale orchestration with fallback chains.

Implements TSLocalization: one Translator per locale, tried in priority
order. Separates multi-locale orchestration (TSLocalization) from
single-locale lookup (Translator).

Initialization Behavior:
    TSLocalization loads all catalogs eagerly at construction and collects
    load results in a LoadSummary. FileNotFoundError, read errors and
    unreadable documents are captured in CatalogLoadResult objects with
    NOT_FOUND or ERROR status rather than being raised.

    To detect load failures, call get_load_summary() after construction:

        l10n = TSLocalization(['fa', 'zh_CN'], ['taot_{locale}.ts'], loader)
        summary = l10n.get_load_summary()
        if summary.errors > 0:
            raise RuntimeError(f"Failed to load {summary.errors} catalogs")

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from tslexengine.diagnostics import ErrorTemplate, TSError, TSReferenceError, TSSyntaxError
from tslexengine.enums import LoadStatus
from tslexengine.localization.loading import (
    CatalogLoader,
    CatalogLoadResult,
    FallbackInfo,
    LoadSummary,
)
from tslexengine.localization.types import ContextName, LocaleCode, ResourceId, TSSource
from tslexengine.locale_utils import validate_locale_code
from tslexengine.runtime.placeholders import ArgValue, substitute
from tslexengine.runtime.translator import Translator
from tslexengine.syntax import Catalog

__all__ = ["TSLocalization"]

logger = logging.getLogger(__name__)


class TSLocalization:
    """Multi-locale message lookup with fallback chains.

    Orchestrates one Translator per locale and answers each lookup from the
    first locale holding a usable translation. When no locale does, the
    source text is returned with placeholders substituted, the way a Qt
    application shows untranslated strings.

    Example - Disk-based catalogs:
        >>> loader = PathCatalogLoader("l10n")
        >>> l10n = TSLocalization(['fa', 'zh_CN'], ['taot_{locale}.ts'], loader)
        >>> result, errors = l10n.translate('AboutPage', 'About')

    Example - Direct catalog provision:
        >>> l10n = TSLocalization(['zh_CN'])
        >>> l10n.add_catalog('zh_CN', ts_source)
        >>> result, errors = l10n.translate('DonationManager', '%n coins', n=3)

    Attributes:
        locales: Immutable tuple of locale codes in fallback priority order
    """

    __slots__ = (
        "_include_unfinished",
        "_load_results",
        "_loader",
        "_locales",
        "_on_fallback",
        "_resource_ids",
        "_translators",
    )

    def __init__(
        self,
        locales: Iterable[LocaleCode],
        resource_ids: Iterable[ResourceId] | None = None,
        loader: CatalogLoader | None = None,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
        include_unfinished: bool = True,
    ) -> None:
        """Initialize multi-locale localization.

        Args:
            locales: Locale codes in fallback order (e.g., ['fa', 'en'])
            resource_ids: TS resource identifiers to load
                (e.g., ['taot_{locale}.ts'])
            loader: Loader for fetching TS documents (optional)
            on_fallback: Optional callback invoked when a message is answered
                by a fallback locale instead of the primary locale
            include_unfinished: Use translations marked type="unfinished"

        Raises:
            ValueError: If locales is empty or holds an invalid locale code
            ValueError: If resource_ids provided but no loader
        """
        locale_list = list(locales)
        if not locale_list:
            msg = "At least one locale is required"
            raise ValueError(msg)

        resource_list = list(resource_ids) if resource_ids else []
        if resource_list and loader is None:
            msg = "loader required when resource_ids provided"
            raise ValueError(msg)

        # dict.fromkeys() removes duplicates while maintaining insertion order
        self._locales: tuple[LocaleCode, ...] = tuple(dict.fromkeys(locale_list))
        for locale in self._locales:
            validate_locale_code(locale)

        self._resource_ids: tuple[ResourceId, ...] = tuple(resource_list)
        self._loader = loader
        self._on_fallback = on_fallback
        self._include_unfinished = include_unfinished
        self._translators: dict[LocaleCode, Translator] = {
            locale: Translator(locale, include_unfinished=include_unfinished)
            for locale in self._locales
        }
        self._load_results: list[CatalogLoadResult] = []

        if loader is not None:
            for locale in self._locales:
                for resource_id in self._resource_ids:
                    result = self._load_single_catalog(locale, resource_id, loader)
                    self._load_results.append(result)

    def _load_single_catalog(
        self,
        locale: LocaleCode,
        resource_id: ResourceId,
        loader: CatalogLoader,
    ) -> CatalogLoadResult:
        """Load one TS catalog for one locale and record the result."""
        source_path = loader.describe_path(locale, resource_id)

        try:
            source = loader.load(locale, resource_id)
            catalog = self._translators[locale].add_catalog(source, source_path=source_path)
        except FileNotFoundError:
            # Catalog doesn't exist for this locale - expected for optional locales
            logger.debug("Catalog not found: %s", source_path)
            return CatalogLoadResult(
                locale=locale,
                resource_id=resource_id,
                status=LoadStatus.NOT_FOUND,
                source_path=source_path,
            )
        except (OSError, ValueError, TSSyntaxError) as e:
            # Permission errors, path traversal errors, malformed XML
            logger.warning("Failed to load catalog %s: %s", source_path, e)
            return CatalogLoadResult(
                locale=locale,
                resource_id=resource_id,
                status=LoadStatus.ERROR,
                error=e,
                source_path=source_path,
            )

        return CatalogLoadResult(
            locale=locale,
            resource_id=resource_id,
            status=LoadStatus.SUCCESS,
            source_path=source_path,
            catalog=catalog,
        )

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Get immutable locale fallback chain."""
        return self._locales

    @property
    def include_unfinished(self) -> bool:
        """Whether unfinished translations are used (read-only)."""
        return self._include_unfinished

    def get_load_summary(self) -> LoadSummary:
        """Get summary of catalog load attempts during initialization.

        Catalogs added later through add_catalog() are not included.

        Example:
            >>> summary = l10n.get_load_summary()
            >>> print(f"Loaded: {summary.successful}/{summary.total_attempted}")
            Loaded: 1/2
        """
        return LoadSummary(results=tuple(self._load_results))

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"TSLocalization(locales={self._locales!r}, catalogs={len(self._load_results)})"

    def get_translator(self, locale: LocaleCode) -> Translator:
        """Get the Translator serving one locale of the chain.

        Raises:
            ValueError: If locale not in fallback chain
        """
        translator = self._translators.get(locale)
        if translator is None:
            msg = f"Locale '{locale}' not in fallback chain {self._locales}"
            raise ValueError(msg)
        return translator

    def add_catalog(
        self, locale: LocaleCode, source: Catalog | TSSource, *, source_path: str | None = None
    ) -> Catalog:
        """Add a TS catalog to one locale without a loader.

        Args:
            locale: Locale code (must be in fallback chain)
            source: Parsed Catalog or TS document text/bytes
            source_path: Optional path used in log messages

        Returns:
            The registered Catalog

        Raises:
            ValueError: If locale not in fallback chain
            TSSyntaxError: If the TS document cannot be read
        """
        return self.get_translator(locale).add_catalog(source, source_path=source_path)

    def has_message(self, context: ContextName, source: str, comment: str = "") -> bool:
        """Check if any locale holds a usable translation for the key."""
        return any(
            translator.has_message(context, source, comment)
            for translator in self._translators.values()
        )

    def translate(
        self,
        context: ContextName,
        source: str,
        comment: str = "",
        /,
        args: Sequence[ArgValue] | None = None,
        *,
        n: int | None = None,
    ) -> tuple[str, tuple[TSError, ...]]:
        """Translate with the fallback chain.

        Tries each locale in priority order until one has a usable
        translation, then formats it with that locale's plural rules.

        Returns:
            Tuple of (translated_string, errors)
            - If found: the formatted translation from the first locale
            - If not found: the source text with placeholders substituted,
              and a MESSAGE_NOT_FOUND error first in errors

        Example:
            >>> l10n = TSLocalization(['fa', 'zh_CN'])
            >>> l10n.add_catalog('zh_CN', zh_source)
            >>> l10n.translate('AboutPage', 'About')
            ('关于', ())
        """
        primary_locale = self._locales[0]

        for locale in self._locales:
            translator = self._translators[locale]
            message = translator.get_message(context, source, comment)
            if message is None:
                continue

            if self._on_fallback is not None and locale != primary_locale:
                self._on_fallback(
                    FallbackInfo(
                        requested_locale=primary_locale,
                        resolved_locale=locale,
                        context=context,
                        source=source,
                    )
                )
            return translator.format_message(message, args, n=n, context=context)

        logger.warning(
            "No translation for %r in context %r in any of %s", source, context, self._locales
        )
        error = TSReferenceError(ErrorTemplate.message_not_found(context, source, comment))
        result, format_errors = substitute(source, args or (), count=n, locale=primary_locale)
        return result, (error, *format_errors)

    def tr(
        self,
        context: ContextName,
        source: str,
        comment: str = "",
        /,
        args: Sequence[ArgValue] | None = None,
        *,
        n: int | None = None,
    ) -> str:
        """Translate and return only the string, discarding errors."""
        result, _errors = self.translate(context, source, comment, args, n=n)
        return result
