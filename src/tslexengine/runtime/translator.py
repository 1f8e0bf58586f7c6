"""Translator - Main API for single-locale TS message lookup.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

import logging
import threading
from collections.abc import Sequence
from typing import TypeAlias
from contextlib import AbstractContextManager, nullcontext

from tslexengine.constants import LOG_TRUNCATE_DEBUG, LOG_TRUNCATE_WARNING, MAX_SOURCE_SIZE
from tslexengine.diagnostics import (
    ErrorTemplate,
    TSError,
    TSFormatError,
    TSReferenceError,
    TSSyntaxError,
)
from tslexengine.enums import TranslationType
from tslexengine.locale_utils import get_system_locale, normalize_locale, validate_locale_code
from tslexengine.runtime.placeholders import ArgValue, substitute
from tslexengine.runtime.plural_rules import select_numerus_form
from tslexengine.syntax import Catalog, Message, TSParser

__all__ = ["Translator"]

logger = logging.getLogger(__name__)

_LookupKey: TypeAlias = tuple[str, str, str]


class Translator:
    """Translation lookup for one target locale.

    Holds the active messages of one or more TS catalogs, keyed by
    (context, source, comment), and formats them with numerus selection
    and placeholder substitution. Returns (result, errors) tuples: a
    missing translation is not exceptional, the source text is used.

    Lookup order follows QTranslator: the exact (context, source, comment)
    key first, then the same source without the disambiguation comment.

    Thread Safety:
        By default, translators are NOT thread-safe. For concurrent
        add_catalog(), translate() and lookups use thread_safe=True: every
        method touching the registered messages then holds an internal RLock.

    Examples:
        >>> translator = Translator("zh_CN")
        >>> translator.add_catalog(ts_source)
        >>> result, errors = translator.translate("AboutPage", "About")
        >>> assert result == '关于'
        >>> assert errors == ()
        >>>
        >>> result, errors = translator.translate("MainWindow", "%1 (build %2)", args=["1.4", "27"])
    """

    __slots__ = (
        "_include_unfinished",
        "_locale",
        "_lock",
        "_max_source_size",
        "_messages",
        "_parser",
        "_thread_safe",
    )

    def __init__(
        self,
        locale: str,
        /,
        *,
        include_unfinished: bool = True,
        thread_safe: bool = False,
        max_source_size: int | None = None,
    ) -> None:
        """Initialize translator for locale.

        Args:
            locale: Target locale code (zh_CN, fa, de-DE) [positional-only]
            include_unfinished: Use translations marked type="unfinished"
                (default: True, as lrelease does unless -nounfinished)
            thread_safe: Enable thread-safe operations (default: False)
            max_source_size: Maximum TS source size in bytes (default: 10 MB)

        Raises:
            ValueError: If locale code is empty or has invalid format
        """
        validate_locale_code(locale)

        self._locale = locale
        self._include_unfinished = include_unfinished
        self._messages: dict[_LookupKey, Message] = {}

        self._max_source_size = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        self._parser = TSParser(max_source_size=self._max_source_size)

        self._thread_safe = thread_safe
        self._lock: threading.RLock | None = threading.RLock() if thread_safe else None

        logger.info(
            "Translator initialized for locale: %s (include_unfinished=%s, thread_safe=%s)",
            locale,
            include_unfinished,
            thread_safe,
        )

    @property
    def locale(self) -> str:
        """Get the locale code for this translator (read-only)."""
        return self._locale

    @property
    def include_unfinished(self) -> bool:
        """Whether unfinished translations are used (read-only)."""
        return self._include_unfinished

    @property
    def is_thread_safe(self) -> bool:
        """Check if translator uses thread-safe operations (read-only)."""
        return self._thread_safe

    @property
    def max_source_size(self) -> int:
        """Maximum TS source size in bytes (read-only)."""
        return self._max_source_size

    @property
    def message_count(self) -> int:
        """Number of registered messages."""
        with self._guard():
            return len(self._messages)

    @classmethod
    def for_system_locale(
        cls,
        *,
        include_unfinished: bool = True,
        thread_safe: bool = False,
        max_source_size: int | None = None,
    ) -> "Translator":
        """Factory method to create a Translator using the system locale.

        Detects the current system locale (from locale.getlocale(),
        LC_ALL, LC_MESSAGES, or LANG environment variables).

        Raises:
            RuntimeError: If system locale cannot be determined
        """
        system_locale = get_system_locale(raise_on_failure=True)
        return cls(
            system_locale,
            include_unfinished=include_unfinished,
            thread_safe=thread_safe,
            max_source_size=max_source_size,
        )

    @classmethod
    def from_catalog(
        cls,
        catalog: Catalog,
        *,
        include_unfinished: bool = True,
        thread_safe: bool = False,
    ) -> "Translator":
        """Create a translator for the catalog's language and register it.

        Args:
            catalog: Parsed catalog with a ``language`` attribute

        Raises:
            ValueError: If the catalog has no language
        """
        if not catalog.language:
            msg = "Catalog has no language attribute; pass the locale explicitly"
            raise ValueError(msg)
        translator = cls(
            catalog.language,
            include_unfinished=include_unfinished,
            thread_safe=thread_safe,
        )
        translator.add_catalog(catalog)
        return translator

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> Translator("fa")
            Translator(locale='fa', messages=0)
        """
        return f"Translator(locale={self._locale!r}, messages={self.message_count})"

    def __enter__(self) -> "Translator":
        """Enter context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Exit context manager, dropping registered messages.

        Does not suppress exceptions.
        """
        with self._guard():
            self._messages.clear()
        logger.debug("Translator context exited for locale: %s", self._locale)

    def add_catalog(
        self, catalog: Catalog | str | bytes, /, *, source_path: str | None = None
    ) -> Catalog:
        """Register the active messages of a catalog.

        Vanished and obsolete messages are skipped. A message whose key is
        already registered replaces the earlier one.

        Args:
            catalog: Parsed Catalog, or TS document text/bytes [positional-only]
            source_path: Optional path used in log messages

        Returns:
            The registered Catalog (parsed if source was given)

        Raises:
            TSSyntaxError: If a TS document cannot be read

        Logging:
            Junk entries are logged at WARNING level, the summary at INFO.
        """
        if self._lock is not None:
            with self._lock:
                return self._add_catalog_impl(catalog, source_path)
        return self._add_catalog_impl(catalog, source_path)

    def _add_catalog_impl(self, catalog: Catalog | str | bytes, source_path: str | None) -> Catalog:
        source_desc = source_path or "<string>"
        if not isinstance(catalog, Catalog):
            try:
                catalog = self._parser.parse(catalog)
            except TSSyntaxError as e:
                logger.error("Failed to parse catalog %s: %s", source_desc, e)
                raise

        declared = catalog.language
        if declared and normalize_locale(declared) != normalize_locale(self._locale):
            logger.warning(
                "Catalog %s declares language %r, translator locale is %r",
                source_desc,
                catalog.language,
                self._locale,
            )

        registered = 0
        for context_name, message in catalog.iter_messages():
            if not message.translation.is_active:
                continue
            self._messages[(context_name, message.source, message.comment)] = message
            registered += 1
            logger.debug(
                "Registered message %s::%s", context_name, repr(message.source[:LOG_TRUNCATE_DEBUG])
            )

        for entry in catalog.junk:
            # repr() escapes control characters in logged catalog content
            logger.warning(
                "Unreadable message in %s: %s",
                source_desc,
                repr(entry.content[:LOG_TRUNCATE_WARNING]),
            )

        logger.info(
            "Added catalog %s: %d messages registered, %d junk entries",
            source_desc,
            registered,
            len(catalog.junk),
        )
        return catalog

    def _guard(self) -> AbstractContextManager[object]:
        """The RLock for thread-safe translators, a no-op context otherwise."""
        return self._lock if self._lock is not None else nullcontext()

    def _is_usable(self, message: Message) -> bool:
        translation = message.translation
        if translation.is_empty:
            return False
        return self._include_unfinished or translation.type != TranslationType.UNFINISHED

    def _candidates(self, context: str, source: str, comment: str) -> list[Message]:
        keys = [(context, source, comment)]
        if comment:
            keys.append((context, source, ""))
        return [self._messages[key] for key in keys if key in self._messages]

    def get_message(self, context: str, source: str, comment: str = "") -> Message | None:
        """Find the message that would answer a translate() call.

        Returns None when no registered message has a usable translation.
        """
        with self._guard():
            for message in self._candidates(context, source, comment):
                if self._is_usable(message):
                    return message
        return None

    def has_message(self, context: str, source: str, comment: str = "") -> bool:
        """Check whether a usable translation exists for the key."""
        return self.get_message(context, source, comment) is not None

    def _miss_error(self, context: str, source: str, comment: str) -> TSReferenceError:
        for message in self._candidates(context, source, comment):
            if message.translation.is_empty:
                return TSReferenceError(ErrorTemplate.translation_empty(context, source))
            return TSReferenceError(ErrorTemplate.translation_unfinished(context, source))
        return TSReferenceError(ErrorTemplate.message_not_found(context, source, comment))

    def translate(
        self,
        context: str,
        source: str,
        comment: str = "",
        /,
        args: Sequence[ArgValue] | None = None,
        *,
        n: int | None = None,
    ) -> tuple[str, tuple[TSError, ...]]:
        """Translate a source string with error reporting.

        Args:
            context: Context name (class or QML component) [positional-only]
            source: Source text [positional-only]
            comment: Disambiguation comment [positional-only]
            args: Values for %1..%99 placeholders
            n: Plural count; selects the numerus form and fills %n

        Returns:
            Tuple of (translated_string, errors)
            - translated_string: Translation, or the source text when no
              usable translation exists (placeholders substituted either way)
            - errors: TSReferenceError for a missing translation and
              TSFormatError for placeholder problems

        Examples:
            >>> translator.translate("DonationManager", "%n coins", n=5)
            ('5 个硬币', ())
            >>> translator.translate("Nowhere", "Hello %1", args=["Ann"])
            ('Hello Ann', (TSReferenceError(...),))
        """
        if self._lock is not None:
            with self._lock:
                return self._translate_impl(context, source, comment, args, n)
        return self._translate_impl(context, source, comment, args, n)

    def _translate_impl(
        self,
        context: str,
        source: str,
        comment: str,
        args: Sequence[ArgValue] | None,
        n: int | None,
    ) -> tuple[str, tuple[TSError, ...]]:
        message = self.get_message(context, source, comment)
        if message is None:
            logger.warning(
                "No translation for %r in context %r (locale %s)",
                source[:LOG_TRUNCATE_WARNING],
                context,
                self._locale,
            )
            error = self._miss_error(context, source, comment)
            result, format_errors = substitute(source, args or (), count=n, locale=self._locale)
            return result, (error, *format_errors)

        result, errors = self.format_message(message, args, n=n, context=context)
        if errors:
            logger.warning(
                "Formatting errors for %r in context %r: %d error(s)",
                source[:LOG_TRUNCATE_WARNING],
                context,
                len(errors),
            )
        else:
            logger.debug(
                "Resolved %s::%r: %r",
                context,
                source[:LOG_TRUNCATE_DEBUG],
                result[:LOG_TRUNCATE_DEBUG],
            )
        return result, errors

    def format_message(
        self,
        message: Message,
        args: Sequence[ArgValue] | None = None,
        *,
        n: int | None = None,
        context: str = "",
    ) -> tuple[str, tuple[TSError, ...]]:
        """Format a message's translation for this translator's locale.

        Numerus messages pick their form with this locale's plural rules.
        An empty selected form falls back to the source text.
        Reads no translator state besides the locale, so it needs no lock.

        Args:
            message: Message to format (need not be registered)
            args: Values for %1..%99 placeholders
            n: Plural count
            context: Context name used in error messages

        Returns:
            Tuple of (formatted_string, errors)
        """
        errors: list[TSError] = []
        translation = message.translation

        if message.numerus:
            if n is None:
                errors.append(
                    TSFormatError(ErrorTemplate.count_not_provided("%n"), placeholder="%n")
                )
            text = select_numerus_form(translation.texts, n, self._locale)
        else:
            text = translation.text

        if not text:
            errors.append(
                TSReferenceError(ErrorTemplate.translation_empty(context, message.source))
            )
            text = message.source

        result, format_errors = substitute(text, args or (), count=n, locale=self._locale)
        errors.extend(format_errors)
        return result, tuple(errors)

    def tr(
        self,
        context: str,
        source: str,
        comment: str = "",
        /,
        args: Sequence[ArgValue] | None = None,
        *,
        n: int | None = None,
    ) -> str:
        """Translate and return only the string, discarding errors.

        Errors are still logged. Mirrors QCoreApplication::translate().
        """
        result, _errors = self.translate(context, source, comment, args, n=n)
        return result
