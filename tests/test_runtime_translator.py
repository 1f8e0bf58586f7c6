"""Tests for Translator single-locale lookup.

Lookup by (context, source, comment), disambiguation fallback, numerus
selection, placeholder substitution, unfinished handling and logging.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from unittest.mock import patch

import pytest

from tslexengine import Translator
from tslexengine.diagnostics import DiagnosticCode, TSError, TSSyntaxError
from tslexengine.syntax import Catalog, parse


def _codes(errors: tuple[TSError, ...]) -> list[DiagnosticCode]:
    return [e.diagnostic.code for e in errors if e.diagnostic is not None]


def _catalog(body: str, language: str = "de") -> str:
    return f'<TS version="2.1" language="{language}"><context><name>Main</name>{body}</context></TS>'


@pytest.fixture
def zh(zh_source: str) -> Translator:
    translator = Translator("zh_CN")
    translator.add_catalog(zh_source)
    return translator


class TestConstruction:
    """Initialization, factories and dunder methods."""

    def test_locale_property(self) -> None:
        """The locale is kept as given."""
        assert Translator("zh-CN").locale == "zh-CN"

    @pytest.mark.parametrize("locale", ["", "en US", "de/DE"])
    def test_invalid_locale(self, locale: str) -> None:
        """Invalid locale codes are rejected."""
        with pytest.raises(ValueError, match="Locale code|Invalid locale"):
            Translator(locale)

    def test_defaults(self) -> None:
        """Unfinished translations are used and no lock is held by default."""
        translator = Translator("fa")

        assert translator.include_unfinished
        assert not translator.is_thread_safe
        assert translator.max_source_size == 10 * 1024 * 1024
        assert translator.message_count == 0

    def test_repr(self, zh: Translator) -> None:
        """repr shows locale and message count."""
        assert repr(zh) == "Translator(locale='zh_CN', messages=5)"

    def test_from_catalog(self, zh_source: str) -> None:
        """from_catalog uses the catalog language."""
        translator = Translator.from_catalog(parse(zh_source))

        assert translator.locale == "zh_CN"
        assert translator.tr("AboutPage", "About") == "关于"

    def test_from_catalog_without_language(self) -> None:
        """A catalog without language needs an explicit locale."""
        with pytest.raises(ValueError, match="no language"):
            Translator.from_catalog(Catalog())

    def test_for_system_locale(self) -> None:
        """for_system_locale uses the detected locale."""
        with patch("tslexengine.runtime.translator.get_system_locale", return_value="fa"):
            translator = Translator.for_system_locale()

        assert translator.locale == "fa"

    def test_context_manager_clears_messages(self, zh_source: str) -> None:
        """Leaving the with block drops registered messages."""
        with Translator("zh_CN") as translator:
            translator.add_catalog(zh_source)
            assert translator.message_count == 5

        assert translator.message_count == 0


class TestAddCatalog:
    """Catalog registration."""

    def test_returns_parsed_catalog(self, zh_source: str) -> None:
        """add_catalog parses text and returns the catalog."""
        catalog = Translator("zh_CN").add_catalog(zh_source)

        assert isinstance(catalog, Catalog)
        assert catalog.language == "zh_CN"

    def test_accepts_bytes(self, zh_source: str) -> None:
        """UTF-8 bytes are accepted."""
        translator = Translator("zh_CN")
        translator.add_catalog(zh_source.encode("utf-8"))

        assert translator.tr("AboutPage", "About") == "关于"

    def test_vanished_and_obsolete_skipped(self) -> None:
        """Only active messages are registered."""
        translator = Translator("de")
        translator.add_catalog(
            _catalog(
                '<message><source>A</source><translation type="vanished">a</translation></message>'
                '<message><source>B</source><translation type="obsolete">b</translation></message>'
                "<message><source>C</source><translation>c</translation></message>"
            )
        )

        assert translator.message_count == 1
        assert translator.tr("Main", "A") == "A"

    def test_later_catalog_overrides(self) -> None:
        """A later registration of the same key wins."""
        translator = Translator("de")
        translator.add_catalog(_catalog("<message><source>Hi</source><translation>Hallo</translation></message>"))
        translator.add_catalog(_catalog("<message><source>Hi</source><translation>Servus</translation></message>"))

        assert translator.tr("Main", "Hi") == "Servus"

    def test_malformed_catalog_raises(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unreadable documents raise and are logged."""
        translator = Translator("de")

        with caplog.at_level(logging.ERROR), pytest.raises(TSSyntaxError):
            translator.add_catalog("<TS><context>", source_path="broken.ts")

        assert "broken.ts" in caplog.text

    def test_language_mismatch_logged(self, zh_source: str, caplog: pytest.LogCaptureFixture) -> None:
        """A catalog for another language is registered with a warning."""
        with caplog.at_level(logging.WARNING):
            Translator("fa").add_catalog(zh_source)

        assert "declares language 'zh_CN'" in caplog.text

    def test_bcp47_locale_matches_catalog(self, zh_source: str, caplog: pytest.LogCaptureFixture) -> None:
        """zh-CN and zh_CN are the same language."""
        with caplog.at_level(logging.WARNING):
            Translator("zh-CN").add_catalog(zh_source)

        assert "declares language" not in caplog.text

    def test_junk_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unreadable messages are logged as warnings."""
        with caplog.at_level(logging.WARNING):
            Translator("de").add_catalog(_catalog("<message><translation>x</translation></message>"))

        assert "Unreadable message" in caplog.text


class TestTranslate:
    """Lookup and formatting."""

    def test_plain_message(self, zh: Translator) -> None:
        """A finished translation is returned without errors."""
        assert zh.translate("AboutPage", "About") == ("关于", ())

    def test_placeholder(self, zh: Translator) -> None:
        """Arguments fill positional placeholders in the translation."""
        assert zh.translate("AboutPage", "Version: <b>%1</b>", args=["1.4"]) == (
            "版本：<b>1.4</b>",
            (),
        )

    def test_with_disambiguation(self, zh: Translator) -> None:
        """The comment is part of the key."""
        result, errors = zh.translate(
            "LanguageListModel", "Unknown (%1)", "Unknown language", args=["xx"]
        )

        assert result == "未知语言(xx)"
        assert errors == ()

    def test_comment_falls_back_to_plain_key(self, zh: Translator) -> None:
        """A lookup with a comment finds the message registered without one."""
        assert zh.translate("AboutPage", "About", "menu entry") == ("关于", ())

    def test_plain_key_does_not_find_commented_message(self, zh: Translator) -> None:
        """A message registered with a comment needs that comment."""
        result, errors = zh.translate("--------", "AUTHORS")

        assert result == "AUTHORS"
        assert _codes(errors) == [DiagnosticCode.MESSAGE_NOT_FOUND]

    def test_context_is_part_of_key(self, zh: Translator) -> None:
        """The same source in another context is a different message."""
        result, errors = zh.translate("MainPage", "About")

        assert result == "About"
        assert _codes(errors) == [DiagnosticCode.MESSAGE_NOT_FOUND]

    def test_missing_message_substitutes_source(self, zh: Translator) -> None:
        """The source text is used with placeholders filled."""
        result, errors = zh.translate("Nowhere", "Hello %1", args=["Ann"])

        assert result == "Hello Ann"
        assert _codes(errors) == [DiagnosticCode.MESSAGE_NOT_FOUND]

    def test_missing_message_logged(self, zh: Translator, caplog: pytest.LogCaptureFixture) -> None:
        """Misses are logged as warnings."""
        with caplog.at_level(logging.WARNING):
            zh.translate("Nowhere", "Hello")

        assert "No translation for 'Hello'" in caplog.text

    def test_formatting_errors_reported(self, zh: Translator) -> None:
        """Placeholder problems come back with the translation."""
        result, errors = zh.translate("AboutPage", "Version: <b>%1</b>")

        assert result == "版本：<b>%1</b>"
        assert _codes(errors) == [DiagnosticCode.ARGUMENT_MISSING]

    def test_tr_discards_errors(self, zh: Translator) -> None:
        """tr returns only the string."""
        assert zh.tr("Nowhere", "Hello %1", args=["Ann"]) == "Hello Ann"

    def test_has_message(self, zh: Translator) -> None:
        """has_message reports usable translations."""
        assert zh.has_message("AboutPage", "About")
        assert not zh.has_message("AboutPage", "Settings")

    def test_thread_safe_translator(self, zh_source: str) -> None:
        """A thread-safe translator behaves the same."""
        translator = Translator("zh_CN", thread_safe=True)
        translator.add_catalog(zh_source)

        assert translator.is_thread_safe
        assert translator.translate("AboutPage", "About") == ("关于", ())

    @pytest.mark.parametrize(
        "lookup",
        [
            lambda t: t.get_message("AboutPage", "About"),
            lambda t: t.has_message("AboutPage", "About"),
            lambda t: t.message_count,
            lambda t: t.__exit__(None, None, None),
        ],
        ids=["get_message", "has_message", "message_count", "exit"],
    )
    def test_lookups_wait_for_lock(
        self, zh_source: str, lookup: Callable[[Translator], object]
    ) -> None:
        """Lookups on a thread-safe translator wait while the lock is held."""
        translator = Translator("zh_CN", thread_safe=True)
        translator.add_catalog(zh_source)
        finished = threading.Event()

        def worker() -> None:
            lookup(translator)
            finished.set()

        with translator._lock:  # type: ignore[union-attr]
            thread = threading.Thread(target=worker)
            thread.start()
            assert not finished.wait(timeout=0.2)

        thread.join(timeout=5)
        assert finished.is_set()

    def test_concurrent_add_and_translate(self, zh_source: str) -> None:
        """Catalog registration and lookups may run in parallel."""
        translator = Translator("zh_CN", thread_safe=True)
        translator.add_catalog(zh_source)
        results: list[str] = []

        def reader() -> None:
            for _ in range(200):
                if translator.has_message("AboutPage", "About"):
                    results.append(translator.tr("AboutPage", "About"))

        threads = [threading.Thread(target=reader) for _ in range(4)]
        threads.append(
            threading.Thread(
                target=lambda: [translator.add_catalog(zh_source) for _ in range(20)]
            )
        )
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert set(results) == {"关于"}


class TestNumerus:
    """Plural form selection."""

    def test_single_form_language(self, zh: Translator) -> None:
        """Chinese uses its only form for every count."""
        assert zh.translate("DonationManager", "%n coins", n=1) == ("1 个硬币", ())
        assert zh.translate("DonationManager", "%n coins", n=5) == ("5 个硬币", ())

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(1, "1 монета"), (3, "3 монеты"), (5, "5 монет"), (21, "21 монета"), (12, "12 монет")],
    )
    def test_three_form_language(self, ru_source: str, n: int, expected: str) -> None:
        """Russian picks one, few or many."""
        translator = Translator("ru_RU")
        translator.add_catalog(ru_source)

        assert translator.translate("DonationManager", "%n coins", n=n) == (expected, ())

    def test_count_missing(self, zh: Translator) -> None:
        """A numerus message without count reports it and keeps %n."""
        result, errors = zh.translate("DonationManager", "%n coins")

        assert result == "%n 个硬币"
        assert _codes(errors) == [DiagnosticCode.COUNT_NOT_PROVIDED]

    def test_empty_selected_form_uses_source(self) -> None:
        """An empty form falls back to the source text for that count."""
        translator = Translator("en")
        translator.add_catalog(
            _catalog(
                '<message numerus="yes"><source>%n file(s)</source><translation>'
                "<numerusform>%n file</numerusform><numerusform></numerusform>"
                "</translation></message>",
                language="en",
            )
        )

        assert translator.translate("Main", "%n file(s)", n=1) == ("1 file", ())
        result, errors = translator.translate("Main", "%n file(s)", n=4)
        assert result == "4 file(s)"
        assert _codes(errors) == [DiagnosticCode.TRANSLATION_EMPTY]


class TestUnfinished:
    """Unfinished and empty translations."""

    def test_finished_message_in_mostly_unfinished_catalog(self, fa_source: str) -> None:
        """Finished messages are used."""
        translator = Translator("fa")
        translator.add_catalog(fa_source)

        assert translator.translate("AboutPage", "Translate") == ("ترجمه", ())

    def test_empty_unfinished_uses_source(self, fa_source: str) -> None:
        """An empty translation is a miss reported as empty."""
        translator = Translator("fa")
        translator.add_catalog(fa_source)

        result, errors = translator.translate("AboutPage", "About")

        assert result == "About"
        assert _codes(errors) == [DiagnosticCode.TRANSLATION_EMPTY]

    def test_empty_numerus_uses_source(self, fa_source: str) -> None:
        """Empty numerus forms fall back to the source with the count filled."""
        translator = Translator("fa")
        translator.add_catalog(fa_source)

        result, errors = translator.translate(
            "AboutPage", "You donated <b>%n coins</b>. Thank you!", n=3
        )

        assert result == "You donated <b>3 coins</b>. Thank you!"
        assert _codes(errors) == [DiagnosticCode.TRANSLATION_EMPTY]

    def test_unfinished_used_by_default(self) -> None:
        """Non-empty unfinished translations are used by default."""
        translator = Translator("de")
        translator.add_catalog(
            _catalog('<message><source>Hi</source><translation type="unfinished">Hallo</translation></message>')
        )

        assert translator.translate("Main", "Hi") == ("Hallo", ())

    def test_unfinished_excluded(self) -> None:
        """include_unfinished=False treats unfinished translations as missing."""
        translator = Translator("de", include_unfinished=False)
        translator.add_catalog(
            _catalog('<message><source>Hi</source><translation type="unfinished">Hallo</translation></message>')
        )

        result, errors = translator.translate("Main", "Hi")

        assert result == "Hi"
        assert _codes(errors) == [DiagnosticCode.TRANSLATION_UNFINISHED]
        assert not translator.has_message("Main", "Hi")
