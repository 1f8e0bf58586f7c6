"""Hypothesis-based fuzz tests for the TS reader and translator.

The reader either returns a Catalog or raises TSSyntaxError; lookups
never raise, whatever the catalog and arguments.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from tslexengine import Translator
from tslexengine.diagnostics import TSSyntaxError
from tslexengine.syntax import Catalog, parse, serialize

from tests.strategies import LOCALES, ts_catalogs, ts_text_with_placeholders

pytestmark = pytest.mark.fuzz

_TS_FRAGMENTS = st.sampled_from(
    [
        "<TS>", "</TS>", "<context>", "</context>", "<name>C</name>", "<message>",
        "</message>", '<message numerus="yes">', "<source>", "</source>",
        "<translation>", '<translation type="unfinished">', "</translation>",
        "<numerusform>", "</numerusform>", '<location line="+1"/>',
        '<byte value="x1b"/>', "%1", "%n", "&amp;", "text",
    ]
)


class TestParserRobustness:
    """parse() accepts or rejects, nothing else."""

    @given(st.lists(_TS_FRAGMENTS, max_size=40).map("".join))
    @settings(max_examples=1000)
    def test_fragment_soup(self, source: str) -> None:
        """Random tag sequences parse or raise TSSyntaxError."""
        try:
            catalog = parse(source)
        except TSSyntaxError:
            event("outcome=rejected")
            return
        event("outcome=parsed")
        assert isinstance(catalog, Catalog)

    @given(st.binary(max_size=512))
    @settings(max_examples=500)
    def test_arbitrary_bytes(self, data: bytes) -> None:
        """Arbitrary bytes never escape as anything but TSSyntaxError."""
        try:
            parse(data)
        except TSSyntaxError:
            pass


class TestTranslatorRobustness:
    """Lookups over generated catalogs."""

    @given(
        catalog=ts_catalogs(),
        locale=LOCALES,
        n=st.one_of(st.none(), st.integers(min_value=0, max_value=10_000)),
        args=st.lists(st.text(max_size=8), max_size=4),
    )
    @settings(max_examples=300)
    def test_every_message_translates(
        self, catalog: Catalog, locale: str, n: int | None, args: list[str]
    ) -> None:
        """Every message in a catalog yields a string."""
        translator = Translator(locale)
        translator.add_catalog(serialize(catalog))

        for context_name, message in catalog.iter_messages():
            result, _errors = translator.translate(
                context_name, message.source, message.comment, args, n=n
            )
            assert isinstance(result, str)

    @given(ts_text_with_placeholders(), LOCALES)
    def test_missing_message_returns_source_shape(self, source: str, locale: str) -> None:
        """Without catalogs the result is the source with arguments filled."""
        result, errors = Translator(locale).translate("Ctx", source)

        assert result == source
        assert errors
