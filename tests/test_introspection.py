"""Tests for message introspection."""

from __future__ import annotations

import pytest

from tslexengine.introspection import extract_arguments, introspect_message
from tslexengine.syntax import Message, Translation, parse


class TestIntrospectMessage:
    """Placeholder metadata per message."""

    def test_source_placeholders(self) -> None:
        """Positional numbers of the source are reported."""
        info = introspect_message(Message(source="%1 (build %2)"))

        assert info.source_numbers == frozenset({1, 2})
        assert info.argument_count == 2
        assert info.requires_argument(2)
        assert not info.requires_argument(3)
        assert [p.token for p in info.source_placeholders] == ["%1", "%2"]

    def test_dropped_placeholders(self) -> None:
        """Source placeholders missing from every translated text are listed."""
        info = introspect_message(
            Message(source="%1 of %2", translation=Translation(text="%2"))
        )

        assert info.translation_numbers == frozenset({2})
        assert info.dropped_numbers == frozenset({1})

    def test_numerus_count(self, zh_source: str) -> None:
        """%n use and the numerus flag are reported."""
        coins = parse(zh_source).get_context("DonationManager").messages[0]

        info = introspect_message(coins)

        assert info.numerus
        assert info.uses_count
        assert info.argument_count == 0

    def test_comment_kept(self, zh_source: str) -> None:
        """The disambiguation comment identifies the message."""
        unknown = parse(zh_source).get_context("LanguageListModel").messages[0]

        info = introspect_message(unknown)

        assert info.source == "Unknown (%1)"
        assert info.comment == "Unknown language"

    def test_rejects_other_types(self) -> None:
        """Only Message nodes are accepted."""
        with pytest.raises(TypeError, match="Expected Message"):
            introspect_message("About")  # type: ignore[arg-type]

    def test_extract_arguments(self) -> None:
        """The simplified API returns source placeholder numbers."""
        assert extract_arguments(Message(source="Version: <b>%1</b>")) == frozenset({1})
