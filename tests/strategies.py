"""Hypothesis strategies for generating TS catalogs and message text.

Provides custom strategies for property-based testing of the TS parser,
serializer, and placeholder substitution.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

from tslexengine.enums import TranslationType
from tslexengine.syntax.ast import Catalog, Context, Location, Message, Translation

# Characters XML 1.0 cannot carry directly are exercised separately
# through <byte> escapes; plain text stays printable.
_TEXT_ALPHABET = st.characters(
    categories=("L", "N", "P", "Zs", "S"),
    exclude_characters="\x00",
)

# Locales with distinct numerus form counts: 1 (zh), 2 (en), 3 (ru), 6 (ar)
LOCALES = st.sampled_from(["zh_CN", "ja", "en", "de", "fa", "fr", "ru", "pl", "ar"])


@composite
def ts_identifiers(draw: st.DrawFn) -> str:
    """Generate context names as lupdate writes them (class or QML file names)."""
    first = draw(st.sampled_from(string.ascii_uppercase))
    rest = draw(st.text(alphabet=string.ascii_letters + string.digits + "_", max_size=20))
    return first + rest


@composite
def ts_text(draw: st.DrawFn, *, min_size: int = 0) -> str:
    """Generate message text without placeholders."""
    text = draw(st.text(alphabet=_TEXT_ALPHABET, min_size=min_size, max_size=40))
    return text.replace("%", "")


@composite
def ts_text_with_placeholders(draw: st.DrawFn) -> str:
    """Generate message text mixing literal runs and %N placeholders."""
    parts = draw(
        st.lists(
            st.one_of(
                ts_text(min_size=1),
                st.integers(min_value=1, max_value=9).map(lambda n: f"%{n}"),
            ),
            min_size=1,
            max_size=6,
        )
    )
    return "".join(parts)


@composite
def ts_translations(draw: st.DrawFn, *, numerus: bool) -> Translation:
    """Generate a Translation matching the numerus flag of its message."""
    translation_type = draw(st.sampled_from(list(TranslationType)))
    if numerus:
        forms = tuple(draw(st.lists(ts_text(min_size=1), min_size=1, max_size=6)))
        return Translation(forms=forms, type=translation_type)
    return Translation(text=draw(ts_text()), type=translation_type)


@composite
def ts_messages(draw: st.DrawFn) -> Message:
    """Generate a Message with absolute locations and optional comments."""
    numerus = draw(st.booleans())
    locations = tuple(
        draw(
            st.lists(
                st.builds(
                    Location,
                    filename=st.sampled_from(["../src/main.cpp", "../qml/AboutPage.qml"]),
                    line=st.integers(min_value=1, max_value=5000),
                ),
                max_size=3,
            )
        )
    )
    return Message(
        source=draw(ts_text(min_size=1)),
        translation=draw(ts_translations(numerus=numerus)),
        comment=draw(ts_text()),
        extra_comment=draw(ts_text()),
        locations=locations,
        numerus=numerus,
    )


@composite
def ts_catalogs(draw: st.DrawFn) -> Catalog:
    """Generate a Catalog with unique context names."""
    names = draw(st.lists(ts_identifiers(), min_size=0, max_size=4, unique=True))
    contexts = tuple(
        Context(name=name, messages=tuple(draw(st.lists(ts_messages(), max_size=4))))
        for name in names
    )
    return Catalog(
        language=draw(LOCALES),
        source_language=draw(st.sampled_from(["", "en"])),
        version=draw(st.sampled_from(["2.0", "2.1"])),
        contexts=contexts,
    )
