"""Serialize a Catalog back to TS XML.

Produces the layout lupdate writes (XML declaration, ``<!DOCTYPE TS>``,
four-space indentation, absolute locations), so regenerated files diff
cleanly against tool output. Useful for:
- Catalog transformations (merging, pruning vanished messages)
- Writing catalogs built programmatically
- Property-based testing (roundtrip: parse -> serialize -> parse)

Python 3.13+.
"""

from tslexengine.constants import DEFAULT_TS_VERSION
from tslexengine.enums import TranslationType

from .ast import Catalog, Context, Location, Message, Translation

__all__ = ["TSSerializer", "serialize"]

_INDENT = "    "


def escape_text(text: str) -> str:
    """Escape text for TS element content or attribute values.

    Control characters XML 1.0 cannot carry are written as
    ``<byte value="xHH"/>``; carriage returns as character references
    so XML end-of-line normalization does not drop them.
    """
    parts: list[str] = []
    for char in text:
        match char:
            case "&":
                parts.append("&amp;")
            case "<":
                parts.append("&lt;")
            case ">":
                parts.append("&gt;")
            case '"':
                parts.append("&quot;")
            case "'":
                parts.append("&apos;")
            case "\r":
                parts.append("&#13;")
            case "\n" | "\t":
                parts.append(char)
            case _ if ord(char) < 0x20:
                parts.append(f'<byte value="x{ord(char):x}"/>')
            case _:
                parts.append(char)
    return "".join(parts)


def _escape_attribute(text: str) -> str:
    # <byte> is element content only: tab, LF and CR become references so
    # attribute normalization keeps them, other control characters are dropped
    parts: list[str] = []
    for char in text:
        if char in "\t\n\r":
            parts.append(f"&#{ord(char)};")
        elif ord(char) >= 0x20:
            parts.append(escape_text(char))
    return "".join(parts)


class TSSerializer:
    """Writes Catalog nodes as TS XML.

    Junk entries are not written: they were never part of a valid message.
    A location without filename is only written before the first location
    that names a file, since a reader attributes it to that file afterwards.
    """

    __slots__ = ("_file_named",)

    def __init__(self) -> None:
        self._file_named = False

    def serialize(self, catalog: Catalog) -> str:
        """Serialize a catalog to TS XML text.

        Args:
            catalog: Catalog to write

        Returns:
            TS document ending with a newline
        """
        self._file_named = False
        lines = ['<?xml version="1.0" encoding="utf-8"?>', "<!DOCTYPE TS>"]

        attributes = [f'version="{_escape_attribute(catalog.version or DEFAULT_TS_VERSION)}"']
        if catalog.language:
            attributes.append(f'language="{_escape_attribute(catalog.language)}"')
        if catalog.source_language:
            attributes.append(f'sourcelanguage="{_escape_attribute(catalog.source_language)}"')
        lines.append(f"<TS {' '.join(attributes)}>")

        for context in catalog.contexts:
            self._write_context(context, lines)

        lines.append("</TS>")
        return "\n".join(lines) + "\n"

    def _write_context(self, context: Context, lines: list[str]) -> None:
        lines.append("<context>")
        lines.append(f"{_INDENT}<name>{escape_text(context.name)}</name>")
        if context.comment:
            lines.append(f"{_INDENT}<comment>{escape_text(context.comment)}</comment>")
        for message in context.messages:
            self._write_message(message, lines)
        lines.append("</context>")

    def _write_message(self, message: Message, lines: list[str]) -> None:
        pad = _INDENT * 2
        attributes = ""
        if message.id:
            attributes += f' id="{_escape_attribute(message.id)}"'
        if message.numerus:
            attributes += ' numerus="yes"'
        lines.append(f"{_INDENT}<message{attributes}>")

        for location in message.locations:
            if not location.filename and self._file_named:
                continue
            self._file_named = self._file_named or bool(location.filename)
            lines.append(f"{pad}{self._location(location)}")

        lines.append(f"{pad}<source>{escape_text(message.source)}</source>")
        for tag, value in (
            ("oldsource", message.old_source),
            ("comment", message.comment),
            ("oldcomment", message.old_comment),
            ("extracomment", message.extra_comment),
            ("translatorcomment", message.translator_comment),
        ):
            if value:
                lines.append(f"{pad}<{tag}>{escape_text(value)}</{tag}>")

        self._write_translation(message.translation, lines, numerus=message.numerus)

        for name, value in message.extras:
            lines.append(f"{pad}<extra-{name}>{escape_text(value)}</extra-{name}>")

        lines.append(f"{_INDENT}</message>")

    @staticmethod
    def _location(location: Location) -> str:
        attributes = ""
        if location.filename:
            attributes += f' filename="{_escape_attribute(location.filename)}"'
        if location.line is not None:
            attributes += f' line="{location.line}"'
        return f"<location{attributes}/>"

    @staticmethod
    def _write_translation(translation: Translation, lines: list[str], *, numerus: bool) -> None:
        pad = _INDENT * 2
        attributes = ""
        if translation.type != TranslationType.FINISHED:
            attributes += f' type="{translation.type}"'

        if numerus and translation.forms:
            lines.append(f"{pad}<translation{attributes}>")
            for form in translation.forms:
                if translation.variants:
                    lines.append(
                        f'{pad}{_INDENT}<numerusform variants="yes">'
                        f"<lengthvariant>{escape_text(form)}</lengthvariant></numerusform>"
                    )
                else:
                    lines.append(f"{pad}{_INDENT}<numerusform>{escape_text(form)}</numerusform>")
            lines.append(f"{pad}</translation>")
            return

        if translation.variants:
            attributes += ' variants="yes"'
            lines.append(
                f"{pad}<translation{attributes}>"
                f"<lengthvariant>{escape_text(translation.text)}</lengthvariant></translation>"
            )
            return

        lines.append(f"{pad}<translation{attributes}>{escape_text(translation.text)}</translation>")


def serialize(catalog: Catalog) -> str:
    """Serialize a Catalog to TS XML.

    Args:
        catalog: Catalog to serialize

    Returns:
        TS document text

    Example:
        >>> text = serialize(parse(source))
        >>> text.splitlines()[1]
        '<!DOCTYPE TS>'
    """
    return TSSerializer().serialize(catalog)
