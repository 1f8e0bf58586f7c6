"""Qt Linguist TS document reader.

Turns TS XML (as written by lupdate and Qt Linguist) into an immutable
Catalog. Document-level failures raise TSSyntaxError; a message the
reader cannot use becomes Junk and parsing continues (robustness principle).

Supported TS details:
    - ``<byte value="x1B"/>`` escapes for characters XML 1.0 cannot carry
    - relative locations (``line="+3"``, omitted ``filename``)
    - numerus forms and length variants
    - ``extra-*`` elements

Python 3.13+. Zero external dependencies.
"""

import logging
import sys
import xml.etree.ElementTree as ET

from tslexengine.constants import MAX_SOURCE_SIZE
from tslexengine.diagnostics import ErrorTemplate, TSSyntaxError
from tslexengine.enums import TranslationType

from .ast import Annotation, Catalog, Context, Junk, Location, Message, Translation

__all__ = ["TSParser", "parse"]

logger = logging.getLogger(__name__)

_TRANSLATION_TYPES: dict[str, TranslationType] = {
    "unfinished": TranslationType.UNFINISHED,
    "vanished": TranslationType.VANISHED,
    "obsolete": TranslationType.OBSOLETE,
}


def _decode_byte(value: str) -> str:
    """Decode the value of a <byte> element ("x1B" hex or "27" decimal).

    Unparseable values and code points past U+10FFFF decode to "".
    """
    try:
        if value[:1] in ("x", "X"):
            code = int(value[1:], 16)
        else:
            code = int(value)
    except ValueError:
        return ""
    if not 0 <= code <= sys.maxunicode:
        return ""
    return chr(code)


def _element_text(element: ET.Element) -> str:
    """Collect element text, expanding <byte> children in place."""
    parts = [element.text or ""]
    for child in element:
        if child.tag == "byte":
            parts.append(_decode_byte(child.get("value", "")))
        parts.append(child.tail or "")
    return "".join(parts)


def _variant_text(element: ET.Element) -> tuple[str, bool]:
    """Text of an element that may hold <lengthvariant> children.

    Returns the first (longest) variant and whether variants were present.
    """
    variants = element.findall("lengthvariant")
    if variants:
        return _element_text(variants[0]), True
    return _element_text(element), False


class TSParser:
    """Reader for Qt Linguist TS documents.

    A parser instance is reusable; relative-location state is reset for
    every document.

    Attributes:
        max_source_size: Maximum accepted document size in bytes (0 disables)

    Example:
        >>> parser = TSParser()
        >>> catalog = parser.parse(ts_source)
        >>> catalog.language
        'zh_CN'
    """

    __slots__ = ("_current_file", "_current_line", "max_source_size")

    def __init__(self, *, max_source_size: int | None = None) -> None:
        self.max_source_size = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        self._current_file: str | None = None
        self._current_line: dict[str | None, int] = {}

    def parse(self, source: str | bytes) -> Catalog:
        """Parse a TS document.

        Args:
            source: TS document as text or UTF-8 bytes

        Returns:
            Catalog with contexts in document order

        Raises:
            TSSyntaxError: If the document is too large, not well-formed,
                or its root element is not <TS>
        """
        data = source.encode("utf-8") if isinstance(source, str) else source

        if self.max_source_size and len(data) > self.max_source_size:
            raise TSSyntaxError(ErrorTemplate.source_too_large(len(data), self.max_source_size))

        try:
            root = ET.fromstring(data)  # noqa: S314 - expat limits entity expansion
        except ET.ParseError as e:
            line, _column = e.position
            raise TSSyntaxError(ErrorTemplate.xml_malformed(str(e), line)) from e

        if root.tag != "TS":
            raise TSSyntaxError(ErrorTemplate.root_element_invalid(root.tag))

        self._current_file = None
        self._current_line = {}

        contexts: list[Context] = []
        junk: list[Junk] = []
        for element in root.findall("context"):
            context, context_junk = self._parse_context(element)
            contexts.append(context)
            junk.extend(context_junk)

        catalog = Catalog(
            language=root.get("language", ""),
            source_language=root.get("sourcelanguage", ""),
            version=root.get("version", ""),
            contexts=tuple(contexts),
            junk=tuple(junk),
        )
        logger.debug(
            "Parsed TS catalog (language=%r): %d contexts, %d messages, %d junk",
            catalog.language,
            len(catalog.contexts),
            catalog.message_count,
            len(catalog.junk),
        )
        return catalog

    def _parse_context(self, element: ET.Element) -> tuple[Context, list[Junk]]:
        name_element = element.find("name")
        name = _element_text(name_element) if name_element is not None else ""
        comment_element = element.find("comment")
        comment = _element_text(comment_element) if comment_element is not None else ""

        messages: list[Message] = []
        junk: list[Junk] = []
        for message_element in element.findall("message"):
            match self._parse_message(message_element, name):
                case Message() as message:
                    messages.append(message)
                case Junk() as entry:
                    junk.append(entry)

        return Context(name=name, messages=tuple(messages), comment=comment), junk

    def _parse_message(self, element: ET.Element, context_name: str) -> Message | Junk:
        source_element = element.find("source")
        if source_element is None:
            return Junk(
                content=ET.tostring(element, encoding="unicode"),
                context=context_name,
                annotations=(
                    Annotation(
                        code="message-without-source",
                        message=f"Message in context '{context_name}' has no <source>",
                    ),
                ),
            )

        numerus = element.get("numerus") == "yes"
        fields: dict[str, str] = {}
        locations: list[Location] = []
        extras: list[tuple[str, str]] = []
        translation = Translation(type=TranslationType.UNFINISHED)

        for child in element:
            match child.tag:
                case "location":
                    location = self._parse_location(child)
                    if location is not None:
                        locations.append(location)
                case "translation":
                    translation = self._parse_translation(child, numerus=numerus)
                case "oldsource" | "comment" | "oldcomment" | "extracomment" | "translatorcomment":
                    fields[child.tag] = _element_text(child)
                case tag if tag.startswith("extra-"):
                    extras.append((tag.removeprefix("extra-"), _element_text(child)))
                case _:
                    pass

        return Message(
            source=_element_text(source_element),
            translation=translation,
            comment=fields.get("comment", ""),
            extra_comment=fields.get("extracomment", ""),
            translator_comment=fields.get("translatorcomment", ""),
            old_source=fields.get("oldsource", ""),
            old_comment=fields.get("oldcomment", ""),
            locations=tuple(locations),
            numerus=numerus,
            id=element.get("id", ""),
            extras=tuple(extras),
        )

    def _parse_location(self, element: ET.Element) -> Location | None:
        """Resolve a <location>, tracking lupdate's relative-location state.

        An omitted filename refers to the file of the previous location.
        Signed line values are offsets from the last relative line of that
        file; absolute lines do not move that anchor.
        """
        filename = element.get("filename")
        if filename:
            self._current_file = filename
        else:
            filename = self._current_file

        raw_line = element.get("line")
        if not raw_line:
            return Location(filename=filename, line=None)

        try:
            line = int(raw_line)
        except ValueError:
            logger.debug("Skipping location with invalid line %r", raw_line)
            return None

        if raw_line.startswith(("+", "-")):
            line = self._current_line.get(filename, 0) + line
            self._current_line[filename] = line

        return Location(filename=filename, line=line)

    @staticmethod
    def _parse_translation(element: ET.Element, *, numerus: bool) -> Translation:
        translation_type = _TRANSLATION_TYPES.get(
            element.get("type", ""), TranslationType.FINISHED
        )

        if numerus:
            form_elements = element.findall("numerusform")
            if form_elements:
                forms = tuple(_variant_text(form)[0] for form in form_elements)
                has_variants = any(form.get("variants") == "yes" for form in form_elements)
                return Translation(forms=forms, type=translation_type, variants=has_variants)
            # numerus message translated as plain text: a single form
            text = _element_text(element)
            return Translation(forms=(text,) if text.strip() else (), type=translation_type)

        text, has_variants = _variant_text(element)
        return Translation(text=text, type=translation_type, variants=has_variants)


def parse(source: str | bytes, *, max_source_size: int | None = None) -> Catalog:
    """Parse a TS document into a Catalog.

    Args:
        source: TS document as text or UTF-8 bytes
        max_source_size: Maximum accepted size in bytes (default: 10 MB)

    Returns:
        Parsed Catalog

    Raises:
        TSSyntaxError: If the document cannot be read as TS

    Example:
        >>> catalog = parse('<TS version="2.1" language="fa"></TS>')
        >>> catalog.language
        'fa'
    """
    return TSParser(max_source_size=max_source_size).parse(source)
