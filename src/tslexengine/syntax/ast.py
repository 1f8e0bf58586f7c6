"""TS catalog node definitions.

Immutable model of a Qt Linguist TS document: a Catalog holds Contexts,
a Context holds Messages, and every Message carries its source text,
disambiguation, provenance Locations and a Translation.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from typing import TypeAlias
from dataclasses import dataclass, field

from tslexengine.enums import TranslationType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Annotation",
    "Location",
    # Catalog structure
    "Catalog",
    "Context",
    "Message",
    "Translation",
    "Junk",
    # Type aliases
    "MessageKey",
]

MessageKey: TypeAlias = tuple[str, str]
"""(source, comment) pair identifying a message inside its context."""


# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Location:
    """Source code position a message was extracted from.

    Attributes:
        filename: Path relative to the TS file (e.g. "../src/main.cpp")
        line: 1-indexed line number, None when lupdate omitted it

    Example:
        <location filename="../qml/bb10/AboutPage.qml" line="42"/>
        Location(filename="../qml/bb10/AboutPage.qml", line=42)
    """

    filename: str | None
    line: int | None = None

    def __str__(self) -> str:
        name = self.filename or "<unknown>"
        return f"{name}:{self.line}" if self.line is not None else name


@dataclass(frozen=True, slots=True)
class Annotation:
    """Parse error annotation attached to Junk.

    Attributes:
        code: Error code (e.g., "message-without-source")
        message: Human-readable error message
        line: Line of the offending element, if known
    """

    code: str
    message: str
    line: int | None = None


# ============================================================================
# TRANSLATION UNITS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Translation:
    """Translated text of a message.

    Plain messages use ``text``; numerus messages use ``forms``, one entry
    per plural category of the target language in CLDR order.

    Attributes:
        text: Translated text (empty for numerus messages)
        forms: Numerus forms (empty for plain messages)
        type: Translation state from the ``type`` attribute
        variants: True when the text came from length variants
    """

    text: str = ""
    forms: tuple[str, ...] = ()
    type: TranslationType = TranslationType.FINISHED
    variants: bool = False

    @property
    def is_numerus(self) -> bool:
        """Whether this translation carries numerus forms."""
        return len(self.forms) > 0

    @property
    def is_empty(self) -> bool:
        """True when there is no translated text at all.

        A numerus translation counts as empty when every form is empty.
        """
        if self.forms:
            return all(not form for form in self.forms)
        return not self.text

    @property
    def is_finished(self) -> bool:
        """Whether the translation has no ``type`` attribute."""
        return self.type == TranslationType.FINISHED

    @property
    def is_active(self) -> bool:
        """Whether the message is still used by the application."""
        return self.type.is_active

    @property
    def texts(self) -> tuple[str, ...]:
        """All translated strings: the forms, or the text alone."""
        return self.forms if self.forms else (self.text,)


@dataclass(frozen=True, slots=True)
class Message:
    """A translation unit.

    Attributes:
        source: Source-language text (the lookup key)
        translation: Translated text and its state
        comment: Disambiguation comment (part of the lookup key)
        extra_comment: Developer comment for translators (//: in C++)
        translator_comment: Translator's own note
        old_source: Previous source text for fuzzy-matched messages
        old_comment: Previous disambiguation for fuzzy-matched messages
        locations: Source positions the message was extracted from
        numerus: True for messages selected by a plural count
        id: Optional message id (qsTrId / -idbased workflows)
        extras: ``extra-*`` elements as (name, text) pairs, in document order
    """

    source: str
    translation: Translation = field(default_factory=Translation)
    comment: str = ""
    extra_comment: str = ""
    translator_comment: str = ""
    old_source: str = ""
    old_comment: str = ""
    locations: tuple[Location, ...] = ()
    numerus: bool = False
    id: str = ""
    extras: tuple[tuple[str, str], ...] = ()

    @property
    def key(self) -> MessageKey:
        """Lookup key inside the message's context."""
        return (self.source, self.comment)


@dataclass(frozen=True, slots=True)
class Junk:
    """Content the parser could not turn into a message.

    Attributes:
        content: Serialized XML of the offending element
        context: Name of the enclosing context ("" when unknown)
        annotations: Structured parse errors
    """

    content: str
    context: str = ""
    annotations: tuple[Annotation, ...] = ()


@dataclass(frozen=True, slots=True)
class Context:
    """A named grouping of messages, one per UI component or class.

    Attributes:
        name: Context name (usually a class or QML file name)
        messages: Messages in document order
        comment: Optional context comment
    """

    name: str
    messages: tuple[Message, ...] = ()
    comment: str = ""

    def get(self, source: str, comment: str = "") -> Message | None:
        """Find the last message with the given key.

        Later duplicates win, matching how the runtime registers them.
        """
        for message in reversed(self.messages):
            if message.source == source and message.comment == comment:
                return message
        return None


@dataclass(frozen=True, slots=True)
class Catalog:
    """Root node: one TS document for one target language.

    Attributes:
        language: Target language code from the ``language`` attribute
        source_language: Source language code (``sourcelanguage``)
        version: TS format version ("2.0", "2.1")
        contexts: Contexts in document order
        junk: Unreadable fragments collected during parsing
    """

    language: str = ""
    source_language: str = ""
    version: str = ""
    contexts: tuple[Context, ...] = ()
    junk: tuple[Junk, ...] = ()

    def iter_messages(self) -> Iterator[tuple[str, Message]]:
        """Yield (context_name, message) pairs in document order."""
        for context in self.contexts:
            for message in context.messages:
                yield context.name, message

    @property
    def message_count(self) -> int:
        """Total number of messages across all contexts."""
        return sum(len(context.messages) for context in self.contexts)

    def get_context(self, name: str) -> Context | None:
        """Find the first context with the given name."""
        for context in self.contexts:
            if context.name == name:
                return context
        return None
