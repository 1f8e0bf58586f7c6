"""TS message introspection for placeholder extraction.

Reports which runtime values a message needs before it is translated:
the positional placeholders of the source text and of every translated
form, and whether the numerus count is interpolated.

Python 3.13+.
"""

from dataclasses import dataclass

from tslexengine.enums import PlaceholderKind
from tslexengine.runtime.placeholders import Placeholder, extract_placeholders
from tslexengine.syntax.ast import Message

__all__ = [
    "MessageIntrospection",
    "extract_arguments",
    "introspect_message",
]


@dataclass(frozen=True, slots=True)
class MessageIntrospection:
    """Complete introspection result for a message."""

    source: str
    """Source text of the message."""

    comment: str
    """Disambiguation comment."""

    numerus: bool
    """Whether the message is selected by a plural count."""

    source_placeholders: tuple[Placeholder, ...]
    """Placeholder tokens of the source text, in order of appearance."""

    source_numbers: frozenset[int]
    """Distinct positional numbers used by the source text."""

    translation_numbers: frozenset[int]
    """Distinct positional numbers used by any translated text or form."""

    uses_count: bool
    """Whether the source or any translated text interpolates %n."""

    @property
    def argument_count(self) -> int:
        """Number of positional arguments the source text consumes."""
        return len(self.source_numbers)

    @property
    def dropped_numbers(self) -> frozenset[int]:
        """Source placeholders no translated text uses."""
        return self.source_numbers - self.translation_numbers

    def requires_argument(self, number: int) -> bool:
        """Check if the source text uses placeholder %number."""
        return number in self.source_numbers


def introspect_message(message: Message) -> MessageIntrospection:
    """Introspect a message and extract placeholder metadata.

    Args:
        message: Message node to introspect

    Returns:
        Introspection result for source and translation

    Raises:
        TypeError: If message is not a Message node

    Example:
        >>> info = introspect_message(Message(source="%1 (build %2)"))
        >>> sorted(info.source_numbers)
        [1, 2]
    """
    if not isinstance(message, Message):
        msg = f"Expected Message, got {type(message).__name__}"  # type: ignore[unreachable]
        raise TypeError(msg)

    source_placeholders = extract_placeholders(message.source)
    translated = [
        placeholder
        for text in message.translation.texts
        for placeholder in extract_placeholders(text)
    ]

    return MessageIntrospection(
        source=message.source,
        comment=message.comment,
        numerus=message.numerus,
        source_placeholders=source_placeholders,
        source_numbers=frozenset(p.number for p in source_placeholders if p.number is not None),
        translation_numbers=frozenset(p.number for p in translated if p.number is not None),
        uses_count=any(
            p.kind == PlaceholderKind.COUNT for p in (*source_placeholders, *translated)
        ),
    )


def extract_arguments(message: Message) -> frozenset[int]:
    """Extract positional placeholder numbers from a message's source (simplified API).

    Example:
        >>> extract_arguments(Message(source="Version: <b>%1</b>"))
        frozenset({1})
    """
    return introspect_message(message).source_numbers
