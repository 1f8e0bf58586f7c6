"""Positional placeholder extraction and substitution.

Qt message strings mark runtime values with positional placeholders:

    %1 .. %99   positional argument
    %L1         positional argument, formatted as a localized number
    %n          the numerus count
    %Ln         the numerus count, formatted as a localized number

Translators may reorder placeholders freely. Substitution follows
QString::arg(): the distinct placeholder numbers present in the text are
sorted, and the i-th lowest number receives the i-th argument. With the
usual contiguous numbering this is simply %1 -> args[0], %2 -> args[1].

Substitution is a single pass over the original text: inserted values are
never scanned for placeholders again.

Python 3.13+. Depends on Babel for localized number formatting.
"""

import re
from collections.abc import Sequence
from typing import TypeAlias
from dataclasses import dataclass
from decimal import Decimal

from babel.core import UnknownLocaleError
from babel.numbers import format_decimal

from tslexengine.diagnostics import ErrorTemplate, TSFormatError
from tslexengine.enums import PlaceholderKind
from tslexengine.locale_utils import normalize_locale

__all__ = [
    "ArgValue",
    "Placeholder",
    "extract_placeholders",
    "positional_numbers",
    "substitute",
]

ArgValue: TypeAlias = str | int | float | Decimal
"""Value accepted for a positional placeholder."""

# %1..%99 (no leading zero) or %n, optionally localized with L
_PLACEHOLDER_RE = re.compile(r"%(L?)(n|[1-9][0-9]?)")


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A placeholder token found in message text.

    Attributes:
        token: The literal token (e.g. "%2", "%Ln")
        kind: POSITIONAL or COUNT
        number: Placeholder number for positional tokens, None for %n
        localized: True for %L variants
        start: Offset of the token in the text
        end: Offset just past the token
    """

    token: str
    kind: PlaceholderKind
    number: int | None
    localized: bool
    start: int
    end: int


def extract_placeholders(text: str) -> tuple[Placeholder, ...]:
    """Find all placeholder tokens in text, in order of appearance.

    Examples:
        >>> [p.token for p in extract_placeholders("%1 (build %2)")]
        ['%1', '%2']
        >>> extract_placeholders("%n coins")[0].kind
        <PlaceholderKind.COUNT: 'count'>
    """
    placeholders: list[Placeholder] = []
    for match in _PLACEHOLDER_RE.finditer(text):
        localized, body = match.groups()
        if body == "n":
            kind, number = PlaceholderKind.COUNT, None
        else:
            kind, number = PlaceholderKind.POSITIONAL, int(body)
        placeholders.append(
            Placeholder(
                token=match.group(0),
                kind=kind,
                number=number,
                localized=bool(localized),
                start=match.start(),
                end=match.end(),
            )
        )
    return tuple(placeholders)


def positional_numbers(text: str) -> frozenset[int]:
    """Distinct positional placeholder numbers used in text.

    Example:
        >>> sorted(positional_numbers("%2 of %1, then %2"))
        [1, 2]
    """
    return frozenset(
        p.number for p in extract_placeholders(text) if p.number is not None
    )


def _format_value(
    value: ArgValue,
    *,
    localized: bool,
    token: str,
    locale: str,
    errors: list[TSFormatError],
) -> str:
    if not localized:
        return str(value)

    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        errors.append(
            TSFormatError(
                ErrorTemplate.number_format_failed(token, value, locale), placeholder=token
            )
        )
        return str(value)

    try:
        return format_decimal(value, locale=normalize_locale(locale))
    except (UnknownLocaleError, ValueError):
        errors.append(
            TSFormatError(
                ErrorTemplate.number_format_failed(token, value, locale), placeholder=token
            )
        )
        return str(value)


def substitute(
    text: str,
    args: Sequence[ArgValue] = (),
    *,
    count: int | None = None,
    locale: str = "en_US",
) -> tuple[str, tuple[TSFormatError, ...]]:
    """Replace placeholders in text with runtime values.

    Args:
        text: Message text containing placeholders
        args: Positional arguments, assigned to placeholder numbers in
            ascending order
        count: Value for %n / %Ln; None leaves count tokens untouched
        locale: Locale for %L number formatting

    Returns:
        Tuple of (substituted_text, errors)
        - Tokens without a matching argument stay in the output verbatim
        - errors holds TSFormatError for missing and unused arguments and
          for %L values that are not numbers

    Examples:
        >>> substitute("%1 (build %2)", ["1.4", "27"])
        ('1.4 (build 27)', ())
        >>> substitute("%2 ← %1", ["a", "b"])
        ('b ← a', ())
        >>> substitute("%Ln coins", count=1500, locale="en_US")
        ('1,500 coins', ())
    """
    errors: list[TSFormatError] = []
    placeholders = extract_placeholders(text)

    numbers = sorted({p.number for p in placeholders if p.number is not None})
    rank = {number: index for index, number in enumerate(numbers)}

    reported_missing: set[int] = set()
    for number in numbers:
        if rank[number] >= len(args) and number not in reported_missing:
            reported_missing.add(number)
            token = f"%{number}"
            errors.append(
                TSFormatError(ErrorTemplate.argument_missing(token, len(args)), placeholder=token)
            )

    if len(args) > len(numbers):
        errors.append(TSFormatError(ErrorTemplate.argument_unused(len(numbers), len(numbers))))

    def _replace(match: re.Match[str]) -> str:
        localized, body = match.groups()
        token = match.group(0)
        if body == "n":
            if count is None:
                return token
            return _format_value(
                count, localized=bool(localized), token=token, locale=locale, errors=errors
            )
        index = rank[int(body)]
        if index >= len(args):
            return token
        return _format_value(
            args[index], localized=bool(localized), token=token, locale=locale, errors=errors
        )

    return _PLACEHOLDER_RE.sub(_replace, text), tuple(errors)
